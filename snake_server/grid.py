"""Wrap-around coordinate primitives for the square playing field."""

from __future__ import annotations

from dataclasses import dataclass


def wrap(coordinate: int, size: int) -> int:
    """Return ``coordinate`` folded into ``[0, size)``.

    Python's modulo already yields a non-negative result for a positive
    ``size``, so ``wrap(-1, 30) == 29``.
    """

    return coordinate % size


@dataclass(frozen=True)
class Direction:
    """A unit step on the grid, or ``(0, 0)`` while the snake is idle."""

    dx: int
    dy: int

    @property
    def is_none(self) -> bool:
        return self.dx == 0 and self.dy == 0

    def reversed(self) -> "Direction":
        return Direction(-self.dx, -self.dy)

    def is_reverse_of(self, other: "Direction") -> bool:
        """Return ``True`` if ``self`` points exactly opposite to ``other``."""

        return self.dx == -other.dx and self.dy == -other.dy


NONE = Direction(0, 0)
RIGHT = Direction(1, 0)
LEFT = Direction(-1, 0)
DOWN = Direction(0, 1)
UP = Direction(0, -1)

DIRECTIONS_BY_NAME: dict[str, Direction] = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


@dataclass(frozen=True)
class Cell:
    """A single grid cell. Hashable so it can live in sets."""

    x: int
    y: int

    def translate(self, direction: Direction, size: int) -> "Cell":
        """Step one cell along ``direction``, re-entering from the opposite edge."""

        return Cell(wrap(self.x + direction.dx, size), wrap(self.y + direction.dy, size))

    def in_grid(self, size: int) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}


def center(size: int) -> Cell:
    """Return the spawn cell in the middle of a ``size`` x ``size`` grid."""

    return Cell(size // 2, size // 2)
