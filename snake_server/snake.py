"""Snake body and direction state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .grid import NONE, Cell, Direction


@dataclass
class SnakeState:
    """Ordered body (head first) plus the active and buffered directions.

    ``pending`` is written by input handlers at any time and only read by
    :meth:`resolve_direction` at the start of a tick.
    """

    body: List[Cell]
    direction: Direction = NONE
    pending: Direction = NONE

    @classmethod
    def spawn(cls, position: Cell) -> "SnakeState":
        """Create an idle single-cell snake at ``position``."""

        return cls(body=[position])

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def is_idle(self) -> bool:
        return self.direction.is_none

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, cell: object) -> bool:
        return cell in self.body

    def request(self, direction: Direction) -> None:
        """Buffer ``direction`` until the next tick."""

        self.pending = direction

    def resolve_direction(self) -> Direction:
        """Commit the pending direction unless it is idle or a 180 degree turn."""

        if not self.pending.is_none and not self.pending.is_reverse_of(self.direction):
            self.direction = self.pending
        return self.direction

    def advance(self, new_head: Cell, grow: bool) -> None:
        """Prepend ``new_head``; drop the tail unless the snake grows."""

        self.body.insert(0, new_head)
        if not grow:
            self.body.pop()

    def respawn(self, position: Cell) -> None:
        """Collapse to a single idle cell at ``position``."""

        self.body = [position]
        self.direction = NONE
        self.pending = NONE

    def to_snapshot(self) -> List[dict]:
        return [cell.to_dict() for cell in self.body]
