"""Difficulty settings and the controller that applies them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional

from . import constants

if TYPE_CHECKING:
    from .engine import SimulationEngine

logger = logging.getLogger(__name__)


class InvalidDifficultyError(ValueError):
    """Raised for a difficulty the board cannot accommodate."""


def max_obstacles(grid_size: int) -> int:
    """Largest obstacle count that still leaves room for the snake to grow."""

    return int(grid_size * grid_size * constants.MAX_OBSTACLE_FRACTION) - constants.RESERVED_CELLS


@dataclass(frozen=True)
class Difficulty:
    """Speed, board size and obstacle count, validated on construction."""

    ticks_per_second: float
    grid_size: int
    obstacle_count: int

    def __post_init__(self) -> None:
        if isinstance(self.ticks_per_second, bool) or not isinstance(self.ticks_per_second, (int, float)):
            raise InvalidDifficultyError(f"ticks_per_second must be a number, got {self.ticks_per_second!r}")
        if not self.ticks_per_second > 0:
            raise InvalidDifficultyError(f"ticks_per_second must be positive, got {self.ticks_per_second}")
        if isinstance(self.grid_size, bool) or not isinstance(self.grid_size, int):
            raise InvalidDifficultyError(f"grid_size must be an integer, got {self.grid_size!r}")
        if self.grid_size < constants.MIN_GRID_SIZE:
            raise InvalidDifficultyError(
                f"grid_size must be at least {constants.MIN_GRID_SIZE}, got {self.grid_size}"
            )
        if isinstance(self.obstacle_count, bool) or not isinstance(self.obstacle_count, int):
            raise InvalidDifficultyError(f"obstacle_count must be an integer, got {self.obstacle_count!r}")
        limit = max_obstacles(self.grid_size)
        if not 0 <= self.obstacle_count <= limit:
            raise InvalidDifficultyError(
                f"obstacle_count must be between 0 and {limit} on a {self.grid_size}x{self.grid_size} grid, "
                f"got {self.obstacle_count}"
            )

    @property
    def seconds_per_tick(self) -> float:
        return 1.0 / self.ticks_per_second

    def to_dict(self) -> dict:
        return {
            "ticksPerSecond": self.ticks_per_second,
            "gridSize": self.grid_size,
            "obstacleCount": self.obstacle_count,
        }


PRESETS: Dict[str, Difficulty] = {
    name: Difficulty(*triple) for name, triple in constants.DIFFICULTY_PRESETS.items()
}


def preset(name: str) -> Difficulty:
    try:
        return PRESETS[name]
    except KeyError:
        raise InvalidDifficultyError(f"Unknown difficulty preset: {name!r}") from None


class DifficultyController:
    """Hold the active difficulty and push changes into the engine.

    A change is validated before anything is touched, then the engine
    rebuilds its obstacles and performs a full reset in one synchronous
    call, so no mix of old and new settings is ever observable.
    """

    def __init__(self, engine: "SimulationEngine") -> None:
        self.engine = engine
        self.preset_name: Optional[str] = self._name_of(engine.difficulty)

    @property
    def current(self) -> Difficulty:
        return self.engine.difficulty

    @property
    def seconds_per_tick(self) -> float:
        return self.current.seconds_per_tick

    def set_difficulty(self, ticks_per_second: float, grid_size: int, obstacle_count: int) -> Difficulty:
        difficulty = Difficulty(ticks_per_second, grid_size, obstacle_count)
        self.engine.apply_difficulty(difficulty)
        self.preset_name = self._name_of(difficulty)
        logger.info(
            "Difficulty set to %s tps, %sx%s grid, %s obstacles",
            difficulty.ticks_per_second,
            difficulty.grid_size,
            difficulty.grid_size,
            difficulty.obstacle_count,
        )
        return difficulty

    def select_preset(self, name: str) -> Difficulty:
        chosen = preset(name)
        return self.set_difficulty(chosen.ticks_per_second, chosen.grid_size, chosen.obstacle_count)

    @staticmethod
    def _name_of(difficulty: Difficulty) -> Optional[str]:
        for name, candidate in PRESETS.items():
            if candidate == difficulty:
                return name
        return None
