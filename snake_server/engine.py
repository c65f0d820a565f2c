"""Authoritative game simulation."""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import FrozenSet, Optional, Set, Tuple

from . import placement
from .collision import detect_collision
from .difficulty import Difficulty
from .grid import Cell, Direction, center
from .score import ScoreBoard
from .snake import SnakeState
from .storage import ScoreStore

logger = logging.getLogger(__name__)


class TickOutcome(enum.Enum):
    """Which branch of the tick state machine ran."""

    IDLE = "idle"
    MOVED = "moved"
    ATE = "ate"
    COLLIDED = "collided"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the board handed to renderers and UIs."""

    tick: int
    grid_size: int
    snake: Tuple[Cell, ...]
    food: Cell
    obstacles: FrozenSet[Cell]
    score: int
    best: int
    difficulty: Difficulty

    def to_dict(self) -> dict:
        return {
            "tick": self.tick,
            "gridSize": self.grid_size,
            "snake": [cell.to_dict() for cell in self.snake],
            "food": self.food.to_dict(),
            "obstacles": [cell.to_dict() for cell in sorted(self.obstacles, key=lambda c: (c.y, c.x))],
            "score": self.score,
            "best": self.best,
            "difficulty": self.difficulty.to_dict(),
        }


class SimulationEngine:
    """Holds the snake, food, obstacles and score and advances them one tick at a time.

    Collisions never end the game: the snake is put back at the grid center
    with its score intact (a soft reset). Only :meth:`restart` and
    :meth:`apply_difficulty` clear the score.
    """

    def __init__(
        self,
        difficulty: Difficulty,
        store: ScoreStore,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.difficulty = difficulty
        self.tick_count = 0
        self.scores = ScoreBoard(store)
        self.obstacles: Set[Cell] = set()
        self.snake = SnakeState.spawn(center(difficulty.grid_size))
        self.food = self._place_food()
        self.apply_difficulty(difficulty)

    @property
    def grid_size(self) -> int:
        return self.difficulty.grid_size

    @property
    def score(self) -> int:
        return self.scores.current

    @property
    def best(self) -> int:
        return self.scores.best

    def request_direction(self, direction: Direction) -> None:
        """Buffer a direction; it is resolved at the start of the next tick."""

        self.snake.request(direction)

    def tick(self) -> TickOutcome:
        """Advance the simulation by one step."""

        direction = self.snake.resolve_direction()
        if direction.is_none:
            return TickOutcome.IDLE

        self.tick_count += 1
        new_head = self.snake.head.translate(direction, self.grid_size)

        collision = detect_collision(self.snake, self.obstacles, new_head)
        if collision is not None:
            logger.debug(
                "Collision with %s at (%s, %s), score kept at %s",
                collision.value,
                new_head.x,
                new_head.y,
                self.score,
            )
            self._respawn()
            return TickOutcome.COLLIDED

        ate = new_head == self.food
        self.snake.advance(new_head, grow=ate)
        if not ate:
            return TickOutcome.MOVED

        self.scores.award()
        self.food = self._place_food()
        return TickOutcome.ATE

    def restart(self) -> None:
        """Full reset: zero the score and respawn, keeping difficulty and obstacles."""

        self.scores.clear()
        self._respawn()

    def apply_difficulty(self, difficulty: Difficulty) -> None:
        """Switch to ``difficulty``: rebuild obstacles, then do a full reset."""

        spawn = center(difficulty.grid_size)
        obstacles = placement.populate(
            difficulty.obstacle_count,
            [self.snake.body, [self.food], [spawn]],
            difficulty.grid_size,
            self.rng,
        )
        self.difficulty = difficulty
        self.obstacles = obstacles
        self.restart()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            tick=self.tick_count,
            grid_size=self.grid_size,
            snake=tuple(self.snake.body),
            food=self.food,
            obstacles=frozenset(self.obstacles),
            score=self.score,
            best=self.best,
            difficulty=self.difficulty,
        )

    def _respawn(self) -> None:
        self.snake.respawn(center(self.grid_size))
        self.food = self._place_food()

    def _place_food(self) -> Cell:
        return placement.place([self.snake.body, self.obstacles], self.grid_size, self.rng)
