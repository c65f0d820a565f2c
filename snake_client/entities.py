"""Client side board representation mirroring the server state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from snake_server.engine import Snapshot

Point = Tuple[int, int]


def _points(payload: List[dict]) -> List[Point]:
    return [(int(cell["x"]), int(cell["y"])) for cell in payload]


@dataclass
class BoardView:
    """Everything the renderer needs for one frame."""

    grid_size: int
    snake: List[Point] = field(default_factory=list)
    food: Point = (0, 0)
    obstacles: List[Point] = field(default_factory=list)
    score: int = 0
    best: int = 0
    paused: bool = False

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot, paused: bool) -> "BoardView":
        """Build a view from an in-process engine snapshot."""

        return cls(
            grid_size=snapshot.grid_size,
            snake=[(cell.x, cell.y) for cell in snapshot.snake],
            food=(snapshot.food.x, snapshot.food.y),
            obstacles=[(cell.x, cell.y) for cell in snapshot.obstacles],
            score=snapshot.score,
            best=snapshot.best,
            paused=paused,
        )

    def update_from_payload(self, payload: dict) -> None:
        """Apply a decoded ``snapshot`` message received from the server."""

        self.grid_size = int(payload.get("gridSize", self.grid_size))
        self.snake = _points(payload.get("snake", []))
        food = payload.get("food")
        if food is not None:
            self.food = (int(food["x"]), int(food["y"]))
        self.obstacles = _points(payload.get("obstacles", []))
        self.score = int(payload.get("score", self.score))
        self.best = int(payload.get("best", self.best))
        self.paused = bool(payload.get("paused", self.paused))
