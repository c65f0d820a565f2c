"""Collision helpers for the simulation engine."""

from __future__ import annotations

import enum
from typing import Collection, Optional

from .grid import Cell
from .snake import SnakeState


class CollisionKind(enum.Enum):
    SELF = "self"
    OBSTACLE = "obstacle"


def detect_collision(
    snake: SnakeState, obstacles: Collection[Cell], new_head: Cell
) -> Optional[CollisionKind]:
    """Return what ``new_head`` would run into, or ``None`` if the cell is clear.

    The whole current body counts, tail included: the tail has not moved yet
    when the check runs.
    """

    if new_head in snake:
        return CollisionKind.SELF
    if new_head in obstacles:
        return CollisionKind.OBSTACLE
    return None
