"""Player intents and how they act on a running game."""

from __future__ import annotations

import enum

from .engine import SimulationEngine
from .grid import DIRECTIONS_BY_NAME, Direction
from .scheduler import Scheduler


class Intent(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    RESTART = "restart"

    @property
    def direction(self) -> Direction | None:
        return DIRECTIONS_BY_NAME.get(self.value)


def apply_intent(intent: Intent, engine: SimulationEngine, scheduler: Scheduler) -> None:
    """Route ``intent`` to the engine or the scheduler.

    Directions are only buffered; the engine picks them up at its next tick.
    """

    direction = intent.direction
    if direction is not None:
        engine.request_direction(direction)
    elif intent is Intent.PAUSE:
        scheduler.toggle_pause()
    elif intent is Intent.RESTART:
        engine.restart()
        scheduler.resume()
