"""Translate local keyboard and swipe input into game requests."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame

from snake_server import constants
from snake_server.intents import Intent
from snake_server.protocol import ClientRequest

KEY_INTENTS: Dict[int, Intent] = {
    pygame.K_UP: Intent.UP,
    pygame.K_w: Intent.UP,
    pygame.K_DOWN: Intent.DOWN,
    pygame.K_s: Intent.DOWN,
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_a: Intent.LEFT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_d: Intent.RIGHT,
    pygame.K_SPACE: Intent.PAUSE,
    pygame.K_r: Intent.RESTART,
}

PRESET_KEYS: Dict[int, str] = {
    pygame.K_1: "easy",
    pygame.K_2: "medium",
    pygame.K_3: "hard",
}


def swipe_intent(dx: float, dy: float, threshold: float = constants.SWIPE_THRESHOLD) -> Optional[Intent]:
    """Map a drag of ``(dx, dy)`` pixels to a direction.

    The dominant axis wins and the displacement along it must exceed
    ``threshold``; shorter drags produce nothing.
    """

    if abs(dx) > abs(dy):
        if dx > threshold:
            return Intent.RIGHT
        if dx < -threshold:
            return Intent.LEFT
    else:
        if dy > threshold:
            return Intent.DOWN
        if dy < -threshold:
            return Intent.UP
    return None


class InputManager:
    """Turn pygame events into ``("intent", Intent)`` or ``("difficulty", name)`` requests."""

    def __init__(self, threshold: float = constants.SWIPE_THRESHOLD) -> None:
        self.threshold = threshold
        self._drag_start: Optional[Tuple[float, float]] = None

    def handle_event(self, event: pygame.event.Event, viewport_size: Tuple[int, int]) -> Optional[ClientRequest]:
        if event.type == pygame.KEYDOWN:
            if event.key in KEY_INTENTS:
                return "intent", KEY_INTENTS[event.key]
            if event.key in PRESET_KEYS:
                return "difficulty", PRESET_KEYS[event.key]
            return None

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._drag_start = event.pos
        elif event.type == pygame.FINGERDOWN:
            self._drag_start = (event.x * viewport_size[0], event.y * viewport_size[1])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return self._finish_drag(event.pos)
        elif event.type == pygame.FINGERUP:
            return self._finish_drag((event.x * viewport_size[0], event.y * viewport_size[1]))
        return None

    def _finish_drag(self, end: Tuple[float, float]) -> Optional[ClientRequest]:
        if self._drag_start is None:
            return None
        start, self._drag_start = self._drag_start, None
        intent = swipe_intent(end[0] - start[0], end[1] - start[1], self.threshold)
        if intent is None:
            return None
        return "intent", intent
