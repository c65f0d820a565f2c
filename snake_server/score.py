"""Current score and persisted best score."""

from __future__ import annotations

import logging

from . import constants
from .storage import ScoreStore

logger = logging.getLogger(__name__)


class ScoreBoard:
    """Track the running score and the best score ever reached.

    ``best`` is read once from ``store`` and written back every time it is
    beaten. It never decreases for the lifetime of the object.
    """

    def __init__(self, store: ScoreStore, key: str = constants.BEST_SCORE_KEY) -> None:
        self.store = store
        self.key = key
        self.current = 0
        self.best = store.load(key)

    def award(self, points: int = 1) -> None:
        self.current += points
        if self.current > self.best:
            self.best = self.current
            logger.info("New best score: %s", self.best)
            self.store.save(self.key, self.best)

    def clear(self) -> None:
        """Zero the running score. ``best`` is untouched."""

        self.current = 0
