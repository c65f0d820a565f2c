"""Best-effort persistence of named integer values."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Protocol, Union

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    """Reads and writes one integer per key."""

    def load(self, key: str) -> int:
        ...

    def save(self, key: str, value: int) -> None:
        ...


class JsonScoreStore:
    """Keep values in a small JSON object on disk.

    Any problem reading the file yields 0 and a warning; a failed write is
    logged and otherwise ignored so that the game keeps running.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _read(self) -> Dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.warning("Could not read %s: %s", self.path, exc)
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Ignoring corrupt score file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring score file %s: expected a JSON object", self.path)
            return {}
        return data

    def load(self, key: str) -> int:
        value = self._read().get(key, 0)
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            logger.warning("Ignoring invalid stored value for %r: %r", key, value)
            return 0
        return value

    def save(self, key: str, value: int) -> None:
        data = self._read()
        data[key] = int(value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not write %s: %s", self.path, exc)
