"""JSON protocol helpers for the websocket transport."""

from __future__ import annotations

import json
from typing import Mapping, Tuple, Union

from .difficulty import Difficulty
from .engine import Snapshot
from .intents import Intent

# A decoded client request: either a player intent or a preset name.
ClientRequest = Tuple[str, Union[Intent, str]]


def parse_client_message(message: Union[str, bytes]) -> dict:
    """Parse a raw client ``message`` into a Python dictionary."""

    try:
        payload = json.loads(message)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid client message") from exc
    if not isinstance(payload, dict):
        raise ValueError("Client message must be a JSON object")
    return payload


def decode_request(payload: dict) -> ClientRequest:
    """Turn a parsed client message into ``("intent", Intent)`` or ``("difficulty", name)``."""

    kind = payload.get("type")
    if kind == "input":
        direction = payload.get("direction")
        if direction not in ("up", "down", "left", "right"):
            raise ValueError(f"Unknown direction: {direction!r}")
        return "intent", Intent(direction)
    if kind == "pause":
        return "intent", Intent.PAUSE
    if kind == "restart":
        return "intent", Intent.RESTART
    if kind == "difficulty":
        name = payload.get("preset")
        if not isinstance(name, str):
            raise ValueError("Difficulty request needs a preset name")
        return "difficulty", name
    raise ValueError(f"Unknown message type: {kind!r}")


def encode_snapshot(snapshot: Snapshot, paused: bool) -> str:
    """Encode a board snapshot for broadcasting to clients."""

    payload = {"type": "snapshot", "paused": paused}
    payload.update(snapshot.to_dict())
    return json.dumps(payload)


def encode_welcome(presets: Mapping[str, Difficulty], difficulty: Difficulty, best: int) -> str:
    """Encode the welcome payload sent upon connection."""

    return json.dumps(
        {
            "type": "welcome",
            "presets": {name: preset.to_dict() for name, preset in presets.items()},
            "difficulty": difficulty.to_dict(),
            "best": best,
        }
    )
