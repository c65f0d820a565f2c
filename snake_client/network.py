"""Websocket networking client."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, Optional

from websockets.asyncio.client import ClientConnection, connect

from snake_server.intents import Intent
from snake_server.protocol import ClientRequest


def encode_request(request: ClientRequest) -> Dict[str, Any]:
    """Build the wire message for a local input request."""

    kind, value = request
    if kind == "difficulty":
        return {"type": "difficulty", "preset": value}
    if value is Intent.PAUSE:
        return {"type": "pause"}
    if value is Intent.RESTART:
        return {"type": "restart"}
    return {"type": "input", "direction": value.value}


def _decode(message: str | bytes) -> Optional[Dict[str, Any]]:
    try:
        payload = json.loads(message)
    except json.JSONDecodeError:
        return None
    return payload if isinstance(payload, dict) else None


class NetworkClient:
    """Send local requests to the game server and queue the boards it pushes back.

    Only ``snapshot`` messages reach the queue; when the connection ends a
    single ``{"type": "disconnect"}`` marker follows the last board.
    """

    def __init__(self, uri: str) -> None:
        self.uri = uri
        self.websocket: Optional[ClientConnection] = None
        self._boards: asyncio.Queue[Dict[str, Any]] = asyncio.Queue()
        self._pump: Optional[asyncio.Task[None]] = None

    async def connect(self) -> Dict[str, Any]:
        """Open the connection and return the server's welcome message."""

        self.websocket = await connect(self.uri)
        welcome = _decode(await self.websocket.recv())
        if welcome is None or welcome.get("type") != "welcome":
            await self.websocket.close()
            raise RuntimeError(f"Unexpected greeting from {self.uri}")
        self._pump = asyncio.create_task(self._pump_boards(self.websocket))
        return welcome

    async def _pump_boards(self, websocket: ClientConnection) -> None:
        try:
            async for message in websocket:
                payload = _decode(message)
                if payload is not None and payload.get("type") == "snapshot":
                    self._boards.put_nowait(payload)
        finally:
            self._boards.put_nowait({"type": "disconnect"})

    async def send_request(self, request: ClientRequest) -> None:
        if self.websocket is None:
            raise RuntimeError("Client is not connected")
        await self.websocket.send(json.dumps(encode_request(request)))

    async def next_snapshot(self) -> Dict[str, Any]:
        return await self._boards.get()

    async def close(self) -> None:
        if self.websocket is not None:
            await self.websocket.close()
        if self._pump is not None:
            await self._pump
