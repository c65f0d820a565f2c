"""Entry point for the asyncio based game server."""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
from pathlib import Path
from typing import Optional, Set

from websockets.asyncio.server import ServerConnection, serve
from websockets.exceptions import ConnectionClosed

from . import constants, protocol
from .difficulty import PRESETS, DifficultyController, InvalidDifficultyError, preset
from .engine import SimulationEngine
from .intents import apply_intent
from .scheduler import Scheduler
from .storage import JsonScoreStore


class GameServer:
    """Run one game instance and mirror it to every connected websocket."""

    def __init__(self, host: str, port: int, engine: SimulationEngine, frame_rate: int = constants.FRAME_RATE) -> None:
        self.host = host
        self.port = port
        self.frame_rate = frame_rate
        self.engine = engine
        self.difficulty = DifficultyController(engine)
        self.scheduler = Scheduler(
            tick=engine.tick,
            render=self._queue_snapshot,
            interval=lambda: self.difficulty.seconds_per_tick,
        )
        self.clients: Set[ServerConnection] = set()
        self._broadcast_lock = asyncio.Lock()
        self._pending_snapshot: Optional[str] = None

    async def start(self) -> None:
        """Start the websocket server and the frame loop."""

        async with serve(self._handle_client, self.host, self.port):
            logging.info("Server listening on %s:%s", self.host, self.port)
            loop = asyncio.get_running_loop()
            await self.scheduler.run(self.frame_rate, loop.time, after_frame=self._broadcast_snapshot)

    def _queue_snapshot(self) -> None:
        self._pending_snapshot = protocol.encode_snapshot(self.engine.snapshot(), self.scheduler.paused)

    async def _broadcast_snapshot(self) -> None:
        payload, self._pending_snapshot = self._pending_snapshot, None
        if payload is None or not self.clients:
            return
        async with self._broadcast_lock:
            disconnected = []
            for ws in list(self.clients):
                try:
                    await ws.send(payload)
                except Exception:  # pragma: no cover - we simply drop failed clients
                    logging.exception("Failed to send snapshot to %s", ws.remote_address)
                    disconnected.append(ws)
            for ws in disconnected:
                self.clients.discard(ws)
                await ws.close()

    async def _handle_client(self, websocket: ServerConnection) -> None:
        self.clients.add(websocket)
        logging.info("Client %s connected", websocket.remote_address)
        try:
            await websocket.send(protocol.encode_welcome(PRESETS, self.difficulty.current, self.engine.best))
            await websocket.send(protocol.encode_snapshot(self.engine.snapshot(), self.scheduler.paused))
            async for message in websocket:
                self.handle_message(message)
        except ConnectionClosed:
            pass
        finally:
            self.clients.discard(websocket)
            logging.info("Client %s disconnected", websocket.remote_address)

    def handle_message(self, message: str | bytes) -> None:
        """Apply one client message; malformed ones are logged and dropped."""

        try:
            kind, value = protocol.decode_request(protocol.parse_client_message(message))
        except ValueError as exc:
            logging.debug("Ignoring client message %r: %s", message, exc)
            return
        if kind == "difficulty":
            try:
                self.difficulty.select_preset(value)
            except InvalidDifficultyError as exc:
                logging.warning("Rejected difficulty change: %s", exc)
                return
        else:
            apply_intent(value, self.engine, self.scheduler)
            if value.direction is not None:
                return
        self._queue_snapshot()


def build_engine(difficulty_name: str, scores_file: Path, seed: Optional[int] = None) -> SimulationEngine:
    return SimulationEngine(
        preset(difficulty_name),
        JsonScoreStore(scores_file),
        rng=random.Random(seed),
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the torus snake server")
    parser.add_argument("--host", default=constants.DEFAULT_HOST, help="Host interface to bind to")
    parser.add_argument("--port", type=int, default=constants.DEFAULT_PORT, help="Port to listen on")
    parser.add_argument(
        "--difficulty",
        choices=sorted(PRESETS),
        default=constants.DEFAULT_PRESET,
        help="Difficulty preset to start with",
    )
    parser.add_argument(
        "--scores-file",
        type=Path,
        default=constants.DEFAULT_SCORES_FILE,
        help="JSON file holding the best score",
    )
    parser.add_argument("--frame-rate", type=int, default=constants.FRAME_RATE, help="Frames per second")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food and obstacle placement")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args()
    if args.frame_rate <= 0:
        parser.error("--frame-rate must be positive")
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(message)s")
    engine = build_engine(args.difficulty, args.scores_file, args.seed)
    server = GameServer(args.host, args.port, engine, args.frame_rate)
    asyncio.run(server.start())


if __name__ == "__main__":
    main()
