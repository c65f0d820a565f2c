"""Entry point for the pygame based client."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

import pygame

from snake_server import constants
from snake_server.difficulty import PRESETS, DifficultyController, InvalidDifficultyError
from snake_server.intents import apply_intent
from snake_server.main import build_engine
from snake_server.scheduler import Scheduler

from .entities import BoardView
from .input import InputManager
from .network import NetworkClient
from .render import Renderer


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play torus snake")
    parser.add_argument("--local", action="store_true", help="Run the simulation in-process instead of connecting")
    parser.add_argument("--host", default="127.0.0.1", help="Server host")
    parser.add_argument("--port", type=int, default=constants.DEFAULT_PORT, help="Server port")
    parser.add_argument(
        "--difficulty",
        choices=sorted(PRESETS),
        default=constants.DEFAULT_PRESET,
        help="Difficulty preset for local play",
    )
    parser.add_argument(
        "--scores-file",
        type=Path,
        default=constants.DEFAULT_SCORES_FILE,
        help="JSON file holding the best score (local play)",
    )
    parser.add_argument("--size", type=int, default=600, help="Window side length in pixels")
    parser.add_argument("--seed", type=int, default=None, help="Seed for local food and obstacle placement")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args()


def _open_window(size: int) -> pygame.Surface:
    pygame.init()
    screen = pygame.display.set_mode((size, size))
    pygame.display.set_caption("Torus Snake")
    return screen


def run_local(args: argparse.Namespace) -> None:
    """Play against an in-process engine; pygame frames drive the scheduler."""

    screen = _open_window(args.size)
    renderer = Renderer(screen)
    clock = pygame.time.Clock()
    input_manager = InputManager()

    engine = build_engine(args.difficulty, args.scores_file, args.seed)
    controller = DifficultyController(engine)

    def render() -> None:
        renderer.draw(BoardView.from_snapshot(engine.snapshot(), scheduler.paused))

    scheduler = Scheduler(tick=engine.tick, render=render, interval=lambda: controller.seconds_per_tick)
    render()

    running = True
    while running:
        clock.tick(constants.FRAME_RATE)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue
            request = input_manager.handle_event(event, screen.get_size())
            if request is None:
                continue
            kind, value = request
            if kind == "difficulty":
                try:
                    controller.select_preset(value)
                except InvalidDifficultyError as exc:
                    logging.warning("Rejected difficulty change: %s", exc)
                    continue
            else:
                apply_intent(value, engine, scheduler)
                if value.direction is not None:
                    continue
            render()
        scheduler.on_frame(pygame.time.get_ticks() / 1000.0)

    pygame.quit()


async def run_remote(args: argparse.Namespace) -> None:
    """Mirror a server-side game and forward local input to it."""

    screen = _open_window(args.size)
    renderer = Renderer(screen)
    clock = pygame.time.Clock()
    input_manager = InputManager()

    uri = f"ws://{args.host}:{args.port}"
    network = NetworkClient(uri)
    welcome = await network.connect()
    logging.info("Connected to %s", uri)

    view = BoardView(grid_size=welcome.get("difficulty", {}).get("gridSize", 30), best=welcome.get("best", 0))
    snapshot_task = asyncio.create_task(network.next_snapshot())
    running = True

    while running:
        clock.tick(constants.FRAME_RATE)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue
            request = input_manager.handle_event(event, screen.get_size())
            if request is not None:
                await network.send_request(request)

        if snapshot_task.done():
            snapshot = snapshot_task.result()
            if snapshot.get("type") == "snapshot":
                view.update_from_payload(snapshot)
            elif snapshot.get("type") == "disconnect":
                logging.info("Server closed the connection")
                running = False
            snapshot_task = asyncio.create_task(network.next_snapshot())

        renderer.draw(view)
        await asyncio.sleep(0)

    snapshot_task.cancel()
    await network.close()
    pygame.quit()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="[%(levelname)s] %(message)s")
    if args.local:
        run_local(args)
    else:
        asyncio.run(run_remote(args))


if __name__ == "__main__":
    main()
