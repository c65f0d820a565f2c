"""Gameplay constants shared across the server modules."""

from pathlib import Path

FRAME_RATE: int = 60
MIN_GRID_SIZE: int = 4
# Obstacles may cover at most this share of the board; the rest is room to grow.
MAX_OBSTACLE_FRACTION: float = 0.5
# Spawn cell and food.
RESERVED_CELLS: int = 2

# (ticks per second, grid size, obstacle count)
DIFFICULTY_PRESETS: dict[str, tuple[float, int, int]] = {
    "easy": (6, 30, 0),
    "medium": (8, 30, 15),
    "hard": (12, 30, 30),
}
DEFAULT_PRESET: str = "medium"

SWIPE_THRESHOLD: float = 10.0

BEST_SCORE_KEY: str = "snake_highscore"
DEFAULT_SCORES_FILE: Path = Path.home() / ".torus_snake" / "scores.json"

DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8765
