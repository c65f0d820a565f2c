"""Random placement of food and obstacles onto unoccupied cells."""

from __future__ import annotations

import random
from typing import Collection, Sequence, Set

from .grid import Cell


class GridExhaustedError(RuntimeError):
    """Raised when every cell of the grid is already occupied."""


def _occupied_count(excluded: Sequence[Collection[Cell]], grid_size: int) -> int:
    occupied: Set[Cell] = set()
    for cells in excluded:
        occupied.update(cell for cell in cells if cell.in_grid(grid_size))
    return len(occupied)


def place(excluded: Sequence[Collection[Cell]], grid_size: int, rng: random.Random) -> Cell:
    """Return a cell drawn uniformly from those not in any ``excluded`` collection.

    Candidates are drawn uniformly over the whole grid and rejected until one
    is free, which keeps the result uniform over the free cells. The loop has
    no attempt limit, so the free-cell count is checked up front instead.
    """

    if _occupied_count(excluded, grid_size) >= grid_size * grid_size:
        raise GridExhaustedError(f"No free cell left on a {grid_size}x{grid_size} grid")

    while True:
        candidate = Cell(rng.randrange(grid_size), rng.randrange(grid_size))
        if not any(candidate in cells for cells in excluded):
            return candidate


def populate(
    count: int,
    excluded: Sequence[Collection[Cell]],
    grid_size: int,
    rng: random.Random,
) -> Set[Cell]:
    """Place ``count`` distinct cells one at a time.

    Each new cell avoids ``excluded`` and every cell placed before it.
    """

    placed: Set[Cell] = set()
    while len(placed) < count:
        placed.add(place([*excluded, placed], grid_size, rng))
    return placed
