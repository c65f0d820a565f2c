import random

import pytest

from snake_server.difficulty import Difficulty
from snake_server.engine import SimulationEngine


class MemoryStore:
    """In-memory score store that records every write."""

    def __init__(self, values=None):
        self.values = dict(values or {})
        self.writes = []

    def load(self, key):
        return self.values.get(key, 0)

    def save(self, key, value):
        self.values[key] = value
        self.writes.append((key, value))


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def make_engine(store):
    def factory(ticks_per_second=8, grid_size=30, obstacle_count=0, seed=0, score_store=None):
        return SimulationEngine(
            Difficulty(ticks_per_second, grid_size, obstacle_count),
            score_store if score_store is not None else store,
            rng=random.Random(seed),
        )

    return factory
