"""Simulation core and websocket server for the torus snake game."""

__all__ = [
    "collision",
    "constants",
    "difficulty",
    "engine",
    "grid",
    "intents",
    "main",
    "placement",
    "protocol",
    "scheduler",
    "score",
    "snake",
    "storage",
]
