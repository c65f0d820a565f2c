"""Pygame client for the torus snake game."""

__all__ = [
    "entities",
    "input",
    "main",
    "network",
    "render",
]
