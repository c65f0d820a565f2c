"""Pygame based renderer for the game client."""

from __future__ import annotations

import pygame

from .entities import BoardView


class Renderer:
    """Responsible for all drawing tasks."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.font = pygame.font.SysFont("arial", 18)
        self.banner_font = pygame.font.SysFont("arial", 36, bold=True)
        self.background_color = (15, 23, 42)
        self.food_color = (34, 197, 94)
        self.obstacle_color = (255, 85, 85)
        self.head_color = (134, 239, 172)
        self.body_color = (96, 168, 107)
        self.text_color = (226, 232, 240)

    def cell_size(self, grid_size: int) -> float:
        return min(self.screen.get_width(), self.screen.get_height()) / grid_size

    def _cell_center(self, cell: tuple[int, int], size: float) -> tuple[int, int]:
        return int(cell[0] * size + size / 2), int(cell[1] * size + size / 2)

    def clear(self) -> None:
        self.screen.fill(self.background_color)

    def draw_food(self, view: BoardView) -> None:
        size = self.cell_size(view.grid_size)
        pygame.draw.circle(self.screen, self.food_color, self._cell_center(view.food, size), size / 2.5)

    def draw_obstacles(self, view: BoardView) -> None:
        size = self.cell_size(view.grid_size)
        for x, y in view.obstacles:
            rect = pygame.Rect(int(x * size) + 1, int(y * size) + 1, int(size) - 2, int(size) - 2)
            pygame.draw.rect(self.screen, self.obstacle_color, rect)

    def draw_snake(self, view: BoardView) -> None:
        size = self.cell_size(view.grid_size)
        for index, cell in enumerate(view.snake):
            color = self.head_color if index == 0 else self.body_color
            pygame.draw.circle(self.screen, color, self._cell_center(cell, size), size / 2.2)

    def draw_scores(self, view: BoardView) -> None:
        text = f"Score: {view.score}   Best: {view.best}"
        surface = self.font.render(text, True, self.text_color)
        self.screen.blit(surface, (8, 6))

    def draw_pause_banner(self) -> None:
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        self.screen.blit(overlay, (0, 0))
        label = self.banner_font.render("PAUSED", True, self.text_color)
        center = (self.screen.get_width() / 2, self.screen.get_height() / 2)
        self.screen.blit(label, label.get_rect(center=center))

    def draw(self, view: BoardView) -> None:
        self.clear()
        self.draw_food(view)
        self.draw_obstacles(view)
        self.draw_snake(view)
        self.draw_scores(view)
        if view.paused:
            self.draw_pause_banner()
        self.present()

    def present(self) -> None:
        pygame.display.flip()
