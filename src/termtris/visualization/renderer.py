from __future__ import annotations

import numpy as np
import pygame

from .colors import color_for_value


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self._font = None

    def window_size(self, width: int, height: int) -> tuple[int, int]:
        # Room below the board for the status line
        return width * self.cell_size + self.margin * 2, height * self.cell_size + self.margin * 3

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_value(int(state[y, x])), rect)
        return surf

    def draw(self, screen: pygame.Surface, state: np.ndarray, status: str = "") -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 24)
        screen.fill((10, 10, 14))
        screen.blit(self._grid_surface(state), (self.margin, self.margin))
        if status:
            text = self._font.render(status, True, (230, 230, 230))
            screen.blit(text, (self.margin, self.margin * 2 + state.shape[0] * self.cell_size - 10))
        pygame.display.flip()
