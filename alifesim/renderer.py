"""Drawing a running simulation."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
import pygame

from alifesim.simulation import ALife

_BORDER_COLOUR = (255, 255, 255, 50)
_BACKGROUND = (0, 0, 0)


class Renderer(ABC):
    """Displays simulations and reports whether its display is still open."""

    @abstractmethod
    def render(self, sim: ALife) -> None:
        """Draw the current state of ``sim``."""

    @abstractmethod
    def handle_events(self) -> None:
        """Process pending user-interface events."""

    @abstractmethod
    def is_open(self) -> bool:
        """Whether the display is still open."""


class PygameRenderer(Renderer):
    """Draws the state as grey-scale squares centred in a window.

    Each cell with a positive value is a square of ``cell_size`` pixels whose
    brightness is the value scaled to 0-255; a faint border outlines the world.
    """

    def __init__(self, window_rows: int, window_cols: int, cell_size: int = 10) -> None:
        if window_rows <= 0 or window_cols <= 0 or cell_size <= 0:
            raise ValueError("Window dimensions and cell size must be positive.")
        self._window_rows = window_rows
        self._window_cols = window_cols
        self._cell_size = cell_size
        pygame.display.init()
        self._surface = pygame.display.set_mode(
            (window_cols * cell_size, window_rows * cell_size)
        )
        pygame.display.set_caption("ALife")
        self._open = True

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()

    def is_open(self) -> bool:
        return self._open

    def close(self) -> None:
        """Close the window; closing twice does nothing."""
        if self._open:
            self._open = False
            pygame.display.quit()

    def __enter__(self) -> PygameRenderer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def render(self, sim: ALife) -> None:
        if not self._open:
            return
        state = sim.state
        size = self._cell_size
        self._surface.fill(_BACKGROUND)

        row_offset = self._window_rows // 2 - state.rows // 2
        col_offset = self._window_cols // 2 - state.cols // 2

        values = state.data[:, :, 0]
        for r, c in np.argwhere(values > 0.0):
            level = min(int(values[r, c] * 255), 255)
            rect = pygame.Rect(
                size * (col_offset + int(c)), size * (row_offset + int(r)), size, size
            )
            self._surface.fill((level, level, level), rect)

        width = state.cols * size
        height = state.rows * size
        border = pygame.Surface((width + 2, height + 2), pygame.SRCALPHA)
        pygame.draw.rect(border, _BORDER_COLOUR, border.get_rect(), 1)
        self._surface.blit(border, (col_offset * size - 1, row_offset * size - 1))

        pygame.display.flip()