"""The world state that a simulation evolves."""

from __future__ import annotations

import numpy as np

from alifesim.grid import Grid
from alifesim.pattern import Pattern


class State(Grid):
    """The current world: a grid of cell values.

    Random initialisers fill channel 0 only. ``rng`` may be ``None``, a seed
    or a ``numpy.random.Generator``.
    """

    def __init__(self, rows: int, cols: int, channels: int = 1) -> None:
        super().__init__(rows, cols, channels)

    def randomise_binary(self, probability: float, rng=None) -> None:
        """Set each cell to 1.0 with the given probability, else 0.0."""
        if not 0.0 <= probability <= 1.0:
            raise ValueError("Probability must lie in [0, 1].")
        generator = np.random.default_rng(rng)
        alive = generator.random((self.rows, self.cols)) < probability
        self._data[:, :, 0] = alive.astype(np.float64)

    def randomise_continuous(
        self, min_value: float = 0.0, max_value: float = 1.0, rng=None
    ) -> None:
        """Set each cell to a uniform random value in [min_value, max_value)."""
        _check_range(min_value, max_value)
        generator = np.random.default_rng(rng)
        self._data[:, :, 0] = generator.uniform(min_value, max_value, (self.rows, self.cols))

    def randomise_continuous_disc(
        self, radius: int, min_value: float, max_value: float, rng=None
    ) -> None:
        """Randomise the cells within ``radius`` of the centre; leave the rest."""
        if radius < 0:
            raise ValueError("Radius must not be negative.")
        _check_range(min_value, max_value)
        generator = np.random.default_rng(rng)
        rows, cols = np.ogrid[: self.rows, : self.cols]
        dist_sq = (rows - self.rows // 2) ** 2 + (cols - self.cols // 2) ** 2
        inside = dist_sq <= radius * radius
        values = generator.uniform(min_value, max_value, (self.rows, self.cols))
        channel = self._data[:, :, 0]
        channel[inside] = values[inside]

    def place_pattern_at(self, pattern: Pattern, start_row: int, start_col: int) -> None:
        """Copy every channel of ``pattern`` with its top-left at the given cell."""
        if pattern.channels != self.channels:
            raise ValueError("Pattern channel count exceeds number of state channels.")
        if pattern.rows > self.rows or pattern.cols > self.cols:
            raise ValueError("Pattern dimensions are larger than state dimensions.")
        if (
            start_row < 0
            or start_col < 0
            or start_row > self.rows - pattern.rows
            or start_col > self.cols - pattern.cols
        ):
            raise ValueError("Pattern placement exceeds state bounds.")
        self._data[
            start_row : start_row + pattern.rows, start_col : start_col + pattern.cols, :
        ] = pattern.data

    def place_pattern_centred(self, pattern: Pattern) -> None:
        """Copy ``pattern`` into the middle of the state."""
        if pattern.rows > self.rows or pattern.cols > self.cols:
            raise ValueError("Pattern dimensions are larger than state dimensions.")
        self.place_pattern_at(
            pattern, (self.rows - pattern.rows) // 2, (self.cols - pattern.cols) // 2
        )


def _check_range(min_value: float, max_value: float) -> None:
    if min_value > max_value:
        raise ValueError("Minimum value must not exceed maximum value.")