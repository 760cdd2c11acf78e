"""Patterns: small grids that can be stamped onto a world state."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from alifesim.grid import Grid


class Pattern(Grid):
    """A grid of cell values, optionally filled from a flat list.

    The flat list is read row by row, with the channels of each cell
    consecutive, and must hold exactly rows * cols * channels values.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        channels: int = 1,
        values: Iterable[float] | None = None,
    ) -> None:
        super().__init__(rows, cols, channels)
        if values is None:
            return
        flat = np.asarray(list(values), dtype=np.float64)
        if flat.ndim != 1 or flat.size != len(self):
            raise ValueError("Number of pattern values does not match pattern dimensions.")
        self._data[...] = flat.reshape(self._data.shape)