"""Two-dimensional discrete Fourier transforms of a fixed size."""

from __future__ import annotations

import operator

import numpy as np


class FFT2D:
    """Forward and inverse 2D DFT over a rows x cols grid.

    Both directions are unnormalised, so ``inverse(forward(x))`` equals
    ``size * x``. Inputs may be flat (row-major) or shaped (rows, cols);
    results are complex arrays shaped (rows, cols).
    """

    def __init__(self, rows: int, cols: int) -> None:
        rows, cols = operator.index(rows), operator.index(cols)
        if rows <= 0 or cols <= 0:
            raise ValueError("FFT2D arguments must be nonzero.")
        self._rows = rows
        self._cols = cols

    def _as_grid(self, values) -> np.ndarray:
        array = np.asarray(values, dtype=np.complex128)
        if array.size != self.size:
            raise ValueError(f"Expected {self.size} values, got {array.size}.")
        return array.reshape(self._rows, self._cols)

    def forward(self, spatial) -> np.ndarray:
        return np.fft.fft2(self._as_grid(spatial))

    def inverse(self, spectrum) -> np.ndarray:
        return np.fft.ifft2(self._as_grid(spectrum)) * self.size

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def size(self) -> int:
        return self._rows * self._cols

    def index(self, row: int, col: int) -> int:
        """Position of a cell in the flat row-major layout."""
        return row * self._cols + col