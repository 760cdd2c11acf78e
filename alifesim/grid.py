"""Two-dimensional grid of floating point values with a channel dimension."""

from __future__ import annotations

import operator

import numpy as np


class Grid:
    """A rows x cols grid where every cell holds one value per channel.

    Values are stored row-major with the channels of a cell next to each
    other. ``grid[row, col]`` addresses channel 0 and
    ``grid[row, col, channel]`` any other channel.
    """

    def __init__(self, rows: int, cols: int, channels: int = 1) -> None:
        rows, cols, channels = (operator.index(n) for n in (rows, cols, channels))
        if rows < 0 or cols < 0 or channels < 0:
            raise ValueError("Grid dimensions must not be negative.")
        self._data = np.zeros((rows, cols, channels), dtype=np.float64)

    def _index(self, key) -> tuple[int, int, int]:
        if not isinstance(key, tuple) or len(key) not in (2, 3):
            raise TypeError("Grid index must be (row, col) or (row, col, channel).")
        row, col, *rest = (operator.index(part) for part in key)
        channel = rest[0] if rest else 0
        for name, value, limit in (
            ("row", row, self.rows),
            ("col", col, self.cols),
            ("channel", channel, self.channels),
        ):
            if not 0 <= value < limit:
                raise IndexError(f"{name} index {value} out of range [0, {limit}).")
        return row, col, channel

    def __getitem__(self, key) -> float:
        return float(self._data[self._index(key)])

    def __setitem__(self, key, value: float) -> None:
        self._data[self._index(key)] = float(value)

    def __len__(self) -> int:
        return int(self._data.size)

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def channels(self) -> int:
        return self._data.shape[2]

    @property
    def data(self) -> np.ndarray:
        """The live backing array, shaped (rows, cols, channels)."""
        return self._data