"""Constraints that keep the state within allowed values."""

from __future__ import annotations

import numpy as np

from alifesim.simulation import Constraint
from alifesim.state import State


class BinaryConstraint(Constraint):
    """Snaps every cell to 1.0 if it exceeds 0.5, otherwise to 0.0."""

    def apply(self, state: State) -> None:
        values = state.data[:, :, 0]
        values[...] = np.where(values > 0.5, 1.0, 0.0)


class ClampConstraint(Constraint):
    """Clamps every cell into [min_val, max_val]."""

    def __init__(self, min_val: float, max_val: float) -> None:
        if min_val > max_val:
            raise ValueError("Minimum value must not exceed maximum value.")
        self._min_val = min_val
        self._max_val = max_val

    def apply(self, state: State) -> None:
        values = state.data[:, :, 0]
        np.clip(values, self._min_val, self._max_val, out=values)