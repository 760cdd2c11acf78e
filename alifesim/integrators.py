"""Integrators that apply an update field to the state."""

from __future__ import annotations

from alifesim.simulation import Field, Integrator
from alifesim.state import State


def _check_shape(state: State, update: Field) -> None:
    if (update.rows, update.cols) != (state.rows, state.cols):
        raise ValueError("Update dimensions do not match state dimensions.")


class DiscreteIntegrator(Integrator):
    """Replaces each cell with the value of the update."""

    def integrate(self, state: State, update: Field) -> None:
        _check_shape(state, update)
        state.data[:, :, 0] = update.data[:, :, 0]


class EulerIntegrator(Integrator):
    """Adds ``dt`` times the update to each cell."""

    def __init__(self, dt: float) -> None:
        self._dt = dt

    @property
    def dt(self) -> float:
        return self._dt

    def integrate(self, state: State, update: Field) -> None:
        _check_shape(state, update)
        state.data[:, :, 0] += self._dt * update.data[:, :, 0]