"""Update rules for the supported artificial-life systems."""

from __future__ import annotations

import numpy as np

from alifesim.simulation import Field, UpdateRule
from alifesim.state import State


def _next_generation(state: State, alive_next: np.ndarray) -> Field:
    field = Field(state.rows, state.cols, state.channels)
    field.data[:, :, 0] = alive_next.astype(np.float64)
    return field


def _counts(observed: Field) -> np.ndarray:
    return np.trunc(observed.data[:, :, 0])


class ConwayRule(UpdateRule):
    """Game of Life: survive on 2 or 3 neighbours, be born on 3."""

    def apply(self, state: State, observed: Field) -> Field:
        alive = state.data[:, :, 0] > 0.5
        count = _counts(observed)
        survives = alive & ((count == 2) | (count == 3))
        born = ~alive & (count == 3)
        return _next_generation(state, survives | born)


class LargerThanLifeRule(UpdateRule):
    """Birth and survival over inclusive ranges of neighbour counts."""

    def __init__(self, birth_min: int, birth_max: int, survive_min: int, survive_max: int) -> None:
        self._birth = (birth_min, birth_max)
        self._survive = (survive_min, survive_max)

    def apply(self, state: State, observed: Field) -> Field:
        alive = state.data[:, :, 0] > 0.5
        count = _counts(observed)
        born = ~alive & (count >= self._birth[0]) & (count <= self._birth[1])
        survives = alive & (count >= self._survive[0]) & (count <= self._survive[1])
        return _next_generation(state, born | survives)


class LeniaRule(UpdateRule):
    """Gaussian growth function of the potential, ranging over [-1, 1]."""

    def __init__(self, mu: float, sigma: float) -> None:
        self._mu = mu
        self._sigma = sigma

    def apply(self, state: State, observed: Field) -> Field:
        diff = observed.data[:, :, 0] - self._mu
        growth = Field(state.rows, state.cols, state.channels)
        growth.data[:, :, 0] = (
            2.0 * np.exp(-(diff * diff) / (2.0 * self._sigma * self._sigma)) - 1.0
        )
        return growth


def _sigma(x, a, alpha):
    """Smooth step: close to 1 where x >= a, close to 0 below."""
    with np.errstate(over="ignore"):
        return 1.0 / (1.0 + np.exp(-4.0 * (x - a) / alpha))


def _sigma_n(x, a, b, alpha):
    """Smooth indicator of a <= x <= b."""
    return _sigma(x, a, alpha) * (1.0 - _sigma(x, b, alpha))


def _sigma_m(x, y, m, alpha):
    """Blend from x towards y as m rises past 0.5."""
    weight = _sigma(m, 0.5, alpha)
    return x * (1.0 - weight) + y * weight


class SmoothLifeRule(UpdateRule):
    """Continuous Life: move each cell towards its smooth transition target.

    The inner density m chooses between the birth and survival intervals;
    the target is whether the outer density n lies inside that interval.
    """

    def __init__(
        self,
        birth_min: float,
        birth_max: float,
        survive_min: float,
        survive_max: float,
        alpha_n: float,
        alpha_m: float,
    ) -> None:
        self._birth_min = birth_min
        self._birth_max = birth_max
        self._survive_min = survive_min
        self._survive_max = survive_max
        self._alpha_n = alpha_n
        self._alpha_m = alpha_m

    def _transition(self, n: np.ndarray, m: np.ndarray) -> np.ndarray:
        lower = _sigma_m(self._birth_min, self._survive_min, m, self._alpha_m)
        upper = _sigma_m(self._birth_max, self._survive_max, m, self._alpha_m)
        return _sigma_n(n, lower, upper, self._alpha_n)

    def apply(self, state: State, observed: Field) -> Field:
        if observed.channels < 2:
            raise ValueError("SmoothLife needs inner and outer densities in two channels.")
        m = observed.data[:, :, 0]
        n = observed.data[:, :, 1]
        update = Field(state.rows, state.cols, state.channels)
        update.data[:, :, 0] = self._transition(n, m) - state.data[:, :, 0]
        return update