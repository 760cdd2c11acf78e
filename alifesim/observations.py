"""Observations: neighbour counts, convolutions and disc densities."""

from __future__ import annotations

from itertools import product

import numpy as np

from alifesim.fft2d import FFT2D
from alifesim.kernel import Kernel
from alifesim.simulation import Field, Observation
from alifesim.state import State


def _shifted(values: np.ndarray, dr: int, dc: int) -> np.ndarray:
    """Array whose (r, c) entry is values[r + dr, c + dc], wrapping at the edges."""
    return np.roll(values, (-dr, -dc), axis=(0, 1))


def _check_radius(radius: int) -> None:
    if radius < 0:
        raise ValueError("Radius must not be negative.")


class ConvObservation(Observation):
    """Direct wrapped convolution of channel 0 with a kernel."""

    def __init__(self, kernel: Kernel) -> None:
        self._kernel = kernel

    def observe(self, state: State) -> Field:
        values = state.data[:, :, 0]
        centre_row = self._kernel.rows // 2
        centre_col = self._kernel.cols // 2
        total = np.zeros_like(values)
        for (kr, kc), weight in np.ndenumerate(self._kernel.weights):
            total += weight * _shifted(values, kr - centre_row, kc - centre_col)
        observed = Field(state.rows, state.cols, state.channels)
        observed.data[:, :, 0] = total
        return observed


class FFTConvObservation(Observation):
    """Wrapped convolution of channel 0 with a kernel, computed by FFT.

    The kernel's spectrum is computed once for a rows x cols world.
    """

    def __init__(self, kernel: Kernel, rows: int, cols: int) -> None:
        self._kernel = kernel
        self._fft = FFT2D(rows, cols)
        spatial = np.zeros((rows, cols), dtype=np.complex128)
        centre_row = kernel.rows // 2
        centre_col = kernel.cols // 2
        for (kr, kc), weight in np.ndenumerate(kernel.weights):
            spatial[(kr - centre_row) % rows, (kc - centre_col) % cols] = weight
        self._kernel_fft = self._fft.forward(spatial)

    def observe(self, state: State) -> Field:
        if (state.rows, state.cols) != (self._fft.rows, self._fft.cols):
            raise ValueError("State dimensions do not match the FFT dimensions.")
        spectrum = self._fft.forward(state.data[:, :, 0]) * self._kernel_fft
        potential = self._fft.inverse(spectrum).real / self._fft.size
        observed = Field(state.rows, state.cols, state.channels)
        observed.data[:, :, 0] = potential
        return observed


class NbrObservation(Observation):
    """Counts live cells (value > 0.5) in the square neighbourhood of each cell.

    The neighbourhood extends ``radius`` cells in every direction and
    excludes the cell itself; the world wraps at its edges.
    """

    def __init__(self, radius: int = 1) -> None:
        _check_radius(radius)
        self._radius = radius

    def observe(self, state: State) -> Field:
        alive = (state.data[:, :, 0] > 0.5).astype(np.float64)
        counts = np.zeros_like(alive)
        span = range(-self._radius, self._radius + 1)
        for dr, dc in product(span, repeat=2):
            if dr or dc:
                counts += _shifted(alive, dr, dc)
        observed = Field(state.rows, state.cols, state.channels)
        observed.data[:, :, 0] = counts
        return observed


class SmoothObservation(Observation):
    """Mean densities of an inner disc and the ring around it.

    Channel 0 holds the inner density m over distances <= radius; channel 1
    holds the outer density n over radius < distance <= 3 * radius.
    """

    def __init__(self, radius: int) -> None:
        _check_radius(radius)
        self._radius = radius

    def observe(self, state: State) -> Field:
        values = state.data[:, :, 0]
        inner_radius_sq = self._radius * self._radius
        outer = 3 * self._radius
        outer_radius_sq = outer * outer

        inner_sum = np.zeros_like(values)
        outer_sum = np.zeros_like(values)
        inner_count = 0
        outer_count = 0
        for dr, dc in product(range(-outer, outer + 1), repeat=2):
            dist_sq = dr * dr + dc * dc
            if dist_sq <= inner_radius_sq:
                inner_sum += _shifted(values, dr, dc)
                inner_count += 1
            elif dist_sq <= outer_radius_sq:
                outer_sum += _shifted(values, dr, dc)
                outer_count += 1

        observed = Field(state.rows, state.cols, 2)
        if inner_count:
            observed.data[:, :, 0] = inner_sum / inner_count
        if outer_count:
            observed.data[:, :, 1] = outer_sum / outer_count
        return observed