"""Convolution kernels used to observe a neighbourhood."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from alifesim.grid import Grid


class Kernel(Grid):
    """A single-channel grid of convolution weights.

    The factory methods build normalised kernels:
    ``uniform_square`` gives every cell the same weight, ``gaussian`` is a
    radially symmetric bell, and ``multi_ring`` / ``gaussian_rings`` build
    concentric rings whose strengths come from ``beta``.
    """

    def __init__(self, rows: int, cols: int) -> None:
        super().__init__(rows, cols, 1)

    @property
    def weights(self) -> np.ndarray:
        """The live weights as a (rows, cols) array."""
        return self._data[:, :, 0]

    @classmethod
    def uniform_square(cls, side_length: int) -> Kernel:
        kernel = cls(side_length, side_length)
        kernel.weights[...] = 1.0
        kernel.normalise()
        return kernel

    @classmethod
    def gaussian(cls, radius: int, sigma: float) -> Kernel:
        if sigma <= 0.0:
            raise ValueError("Gaussian sigma must be greater than zero.")
        offsets = _offsets(radius)
        dist_sq = offsets[:, None] ** 2 + offsets[None, :] ** 2
        return cls._from_weights(np.exp(-dist_sq / (2.0 * sigma * sigma)))

    @classmethod
    def multi_ring(cls, radius: int, beta: Sequence[float], alpha: float = 4.0) -> Kernel:
        _check_rings(radius, beta)
        return cls._from_weights(_rings(radius, beta, lambda r: _kernel_core(r, alpha)))

    @classmethod
    def gaussian_rings(
        cls, radius: int, mu: float, sigma: float, beta: Sequence[float]
    ) -> Kernel:
        _check_rings(radius, beta)
        if sigma <= 0.0:
            raise ValueError("Sigma must be greater than zero.")
        return cls._from_weights(_rings(radius, beta, lambda r: _gaussian_core(r, mu, sigma)))

    @classmethod
    def _from_weights(cls, weights: np.ndarray) -> Kernel:
        kernel = cls(*weights.shape)
        kernel.weights[...] = weights
        kernel.normalise()
        return kernel

    def normalise(self) -> None:
        """Scale the weights to sum to one; an all-zero kernel is left alone."""
        total = self._data.sum()
        if total == 0:
            return
        self._data /= total


def _offsets(radius: int) -> np.ndarray:
    if radius < 0:
        raise ValueError("Kernel radius must not be negative.")
    return np.arange(2 * radius + 1, dtype=np.float64) - radius


def _check_rings(radius: int, beta: Sequence[float]) -> None:
    if radius == 0:
        raise ValueError("Kernel radius must be greater than zero.")
    if len(beta) == 0:
        raise ValueError("Beta must contain at least one value.")


def _rings(
    radius: int, beta: Sequence[float], core: Callable[[np.ndarray], np.ndarray]
) -> np.ndarray:
    strengths = np.asarray(beta, dtype=np.float64)
    offsets = _offsets(radius)
    dist_norm = np.hypot(offsets[:, None], offsets[None, :]) / radius
    scaled = len(strengths) * dist_norm
    band = np.floor(scaled)
    local = scaled - band
    band_index = np.minimum(band.astype(int), len(strengths) - 1)
    return np.where(dist_norm < 1.0, strengths[band_index] * core(local), 0.0)


def _kernel_core(r: np.ndarray, alpha: float) -> np.ndarray:
    with np.errstate(all="ignore"):
        value = np.exp(alpha - alpha / (4.0 * r * (1.0 - r)))
    return np.where((r <= 0.0) | (r >= 1.0), 0.0, value)


def _gaussian_core(r: np.ndarray, mu: float, sigma: float) -> np.ndarray:
    diff = r - mu
    return np.exp(-(diff * diff) / (2.0 * sigma * sigma))