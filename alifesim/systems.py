"""Ready-made artificial-life systems assembled from the pipeline stages."""

from __future__ import annotations

from alifesim.constraints import BinaryConstraint, ClampConstraint
from alifesim.integrators import DiscreteIntegrator, EulerIntegrator
from alifesim.kernel import Kernel
from alifesim.observations import FFTConvObservation, NbrObservation, SmoothObservation
from alifesim.rules import ConwayRule, LargerThanLifeRule, LeniaRule, SmoothLifeRule
from alifesim.simulation import ALife
from alifesim.state import State


class Conway(ALife):
    """Conway's Game of Life on a wrapping grid."""

    def __init__(self, initial_state: State) -> None:
        super().__init__(
            initial_state,
            NbrObservation(1),
            ConwayRule(),
            DiscreteIntegrator(),
            BinaryConstraint(),
        )


class LargerThanLife(ALife):
    """Binary life with a square neighbourhood of any radius and ranged rules."""

    def __init__(
        self,
        initial_state: State,
        radius: int,
        birth_min: int,
        birth_max: int,
        survive_min: int,
        survive_max: int,
    ) -> None:
        super().__init__(
            initial_state,
            NbrObservation(radius),
            LargerThanLifeRule(birth_min, birth_max, survive_min, survive_max),
            DiscreteIntegrator(),
            BinaryConstraint(),
        )


class Lenia(ALife):
    """Continuous life driven by a kernel convolution and a Gaussian growth."""

    def __init__(
        self,
        initial_state: State,
        kernel: Kernel,
        mu: float,
        sigma: float,
        dt: float,
    ) -> None:
        super().__init__(
            initial_state,
            FFTConvObservation(kernel, initial_state.rows, initial_state.cols),
            LeniaRule(mu, sigma),
            EulerIntegrator(dt),
            ClampConstraint(0.0, 1.0),
        )


class SmoothLife(ALife):
    """Continuous life over inner-disc and outer-ring densities."""

    def __init__(
        self,
        initial_state: State,
        radius: int,
        birth_min: float,
        birth_max: float,
        survive_min: float,
        survive_max: float,
        alpha_n: float,
        alpha_m: float,
        dt: float,
    ) -> None:
        super().__init__(
            initial_state,
            SmoothObservation(radius),
            SmoothLifeRule(birth_min, birth_max, survive_min, survive_max, alpha_n, alpha_m),
            EulerIntegrator(dt),
            ClampConstraint(0.0, 1.0),
        )