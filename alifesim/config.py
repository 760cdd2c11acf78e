"""Simulation presets and loading them from JSON files."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from alifesim.kernel import Kernel
from alifesim.system_type import SystemType, system_type_from_string


@dataclass
class WorldConfig:
    rows: int
    cols: int
    channels: int = 1


@dataclass
class KernelConfig:
    type: str
    radius: int
    mu: float = 0.5
    sigma: float = 0.15
    alpha: float = 4.0
    beta: list[float] = field(default_factory=list)


@dataclass
class GrowthConfig:
    mu: float
    sigma: float


@dataclass
class LargerThanLifeConfig:
    radius: int
    birth_min: int
    birth_max: int
    survive_min: int
    survive_max: int


@dataclass
class SmoothLifeConfig:
    radius: int
    birth_min: float
    birth_max: float
    survive_min: float
    survive_max: float
    alpha_n: float
    alpha_m: float
    dt: float


@dataclass
class LeniaConfig:
    kernel: KernelConfig
    growth: GrowthConfig
    dt: float = 1.0


@dataclass
class SimulationPreset:
    name: str
    system: SystemType
    desc: str
    world: WorldConfig
    pattern_path: Path | None = None
    larger_than_life: LargerThanLifeConfig | None = None
    smooth_life: SmoothLifeConfig | None = None
    lenia: LeniaConfig | None = None


def _object(value, key: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"Field '{key}' must be an object.")
    return value


def _integer(data: dict, key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Field '{key}' must be an integer.")
    return value


def _size(data: dict, key: str) -> int:
    value = _integer(data, key)
    if value < 0:
        raise ValueError(f"Field '{key}' must not be negative.")
    return value


def _check_number(value, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Field '{key}' must be a number.")
    return float(value)


def _number(data: dict, key: str, default: float | None = None) -> float:
    if default is not None and key not in data:
        return default
    return _check_number(data[key], key)


def _string(data: dict, key: str, default: str | None = None) -> str:
    value = data[key] if default is None else data.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string.")
    return value


def _load_world(data: dict) -> WorldConfig:
    return WorldConfig(_size(data, "rows"), _size(data, "cols"), _size(data, "channels"))


def _load_kernel(data: dict) -> KernelConfig:
    config = KernelConfig(
        type=_string(data, "type"),
        radius=_size(data, "radius"),
        mu=_number(data, "mu", 0.5),
        sigma=_number(data, "sigma", 0.15),
        alpha=_number(data, "alpha", 4.0),
    )
    if "beta" in data:
        beta = data["beta"]
        if not isinstance(beta, list):
            raise ValueError("Field 'beta' must be a list of numbers.")
        config.beta = [_check_number(value, "beta") for value in beta]
    return config


def _load_growth(data: dict) -> GrowthConfig:
    return GrowthConfig(_number(data, "mu"), _number(data, "sigma"))


def _load_larger_than_life(data: dict) -> LargerThanLifeConfig:
    return LargerThanLifeConfig(
        radius=_size(data, "radius"),
        birth_min=_integer(data, "birthMin"),
        birth_max=_integer(data, "birthMax"),
        survive_min=_integer(data, "surviveMin"),
        survive_max=_integer(data, "surviveMax"),
    )


def _load_smooth_life(data: dict) -> SmoothLifeConfig:
    return SmoothLifeConfig(
        radius=_size(data, "radius"),
        birth_min=_number(data, "birthMin"),
        birth_max=_number(data, "birthMax"),
        survive_min=_number(data, "surviveMin"),
        survive_max=_number(data, "surviveMax"),
        alpha_n=_number(data, "alphaN"),
        alpha_m=_number(data, "alphaM"),
        dt=_number(data, "dt"),
    )


def _load_lenia(data: dict) -> LeniaConfig:
    return LeniaConfig(
        kernel=_load_kernel(_object(data["kernel"], "kernel")),
        growth=_load_growth(_object(data["growth"], "growth")),
        dt=_number(data, "dt"),
    )


def load_simulation_preset(path: str | os.PathLike) -> SimulationPreset:
    """Read a simulation preset from a JSON file.

    Missing required keys raise KeyError; malformed values raise ValueError.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as exc:
        raise OSError(f"Could not open simulation preset file: {path}") from exc

    data = _object(data, "preset")
    preset = SimulationPreset(
        name=_string(data, "name", ""),
        system=system_type_from_string(_string(data, "system")),
        desc=_string(data, "desc", ""),
        world=_load_world(_object(data["world"], "world")),
    )

    if "pattern" in data:
        preset.pattern_path = Path(_string(data, "pattern"))

    if "parameters" in data:
        parameters = _object(data["parameters"], "parameters")
        if preset.system is SystemType.LENIA:
            preset.lenia = _load_lenia(parameters)
        elif preset.system is SystemType.LARGER_THAN_LIFE:
            preset.larger_than_life = _load_larger_than_life(parameters)
        elif preset.system is SystemType.SMOOTHLIFE:
            preset.smooth_life = _load_smooth_life(parameters)

    return preset


_KERNEL_BUILDERS = {
    "gaussian_rings": lambda c: Kernel.gaussian_rings(c.radius, c.mu, c.sigma, c.beta),
    "multi_ring": lambda c: Kernel.multi_ring(c.radius, c.beta, c.alpha),
    "gaussian": lambda c: Kernel.gaussian(c.radius, c.sigma),
    "uniform_square": lambda c: Kernel.uniform_square(c.radius),
}


def kernel_from_config(config: KernelConfig) -> Kernel:
    """Build the kernel that a kernel configuration describes."""
    try:
        builder = _KERNEL_BUILDERS[config.type]
    except KeyError:
        raise ValueError(f"Unknown kernel type: {config.type}") from None
    return builder(config)