"""Named patterns and loading them from JSON files."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from alifesim.pattern import Pattern
from alifesim.system_type import SystemType, system_type_from_string


@dataclass
class PatternPreset:
    name: str
    system: SystemType
    desc: str
    pattern: Pattern


def _size(data: dict, key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Field '{key}' must be a non-negative integer.")
    return value


def _string(data: dict, key: str, default: str | None = None) -> str:
    value = data[key] if default is None else data.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string.")
    return value


def _values(data: dict, key: str) -> list[float]:
    values = data[key]
    if not isinstance(values, list) or any(
        isinstance(v, bool) or not isinstance(v, (int, float)) for v in values
    ):
        raise ValueError(f"Field '{key}' must be a list of numbers.")
    return [float(v) for v in values]


def load_pattern_preset(path: str | os.PathLike) -> PatternPreset:
    """Read a pattern preset from a JSON file.

    Missing required keys raise KeyError; malformed values raise ValueError.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as exc:
        raise OSError(f"Could not open pattern file: {path}") from exc

    name = _string(data, "name")
    system = system_type_from_string(_string(data, "system"))
    desc = _string(data, "desc", "")
    pattern = Pattern(
        _size(data, "rows"),
        _size(data, "cols"),
        _size(data, "channels"),
        _values(data, "values"),
    )
    return PatternPreset(name, system, desc, pattern)