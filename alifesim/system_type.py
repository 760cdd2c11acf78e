"""The kinds of artificial-life system the package can run."""

from __future__ import annotations

from enum import Enum


class SystemType(Enum):
    CONWAY = "conway"
    LARGER_THAN_LIFE = "larger_than_life"
    SMOOTHLIFE = "smoothlife"
    LENIA = "lenia"


def valid_system_types_string() -> str:
    """All accepted system names, separated by spaces."""
    return " ".join(member.value for member in SystemType)


def system_type_from_string(name: str) -> SystemType:
    """Look up a system type by its configuration name."""
    try:
        return SystemType(name)
    except ValueError:
        raise ValueError(
            f"Unknown system type: {name}. Valid types are: {valid_system_types_string()}"
        ) from None