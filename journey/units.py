"""Unit conversion table for distance, time and speed.

Each quantity kind has one base unit (meters, seconds, meters per second) and a
fixed set of symbols mapped to "how many base units one of this symbol is".
Lookups are exact string matches: ``"KM"`` is not ``"km"``.

The table is the single source of truth for factors; the calculator converts
both its inputs and its displayed equivalents through it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from journey.constants import (
    FT_TO_M,
    FT_TO_YD,
    KM_TO_M,
    KPH_TO_MPS,
    MILE_TO_M,
    MPH_TO_MPS,
    SECONDS_IN_DAY,
    SECONDS_IN_HOUR,
    SECONDS_IN_MIN,
)
from journey.errors import UnsupportedUnitError

logger = logging.getLogger(__name__)


class UnitKind(StrEnum):
    """The physical quantity a unit symbol measures."""

    DISTANCE = "distance"
    TIME = "time"
    SPEED = "speed"


# ---------------------------------------------------------------------------
# Conversion table
# ---------------------------------------------------------------------------

BASE_UNITS: Mapping[UnitKind, str] = MappingProxyType(
    {
        UnitKind.DISTANCE: "m",
        UnitKind.TIME: "s",
        UnitKind.SPEED: "m/s",
    }
)

CONVERSION_TABLE: Mapping[UnitKind, Mapping[str, float]] = MappingProxyType(
    {
        UnitKind.DISTANCE: MappingProxyType(
            {
                "m": 1.0,
                "km": KM_TO_M,
                "mi": MILE_TO_M,
                "ft": FT_TO_M,
                "yd": FT_TO_M * FT_TO_YD,
            }
        ),
        UnitKind.TIME: MappingProxyType(
            {
                "s": 1.0,
                "min": SECONDS_IN_MIN,
                "h": SECONDS_IN_HOUR,
                "d": SECONDS_IN_DAY,
            }
        ),
        UnitKind.SPEED: MappingProxyType(
            {
                "m/s": 1.0,
                "km/h": KPH_TO_MPS,
                "mph": MPH_TO_MPS,
                "ft/s": FT_TO_M,
                "km/s": KM_TO_M,
            }
        ),
    }
)

UNIT_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "m": "meters",
        "km": "kilometers",
        "mi": "miles",
        "ft": "feet",
        "yd": "yards",
        "s": "seconds",
        "min": "minutes",
        "h": "hours",
        "d": "days",
        "m/s": "meters per second",
        "km/h": "kilometers per hour",
        "mph": "miles per hour",
        "ft/s": "feet per second",
        "km/s": "kilometers per second",
    }
)


def base_unit(kind: UnitKind) -> str:
    """Return the canonical symbol all conversions of *kind* go through."""
    return BASE_UNITS[kind]


def supported_units(kind: UnitKind) -> tuple[str, ...]:
    """Return the registered symbols of *kind* in table order."""
    return tuple(CONVERSION_TABLE[kind])


def scale_factor(kind: UnitKind, symbol: str) -> float:
    """Return how many base units one *symbol* is.

    Raises
    ------
    UnsupportedUnitError
        If *symbol* is not registered for *kind*.
    """
    factors = CONVERSION_TABLE[kind]
    if symbol not in factors:
        raise UnsupportedUnitError(kind.value, symbol)
    return factors[symbol]


def to_base(kind: UnitKind, value: float, symbol: str) -> float:
    """Convert *value* expressed in *symbol* to the base unit of *kind*."""
    base_value = value * scale_factor(kind, symbol)
    logger.debug("%s %s -> %s %s", value, symbol, base_value, BASE_UNITS[kind])
    return base_value


def from_base(kind: UnitKind, base_value: float, symbol: str) -> float:
    """Convert *base_value* (in the base unit of *kind*) to *symbol*."""
    return base_value / scale_factor(kind, symbol)


def convert(kind: UnitKind, value: float, from_symbol: str, to_symbol: str) -> float:
    """Convert *value* between two symbols of the same kind."""
    return from_base(kind, to_base(kind, value, from_symbol), to_symbol)
