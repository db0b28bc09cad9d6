"""Derive speed, distance or time of a journey from the other two.

Inputs are converted to base units through :mod:`journey.units`, the formula is
applied, and the result is reported in its base unit together with a fixed set
of equivalents. The equivalent units never depend on the units the inputs were
given in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from journey.errors import InvalidArgumentError
from journey.units import UnitKind, base_unit, convert, to_base

logger = logging.getLogger(__name__)

SPEED_EQUIVALENTS: tuple[str, ...] = ("km/h", "ft/s", "mph")
DISTANCE_EQUIVALENTS: tuple[str, ...] = ("km", "ft", "mi")
TIME_EQUIVALENTS: tuple[str, ...] = ("min", "h", "d")


@dataclass(frozen=True)
class CalculationResult:
    """Primary value in its base unit plus the same value in related units."""

    primary_value: float
    primary_unit: str
    equivalents: dict[str, float] = field(default_factory=dict)  # insertion-ordered


def _build_result(kind: UnitKind, base_value: float, units: tuple[str, ...]) -> CalculationResult:
    base = base_unit(kind)
    return CalculationResult(
        primary_value=base_value,
        primary_unit=base,
        equivalents={unit: convert(kind, base_value, base, unit) for unit in units},
    )


def _require_positive_duration(duration_s: float) -> None:
    if not duration_s > 0:
        msg = f"Time must be positive, got {duration_s} s"
        raise InvalidArgumentError(msg)


def derive_speed(distance: float, distance_unit: str, duration_s: float) -> CalculationResult:
    """Average speed over *distance* covered in *duration_s* seconds.

    Raises
    ------
    InvalidArgumentError
        If *duration_s* is not positive.
    UnsupportedUnitError
        If *distance_unit* is not a distance unit.
    """
    _require_positive_duration(duration_s)

    distance_m = to_base(UnitKind.DISTANCE, distance, distance_unit)
    speed_mps = distance_m / duration_s
    logger.debug("Speed: %s m / %s s = %s m/s", distance_m, duration_s, speed_mps)
    return _build_result(UnitKind.SPEED, speed_mps, SPEED_EQUIVALENTS)


def derive_distance(speed: float, speed_unit: str, duration_s: float) -> CalculationResult:
    """Distance covered travelling at *speed* for *duration_s* seconds.

    Raises
    ------
    InvalidArgumentError
        If *duration_s* is not positive.
    UnsupportedUnitError
        If *speed_unit* is not a speed unit.
    """
    _require_positive_duration(duration_s)

    speed_mps = to_base(UnitKind.SPEED, speed, speed_unit)
    distance_m = speed_mps * duration_s
    logger.debug("Distance: %s m/s * %s s = %s m", speed_mps, duration_s, distance_m)
    return _build_result(UnitKind.DISTANCE, distance_m, DISTANCE_EQUIVALENTS)


def derive_time(
    distance: float,
    distance_unit: str,
    speed: float,
    speed_unit: str,
) -> CalculationResult:
    """Time needed to cover *distance* at *speed*.

    The speed check applies to the raw *speed* value, before unit conversion.

    Raises
    ------
    InvalidArgumentError
        If *speed* is not positive, or is too small to survive conversion to m/s.
    UnsupportedUnitError
        If either unit is not registered for its kind.
    """
    if not speed > 0:
        msg = f"Speed must be positive, got {speed} {speed_unit}"
        raise InvalidArgumentError(msg)

    distance_m = to_base(UnitKind.DISTANCE, distance, distance_unit)
    speed_mps = to_base(UnitKind.SPEED, speed, speed_unit)
    if not speed_mps > 0:
        # A tiny positive speed can underflow to zero in meters per second.
        msg = f"Speed {speed} {speed_unit} is too small to cover any distance"
        raise InvalidArgumentError(msg)
    duration_s = distance_m / speed_mps
    logger.debug("Time: %s m / %s m/s = %s s", distance_m, speed_mps, duration_s)
    return _build_result(UnitKind.TIME, duration_s, TIME_EQUIVALENTS)
