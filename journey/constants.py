"""Shared constants for the journey metrics engine.

Centralises the conversion factors every unit table entry is built from.
"""

from __future__ import annotations

# Length
KM_TO_M: float = 1000.0
MILES_TO_KM: float = 1.60934
MILE_TO_M: float = MILES_TO_KM * KM_TO_M
M_TO_FT: float = 3.28084
FT_TO_M: float = 1.0 / M_TO_FT
FT_TO_YD: float = 1.0 / 3.0

# Time
SECONDS_IN_MIN: float = 60.0
MINUTES_IN_HOUR: float = 60.0
HOURS_IN_DAY: float = 24.0
SECONDS_IN_HOUR: float = SECONDS_IN_MIN * MINUTES_IN_HOUR
SECONDS_IN_DAY: float = SECONDS_IN_HOUR * HOURS_IN_DAY

# Speed conversion: meters per second → kilometers per hour
MPS_TO_KPH: float = SECONDS_IN_HOUR / KM_TO_M
KPH_TO_MPS: float = 1.0 / MPS_TO_KPH

# Speed conversion: miles per hour → meters per second
MPH_TO_MPS: float = MILE_TO_M / SECONDS_IN_HOUR
