"""
kurdical.engines.solar_hijri
----------------------------
Arithmetic Solar Hijri calendar on top of Julian Day Numbers.

Leap rule: a year is leap iff (year + 1) % 4 == 0. This is a simplified
four-year cycle, not the astronomical 33-year arrangement, and month lengths
and round trips depend on it exactly.

Counting convention:
    JDN = SOLAR_HIJRI_EPOCH_JDN + days_before_year(Y) + days_before_month(Y, M) + (D - 1)

All divisions are floor divisions, so the same formulas serve the proleptic
years Y <= 0 that precede the epoch.
"""

from __future__ import annotations

from typing import Tuple

from kurdical.core.time import jdn_to_ymd, ymd_to_jdn
from kurdical.core.types import SolarHijriDate

# JDN of 1 Farvardin, year 1 under the four-year leap rule.
# Anchors 1 Farvardin 1402 to 2023-03-21.
SOLAR_HIJRI_EPOCH_JDN = 1948310

MONTH_LENGTHS: Tuple[int, ...] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
LEAP_MONTH_LENGTHS: Tuple[int, ...] = MONTH_LENGTHS[:11] + (30,)


def is_leap_year(year: int) -> bool:
    return (year + 1) % 4 == 0


def month_lengths(year: int) -> Tuple[int, ...]:
    """The 12 month lengths of a Solar Hijri year, leap-adjusted."""
    return LEAP_MONTH_LENGTHS if is_leap_year(year) else MONTH_LENGTHS


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return month_lengths(year)[month - 1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_before_year(year: int) -> int:
    """
    Days from 1 Farvardin of year 1 to 1 Farvardin of `year`.

    Years k in [1, year-1] with k % 4 == 3 are leap, which gives year // 4 of them.
    Negative for year <= 0.
    """
    return 365 * (year - 1) + year // 4


def days_before_month(year: int, month: int) -> int:
    return sum(month_lengths(year)[: month - 1])


# ---------------------------------------------------------
# Forward: JDN -> Solar Hijri
# ---------------------------------------------------------

def jdn_to_solar_hijri(jdn: int) -> SolarHijriDate:
    n = jdn - SOLAR_HIJRI_EPOCH_JDN  # 0-based day count from the epoch

    # 1. Year: the mean year is 365.25 days, so the estimate is exact or one too high
    year = (4 * n + 4) // 1461 + 1
    if days_before_year(year) > n:
        year -= 1
    rem = n - days_before_year(year)

    # 2. Month: walk the leap-adjusted table
    month = 1
    for length in month_lengths(year):
        if rem < length:
            break
        rem -= length
        month += 1

    return SolarHijriDate(year=year, month=month, day=rem + 1)


def gregorian_to_solar_hijri(year: int, month: int, day: int) -> SolarHijriDate:
    return jdn_to_solar_hijri(ymd_to_jdn(year, month, day))


# ---------------------------------------------------------
# Inverse: Solar Hijri -> JDN
# ---------------------------------------------------------

def solar_hijri_to_jdn(year: int, month: int, day: int) -> int:
    """
    No validation: callers check month and day against month_lengths(year) first.
    """
    return SOLAR_HIJRI_EPOCH_JDN + days_before_year(year) + days_before_month(year, month) + (day - 1)


def solar_hijri_to_gregorian(year: int, month: int, day: int) -> Tuple[int, int, int]:
    return jdn_to_ymd(solar_hijri_to_jdn(year, month, day))
