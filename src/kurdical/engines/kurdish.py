"""
kurdical.engines.kurdish
------------------------
Kurdish calendar on top of the Solar Hijri engine: shifts the year by the
epoch offset, attaches the dialect month name and renumbers the weekday so
that the week starts on Saturday.
"""

from __future__ import annotations

import logging
from typing import Tuple

from kurdical.core.errors import InvalidDayError, InvalidMonthError
from kurdical.core.time import weekday_from_jdn
from kurdical.core.types import Dialect, Epoch, KurdishDate, SolarHijriDate
from kurdical.engines import solar_hijri as sh
from kurdical.engines.month_names import MONTH_NAMES

logger = logging.getLogger(__name__)

# Indexed by 0=Sunday .. 6=Saturday; Kurdish 1=Saturday .. 7=Friday
KURDISH_WEEKDAY: Tuple[int, ...] = (2, 3, 4, 5, 6, 7, 1)


def epoch_offset(epoch: Epoch) -> int:
    return epoch.offset


def month_names(dialect: Dialect) -> Tuple[str, ...]:
    return MONTH_NAMES[dialect]


def month_name(month: int, dialect: Dialect) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return MONTH_NAMES[dialect][month - 1]


def kurdish_weekday(jdn: int) -> int:
    return KURDISH_WEEKDAY[weekday_from_jdn(jdn)]


def to_solar_hijri_year(year: int, epoch: Epoch) -> int:
    return year - epoch.offset


def to_kurdish(jdn: int, dialect: Dialect, epoch: Epoch) -> KurdishDate:
    s = sh.jdn_to_solar_hijri(jdn)
    return KurdishDate(
        year=s.year + epoch.offset,
        month=s.month,
        day=s.day,
        dialect=dialect,
        epoch=epoch,
        weekday=kurdish_weekday(jdn),
        month_name=MONTH_NAMES[dialect][s.month - 1],
    )


def to_solar_hijri(year: int, month: int, day: int, epoch: Epoch) -> SolarHijriDate:
    """
    Validate a Kurdish (year, month, day) and resolve it to Solar Hijri.

    Raises InvalidMonthError / InvalidDayError; nothing is clamped.
    """
    if not 1 <= month <= 12:
        logger.debug("rejected Kurdish date %d-%d-%d (%s): bad month", year, month, day, epoch.name)
        raise InvalidMonthError(year, month, day)

    s_year = to_solar_hijri_year(year, epoch)
    length = sh.month_lengths(s_year)[month - 1]
    if not 1 <= day <= length:
        logger.debug(
            "rejected Kurdish date %d-%d-%d (%s): month has %d days", year, month, day, epoch.name, length
        )
        raise InvalidDayError(year, month, day)

    return SolarHijriDate(year=s_year, month=month, day=day)


def from_kurdish(year: int, month: int, day: int, epoch: Epoch) -> int:
    """Validated Kurdish (year, month, day) -> JDN."""
    s = to_solar_hijri(year, month, day, epoch)
    return sh.solar_hijri_to_jdn(s.year, s.month, s.day)
