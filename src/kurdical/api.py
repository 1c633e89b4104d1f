from __future__ import annotations

import logging
from datetime import MAXYEAR, MINYEAR, date
from typing import Tuple, Union

from .core.errors import InvalidDateError, InvalidYearError
from .core.time import jdn_to_ymd, to_jdn, ymd_to_jdn
from .core.types import Dialect, Epoch, KurdishDate
from .engines import kurdish as _k
from .engines import solar_hijri as _sh

logger = logging.getLogger(__name__)

DEFAULT_DIALECT = Dialect.SORANI
DEFAULT_EPOCH = Epoch.MEDIAN_KINGDOM

_EPOCH_ALIASES = {
    "median": Epoch.MEDIAN_KINGDOM,
    "diako": Epoch.MEDIAN_KINGDOM,
    "nineveh": Epoch.FALL_OF_NINEVEH,
    "cyaxares": Epoch.FALL_OF_NINEVEH,
}

# ============================================================
# Conversions
# ============================================================

def gregorian_to_kurdish(
    d: date,
    dialect: Dialect = DEFAULT_DIALECT,
    epoch: Epoch = DEFAULT_EPOCH,
) -> KurdishDate:
    return _k.to_kurdish(to_jdn(d), dialect, epoch)


def gregorian_ymd_to_kurdish(
    year: int,
    month: int,
    day: int,
    dialect: Dialect = DEFAULT_DIALECT,
    epoch: Epoch = DEFAULT_EPOCH,
) -> KurdishDate:
    """Same as gregorian_to_kurdish, for raw proleptic Gregorian components."""
    return _k.to_kurdish(ymd_to_jdn(year, month, day), dialect, epoch)


def kurdish_to_gregorian(k: KurdishDate) -> date:
    """
    Kurdish date -> Gregorian date.

    Only year, month, day and epoch are read. Raises InvalidMonthError or
    InvalidDayError for an impossible Kurdish date, and InvalidYearError when the
    result falls outside datetime.date's year range.
    """
    jdn = _k.from_kurdish(k.year, k.month, k.day, k.epoch)
    gy, gm, gd = jdn_to_ymd(jdn)
    if not MINYEAR <= gy <= MAXYEAR:
        logger.debug("Kurdish date %s maps to unrepresentable Gregorian year %d", k, gy)
        raise InvalidYearError(
            k.year, k.month, k.day,
            f"invalid year: {k.year} ({k.epoch.name}) maps to Gregorian year {gy}",
        )
    return date(gy, gm, gd)


def kurdish_ymd_to_gregorian(
    year: int,
    month: int,
    day: int,
    epoch: Epoch = DEFAULT_EPOCH,
) -> Tuple[int, int, int]:
    """Same validation as kurdish_to_gregorian; returns proleptic (year, month, day)."""
    return jdn_to_ymd(_k.from_kurdish(year, month, day, epoch))


# ============================================================
# Calendar helpers
# ============================================================

def epoch_offset(epoch: Epoch) -> int:
    return _k.epoch_offset(epoch)


def month_names(dialect: Dialect = DEFAULT_DIALECT) -> Tuple[str, ...]:
    return _k.month_names(dialect)


def month_name(month: int, dialect: Dialect = DEFAULT_DIALECT) -> str:
    return _k.month_name(month, dialect)


def is_leap_year(year: int, epoch: Epoch = DEFAULT_EPOCH) -> bool:
    """True if Kurdish `year` has a 30-day last month."""
    return _sh.is_leap_year(_k.to_solar_hijri_year(year, epoch))


def days_in_year(year: int, epoch: Epoch = DEFAULT_EPOCH) -> int:
    return _sh.days_in_year(_k.to_solar_hijri_year(year, epoch))


def days_in_month(year: int, month: int, epoch: Epoch = DEFAULT_EPOCH) -> int:
    return _sh.days_in_month(_k.to_solar_hijri_year(year, epoch), month)


def is_valid_date(year: int, month: int, day: int, epoch: Epoch = DEFAULT_EPOCH) -> bool:
    try:
        _k.to_solar_hijri(year, month, day, epoch)
    except InvalidDateError:
        return False
    return True


def new_year_day(year: int, epoch: Epoch = DEFAULT_EPOCH) -> date:
    """Gregorian date of Newroz (1st of month 1) of Kurdish `year`."""
    return kurdish_to_gregorian(KurdishDate(year, 1, 1, epoch=epoch))


def format_date(k: KurdishDate) -> str:
    """Human-readable "Y-M-D MonthName" form (not a stable format)."""
    name = k.month_name or _k.month_name(k.month, k.dialect)
    return f"{k.year}-{k.month}-{k.day} {name}"


# ============================================================
# Name lookups (CLI and config strings)
# ============================================================

def parse_dialect(name: Union[str, Dialect]) -> Dialect:
    if isinstance(name, Dialect):
        return name
    key = name.strip().lower()
    for d in Dialect:
        if key in (d.value, d.name.lower()):
            return d
    raise KeyError(f"Unknown dialect '{name}'. Available: {[d.value for d in Dialect]}")


def parse_epoch(name: Union[str, Epoch]) -> Epoch:
    if isinstance(name, Epoch):
        return name
    key = name.strip().lower().replace("-", "_")
    if key in _EPOCH_ALIASES:
        return _EPOCH_ALIASES[key]
    for e in Epoch:
        if key == e.name.lower():
            return e
    raise KeyError(
        f"Unknown epoch '{name}'. Available: {sorted(list(_EPOCH_ALIASES) + [e.name.lower() for e in Epoch])}"
    )
