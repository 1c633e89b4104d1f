"""kurdical public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    gregorian_to_kurdish,
    gregorian_ymd_to_kurdish,
    kurdish_to_gregorian,
    kurdish_ymd_to_gregorian,
    epoch_offset,
    month_names,
    month_name,
    is_leap_year,
    days_in_year,
    days_in_month,
    is_valid_date,
    new_year_day,
    format_date,
    parse_dialect,
    parse_epoch,
)
from .core.errors import (
    KurdicalError,
    InvalidDateError,
    InvalidYearError,
    InvalidMonthError,
    InvalidDayError,
)
from .core.types import Dialect, Epoch, KurdishDate

__all__ = [
    "gregorian_to_kurdish",
    "gregorian_ymd_to_kurdish",
    "kurdish_to_gregorian",
    "kurdish_ymd_to_gregorian",
    "epoch_offset",
    "month_names",
    "month_name",
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "is_valid_date",
    "new_year_day",
    "format_date",
    "parse_dialect",
    "parse_epoch",
    "KurdicalError",
    "InvalidDateError",
    "InvalidYearError",
    "InvalidMonthError",
    "InvalidDayError",
    "Dialect",
    "Epoch",
    "KurdishDate",
]
