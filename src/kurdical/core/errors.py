from __future__ import annotations


class KurdicalError(Exception):
    """Base error."""


class InvalidDateError(KurdicalError, ValueError):
    """Raised when a (year, month, day) combination is not a valid date."""

    def __init__(self, year: int, month: int, day: int, message: str | None = None):
        self.year = year
        self.month = month
        self.day = day
        super().__init__(message or f"invalid date: year={year}, month={month}, day={day}")


class InvalidYearError(InvalidDateError):
    """Raised when a conversion lands outside the representable Gregorian years."""

    def __init__(self, year: int, month: int, day: int, message: str | None = None):
        super().__init__(year, month, day, message or f"invalid year: {year}")


class InvalidMonthError(InvalidDateError):
    def __init__(self, year: int, month: int, day: int, message: str | None = None):
        super().__init__(year, month, day, message or f"invalid month: {month}")


class InvalidDayError(InvalidDateError):
    def __init__(self, year: int, month: int, day: int, message: str | None = None):
        super().__init__(
            year, month, day, message or f"invalid day: {day} for month {month} in year {year}"
        )
