from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Dialect(Enum):
    """Kurdish dialect selecting the month-name table."""
    LAKI = "laki"
    HAWRAMI = "hawrami"
    SORANI = "sorani"
    KALHURI = "kalhuri"
    KURMANJI = "kurmanji"


class Epoch(Enum):
    """Historical origin of the Kurdish year count.

    The value is the number of years added to the Solar Hijri year.
    """
    MEDIAN_KINGDOM = 1321   # Diako
    FALL_OF_NINEVEH = 1233  # Cyaxares

    @property
    def offset(self) -> int:
        return self.value


@dataclass(frozen=True)
class SolarHijriDate:
    year: int
    month: int
    day: int


@dataclass(frozen=True)
class KurdishDate:
    """A date in the Kurdish calendar.

    Month and day follow Solar Hijri numbering; only the year is shifted by the
    epoch. ``weekday`` (1=Saturday .. 7=Friday) and ``month_name`` are attached by
    the forward conversion and ignored by the reverse one.
    """
    year: int
    month: int
    day: int
    dialect: Dialect = Dialect.SORANI
    epoch: Epoch = Epoch.MEDIAN_KINGDOM
    weekday: Optional[int] = None
    month_name: str = ""

    @property
    def solar_hijri_year(self) -> int:
        return self.year - self.epoch.offset
