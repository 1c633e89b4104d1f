# tests/test_kurdish.py

import random
from datetime import date, timedelta

import pytest

import kurdical
from kurdical import (
    Dialect,
    Epoch,
    InvalidDateError,
    InvalidDayError,
    InvalidMonthError,
    InvalidYearError,
    KurdicalError,
    KurdishDate,
)
from kurdical.core.time import to_jdn
from kurdical.engines.kurdish import KURDISH_WEEKDAY, kurdish_weekday
from kurdical.engines.month_names import MONTH_NAMES


@pytest.mark.parametrize(
    "dialect, epoch, expected",
    [
        (Dialect.SORANI, Epoch.MEDIAN_KINGDOM,
         KurdishDate(2723, 1, 1, Dialect.SORANI, Epoch.MEDIAN_KINGDOM, 4, "خاکه\u200cلێوه")),
        (Dialect.KURMANJI, Epoch.FALL_OF_NINEVEH,
         KurdishDate(2635, 1, 1, Dialect.KURMANJI, Epoch.FALL_OF_NINEVEH, 4, "نیسان")),
        (Dialect.LAKI, Epoch.MEDIAN_KINGDOM,
         KurdishDate(2723, 1, 1, Dialect.LAKI, Epoch.MEDIAN_KINGDOM, 4, "په\u200cنجه")),
        (Dialect.HAWRAMI, Epoch.MEDIAN_KINGDOM,
         KurdishDate(2723, 1, 1, Dialect.HAWRAMI, Epoch.MEDIAN_KINGDOM, 4, "نه\u200cورۆز")),
        (Dialect.KALHURI, Epoch.MEDIAN_KINGDOM,
         KurdishDate(2723, 1, 1, Dialect.KALHURI, Epoch.MEDIAN_KINGDOM, 4, "جه\u200cژنان (جه\u200cشنان)")),
    ],
)
def test_newroz_2023(dialect, epoch, expected):
    assert kurdical.gregorian_to_kurdish(date(2023, 3, 21), dialect, epoch) == expected


def test_january_and_december_dates():
    k = kurdical.gregorian_to_kurdish(date(2023, 1, 1), Dialect.SORANI, Epoch.MEDIAN_KINGDOM)
    assert (k.year, k.month, k.day, k.weekday) == (2722, 10, 11, 2)
    assert k.month_name == "به\u200cفرانبار"

    k = kurdical.gregorian_to_kurdish(date(2023, 12, 31), Dialect.SORANI, Epoch.MEDIAN_KINGDOM)
    assert (k.year, k.month, k.day, k.weekday) == (2723, 10, 10, 2)


def test_defaults_are_sorani_median_kingdom():
    k = kurdical.gregorian_to_kurdish(date(2023, 3, 21))
    assert k.dialect is Dialect.SORANI
    assert k.epoch is Epoch.MEDIAN_KINGDOM


def test_ymd_overloads_match_date_versions():
    for dialect in Dialect:
        for epoch in Epoch:
            assert kurdical.gregorian_ymd_to_kurdish(2023, 1, 1, dialect, epoch) == \
                kurdical.gregorian_to_kurdish(date(2023, 1, 1), dialect, epoch)
    assert kurdical.kurdish_ymd_to_gregorian(2723, 1, 1) == (2023, 3, 21)
    assert kurdical.kurdish_ymd_to_gregorian(2635, 1, 1, Epoch.FALL_OF_NINEVEH) == (2023, 3, 21)
    with pytest.raises(InvalidMonthError):
        kurdical.kurdish_ymd_to_gregorian(2725, 13, 1)


def test_reverse_scenarios():
    assert kurdical.kurdish_to_gregorian(KurdishDate(2723, 1, 1)) == date(2023, 3, 21)
    # weekday and month name are not consulted
    k = KurdishDate(2723, 1, 1, Dialect.KURMANJI, Epoch.MEDIAN_KINGDOM, 7, "x")
    assert kurdical.kurdish_to_gregorian(k) == date(2023, 3, 21)

    with pytest.raises(InvalidMonthError):
        kurdical.kurdish_to_gregorian(KurdishDate(2725, 13, 1, Dialect.SORANI, Epoch.MEDIAN_KINGDOM))
    with pytest.raises(InvalidDayError):
        kurdical.kurdish_to_gregorian(KurdishDate(2725, 1, 32, Dialect.SORANI, Epoch.MEDIAN_KINGDOM))


@pytest.mark.parametrize("month", [0, -1, 13, 100])
def test_bad_month_is_rejected(month):
    with pytest.raises(InvalidMonthError) as exc:
        kurdical.kurdish_to_gregorian(KurdishDate(2723, month, 1))
    assert exc.value.month == month
    assert isinstance(exc.value, InvalidDateError)
    assert isinstance(exc.value, KurdicalError)
    assert isinstance(exc.value, ValueError)


def test_day_32_is_rejected_in_every_month():
    for month in range(1, 13):
        with pytest.raises(InvalidDayError):
            kurdical.kurdish_to_gregorian(KurdishDate(2723, month, 32))
        with pytest.raises(InvalidDayError):
            kurdical.kurdish_to_gregorian(KurdishDate(2723, month, 0))


def test_last_month_length_follows_leap_rule():
    # 2723 -> Solar Hijri 1402 (common), 2724 -> 1403 (leap)
    assert not kurdical.is_leap_year(2723)
    assert kurdical.is_leap_year(2724)
    assert kurdical.days_in_year(2724) == 366

    with pytest.raises(InvalidDayError):
        kurdical.kurdish_to_gregorian(KurdishDate(2723, 12, 30))
    assert kurdical.kurdish_to_gregorian(KurdishDate(2724, 12, 30)) == date(2025, 3, 20)

    for year in range(2700, 2760):
        assert kurdical.is_valid_date(year, 12, 29)
        kurdical.kurdish_to_gregorian(KurdishDate(year, 12, 29))
        assert kurdical.is_valid_date(year, 12, 30) == kurdical.is_leap_year(year)


def test_leap_year_depends_on_epoch():
    # Same Solar Hijri year 1403 under both epochs
    assert kurdical.is_leap_year(2724, Epoch.MEDIAN_KINGDOM)
    assert kurdical.is_leap_year(2636, Epoch.FALL_OF_NINEVEH)
    assert kurdical.days_in_month(2636, 12, Epoch.FALL_OF_NINEVEH) == 30
    assert kurdical.days_in_month(2635, 12, Epoch.FALL_OF_NINEVEH) == 29


def test_out_of_range_gregorian_year():
    with pytest.raises(InvalidYearError):
        kurdical.kurdish_to_gregorian(KurdishDate(100, 1, 1))
    with pytest.raises(InvalidYearError):
        kurdical.kurdish_to_gregorian(KurdishDate(99999, 1, 1))

    # the raw-component form is not limited to datetime.date
    gy, gm, gd = kurdical.kurdish_ymd_to_gregorian(100, 1, 1)
    assert gy < 1
    k = kurdical.gregorian_ymd_to_kurdish(gy, gm, gd)
    assert (k.year, k.month, k.day) == (100, 1, 1)


def test_round_trip_every_dialect_and_epoch():
    random.seed(2023)
    start = date(1, 1, 1)
    span = (date(9999, 12, 31) - start).days
    samples = [date(1, 1, 1), date(622, 3, 22), date(9999, 12, 31)]
    samples += [start + timedelta(days=random.randint(0, span)) for _ in range(400)]

    for d in samples:
        for dialect in Dialect:
            for epoch in Epoch:
                k = kurdical.gregorian_to_kurdish(d, dialect, epoch)
                assert 1 <= k.month <= 12
                assert 1 <= k.day <= kurdical.days_in_month(k.year, k.month, epoch)
                assert k.month_name == MONTH_NAMES[dialect][k.month - 1]
                assert kurdical.kurdish_to_gregorian(k) == d


def test_consecutive_days_round_trip():
    d = date(2019, 1, 1)
    prev = None
    for _ in range(3 * 366):
        k = kurdical.gregorian_to_kurdish(d)
        assert kurdical.kurdish_to_gregorian(k) == d
        if prev is not None:
            assert k.weekday == prev.weekday % 7 + 1
        prev = k
        d += timedelta(days=1)


def test_weekday_is_a_bijection():
    assert sorted(KURDISH_WEEKDAY) == list(range(1, 8))

    base = date(2023, 3, 18)  # Saturday
    seen = [kurdish_weekday(to_jdn(base + timedelta(days=i))) for i in range(7)]
    assert seen == [1, 2, 3, 4, 5, 6, 7]


def test_month_tables_are_complete():
    assert set(MONTH_NAMES) == set(Dialect)
    for dialect in Dialect:
        names = kurdical.month_names(dialect)
        assert len(names) == 12
        assert all(name.strip() for name in names)
        assert kurdical.month_name(1, dialect) == names[0]
    with pytest.raises(ValueError):
        kurdical.month_name(13)


def test_epoch_offsets():
    assert kurdical.epoch_offset(Epoch.MEDIAN_KINGDOM) == 1321
    assert kurdical.epoch_offset(Epoch.FALL_OF_NINEVEH) == 1233
    assert KurdishDate(2723, 1, 1).solar_hijri_year == 1402


def test_new_year_day():
    assert kurdical.new_year_day(2723) == date(2023, 3, 21)
    assert kurdical.new_year_day(2724) == date(2024, 3, 20)
    assert kurdical.new_year_day(2725) == date(2025, 3, 21)
    assert kurdical.new_year_day(2635, Epoch.FALL_OF_NINEVEH) == date(2023, 3, 21)


def test_format_date():
    k = kurdical.gregorian_to_kurdish(date(2023, 3, 21))
    assert kurdical.format_date(k) == "2723-1-1 خاکه\u200cلێوه"
    assert kurdical.format_date(KurdishDate(2723, 10, 11)) == "2723-10-11 به\u200cفرانبار"


def test_parse_names():
    assert kurdical.parse_dialect("Sorani") is Dialect.SORANI
    assert kurdical.parse_dialect(Dialect.LAKI) is Dialect.LAKI
    assert kurdical.parse_epoch("median") is Epoch.MEDIAN_KINGDOM
    assert kurdical.parse_epoch("fall-of-nineveh") is Epoch.FALL_OF_NINEVEH
    assert kurdical.parse_epoch("NINEVEH") is Epoch.FALL_OF_NINEVEH
    with pytest.raises(KeyError):
        kurdical.parse_dialect("zazaki")
    with pytest.raises(KeyError):
        kurdical.parse_epoch("babylon")
