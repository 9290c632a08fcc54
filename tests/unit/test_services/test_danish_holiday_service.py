# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for danish_holiday_service."""

from datetime import date, datetime, timedelta

import holidays
import pytest

from absence_registration.services import danish_holiday_service as calendar


def dates_for(year: int) -> set[date]:
    return {h.date for h in calendar.holidays_for_year(year)}


@pytest.mark.parametrize(
    "year,expected",
    [
        (2019, date(2019, 4, 21)),
        (2023, date(2023, 4, 9)),
        (2024, date(2024, 3, 31)),
        (2025, date(2025, 4, 20)),
        (2038, date(2038, 4, 25)),
    ],
)
def test_easter_sunday_known_dates(year, expected):
    assert calendar.easter_sunday(year) == expected


@pytest.mark.parametrize("year", range(2015, 2031))
def test_easter_sunday_matches_holiday_calendar(year):
    assert calendar.easter_sunday(year) in dates_for(year)


def test_easter_derived_holidays_2024():
    assert {
        date(2024, 3, 28),  # Skærtorsdag
        date(2024, 3, 29),  # Langfredag
        date(2024, 3, 31),  # Påskedag
        date(2024, 4, 1),  # 2. Påskedag
        date(2024, 5, 9),  # Kristi Himmelfartsdag
        date(2024, 5, 19),  # Pinsedag
        date(2024, 5, 20),  # 2. Pinsedag
    } <= dates_for(2024)


def test_fixed_holidays_present():
    for expected in (
        date(2025, 1, 1),
        date(2025, 12, 24),
        date(2025, 12, 25),
        date(2025, 12, 26),
    ):
        assert expected in dates_for(2025)


def test_christmas_eve_added():
    by_date = {h.date: h.name for h in calendar.holidays_for_year(2024)}
    assert by_date[date(2024, 12, 24)] == calendar.CHRISTMAS_EVE_NAME
    assert [h.date for h in calendar.holidays_for_year(2024)].count(date(2024, 12, 24)) == 1


@pytest.mark.parametrize("year", range(2015, 2031))
def test_store_bededag_only_before_2024(year):
    store_bededag = calendar.easter_sunday(year) + timedelta(days=26)
    assert (store_bededag in dates_for(year)) is (year < 2024)


def test_store_bededag_2023_date():
    assert date(2023, 5, 5) in dates_for(2023)
    assert calendar.holiday_name(date(2023, 5, 5)) == holidays.DK(years=2023)[date(2023, 5, 5)]


@pytest.mark.parametrize("year", [2023, 2024, 2025])
def test_holiday_count(year):
    assert len(calendar.holidays_for_year(year)) == (12 if year < 2024 else 11)


def test_holidays_sorted_by_date():
    result = calendar.holidays_for_year(2024)
    assert [h.date for h in result] == sorted(h.date for h in result)


def test_holidays_for_year_returns_copy():
    first = calendar.holidays_for_year(2024)
    first.clear()
    assert len(calendar.holidays_for_year(2024)) == 11


@pytest.mark.parametrize("year", range(2018, 2031))
def test_public_holidays_come_from_holidays_package(year):
    ours = {h.date: h.name for h in calendar.holidays_for_year(year)}
    official = holidays.DK(years=year)
    assert set(ours) - set(official) == {date(year, 12, 24)}
    for day, name in official.items():
        assert ours[day] == name


def test_is_holiday_ignores_time_of_day():
    assert calendar.is_holiday(datetime(2024, 12, 25, 23, 59))
    assert calendar.is_holiday(datetime(2024, 3, 31, 0, 0))
    assert not calendar.is_holiday(datetime(2024, 12, 27, 12, 0))


def test_holiday_name():
    assert calendar.holiday_name(date(2024, 1, 1)) == holidays.DK(years=2024)[date(2024, 1, 1)]
    assert calendar.holiday_name(date(2024, 12, 24)) == "Juleaftensdag"
    assert calendar.holiday_name(date(2024, 1, 2)) is None


def test_is_weekend():
    assert calendar.is_weekend(date(2024, 6, 1))  # Saturday
    assert calendar.is_weekend(date(2024, 6, 2))  # Sunday
    assert not calendar.is_weekend(date(2024, 6, 3))


def test_is_working_day():
    assert calendar.is_working_day(date(2024, 6, 3))
    assert not calendar.is_working_day(date(2024, 6, 1))
    assert not calendar.is_working_day(date(2024, 5, 9))  # Kristi Himmelfartsdag


@pytest.mark.parametrize(
    "day",
    [date(2024, 6, 3), date(2024, 6, 1), date(2024, 12, 25), date(2023, 5, 5)],
)
def test_count_working_days_single_day(day):
    expected = 1 if calendar.is_working_day(day) else 0
    assert calendar.count_working_days(day, day) == expected


def test_count_working_days_start_after_end():
    assert calendar.count_working_days(date(2024, 6, 10), date(2024, 6, 3)) == 0


def test_count_working_days_plain_week():
    assert calendar.count_working_days(date(2024, 6, 3), date(2024, 6, 9)) == 5


def test_count_working_days_easter_week_2024():
    # Mon 25 Mar - Tue 2 Apr: Skærtorsdag, Langfredag and 2. Påskedag are off
    assert calendar.count_working_days(date(2024, 3, 25), date(2024, 4, 2)) == 4


def test_count_working_days_christmas_2024():
    # Mon 23 Dec - Fri 27 Dec: 24, 25 and 26 are holidays
    assert calendar.count_working_days(date(2024, 12, 23), date(2024, 12, 27)) == 2


def test_count_working_days_accepts_datetimes():
    start = datetime(2024, 6, 3, 17, 30)
    end = datetime(2024, 6, 7, 8, 0)
    assert calendar.count_working_days(start, end) == 5


def test_count_working_days_across_dst_change():
    # Danish summer time starts on 31 March 2024, 2. Påskedag is on 1 April
    assert calendar.count_working_days(date(2024, 3, 18), date(2024, 4, 12)) == 17


def test_holidays_between_spans_years():
    result = calendar.holidays_between(date(2024, 12, 20), date(2025, 1, 5))
    assert [h.date for h in result] == [
        date(2024, 12, 24),
        date(2024, 12, 25),
        date(2024, 12, 26),
        date(2025, 1, 1),
    ]


def test_holidays_between_inclusive_bounds():
    result = calendar.holidays_between(date(2024, 12, 24), date(2024, 12, 24))
    assert [h.name for h in result] == ["Juleaftensdag"]


def test_holidays_between_empty_when_reversed():
    assert calendar.holidays_between(date(2025, 1, 5), date(2024, 12, 20)) == []
