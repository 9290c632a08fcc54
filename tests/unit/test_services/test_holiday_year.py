# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for holiday year resolution."""

from datetime import date, datetime, timedelta

import pytest

from absence_registration.exceptions import InvalidHolidayYearError
from absence_registration.services import holiday_year as hy


@pytest.mark.parametrize(
    "day,expected",
    [
        (date(2024, 9, 1), "2024-2025"),
        (date(2024, 8, 31), "2023-2024"),
        (date(2025, 1, 15), "2024-2025"),
        (date(2025, 8, 31), "2024-2025"),
        (date(2024, 12, 31), "2024-2025"),
        (datetime(2024, 9, 1, 0, 0), "2024-2025"),
    ],
)
def test_holiday_year_of(day, expected):
    assert hy.holiday_year_of(day) == expected


def test_window_boundaries():
    assert hy.year_start("2024-2025") == date(2024, 9, 1)
    assert hy.year_end("2024-2025") == date(2025, 8, 31)
    assert hy.taking_period_end("2024-2025") == date(2025, 12, 31)
    assert hy.transfer_deadline("2024-2025") == date(2025, 12, 31)


def test_year_boundary_round_trip():
    day = date(2020, 1, 1)
    while day < date(2022, 1, 1):
        key = hy.holiday_year_of(day)
        assert hy.holiday_year_of(hy.year_start(key)) == key
        assert hy.contains(key, day)
        day += timedelta(days=1)


def test_is_within_transfer_deadline():
    assert hy.is_within_transfer_deadline("2024-2025", date(2024, 12, 31))
    assert hy.is_within_transfer_deadline("2024-2025", date(2025, 12, 31))
    assert not hy.is_within_transfer_deadline("2024-2025", date(2026, 1, 1))
    assert hy.is_within_transfer_deadline("2024-2025", datetime(2025, 12, 31, 23, 0))


def test_next_and_previous():
    assert hy.next_holiday_year("2024-2025") == "2025-2026"
    assert hy.previous_holiday_year("2024-2025") == "2023-2024"


def test_current_holiday_year_as_of():
    assert hy.current_holiday_year(date(2025, 3, 1)) == "2024-2025"


def test_current_holiday_year_defaults_to_today():
    assert hy.current_holiday_year() == hy.holiday_year_of(date.today())


def test_contains():
    assert hy.contains("2024-2025", date(2024, 9, 1))
    assert hy.contains("2024-2025", date(2025, 8, 31))
    assert not hy.contains("2024-2025", date(2025, 9, 1))
    assert not hy.contains("2024-2025", date(2024, 8, 31))


@pytest.mark.parametrize("key", ["2024", "2024-2026", "2024/2025", "24-25", "", "abcd-efgh"])
def test_malformed_keys_fail_fast(key):
    with pytest.raises(InvalidHolidayYearError):
        hy.year_start(key)


def test_parse_holiday_year():
    assert hy.parse_holiday_year("2024-2025") == (2024, 2025)
