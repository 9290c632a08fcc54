# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Danish public holidays and working day calculations.

Public holidays come from the ``holidays`` package, which stops producing
Store Bededag from 2024. Christmas Eve is not a statutory holiday but is a
day off in Danish workplaces and is added to every year.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from functools import lru_cache

import holidays

CHRISTMAS_EVE_NAME = "Juleaftensdag"


@dataclass(frozen=True)
class Holiday:
    """A public holiday on a specific date."""

    date: date
    name: str


def _as_date(value: date | datetime) -> date:
    """Drop the time of day from a datetime, pass dates through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def easter_sunday(year: int) -> date:
    """Calculate Easter Sunday using the Anonymous Gregorian algorithm.

    Args:
        year: Gregorian calendar year.

    Returns:
        The date of Easter Sunday.
    """
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


@lru_cache(maxsize=64)
def _holidays_for_year(year: int) -> tuple[Holiday, ...]:
    dk_holidays = holidays.DK(years=year)
    result = [Holiday(day, name) for day, name in dk_holidays.items()]
    christmas_eve = date(year, 12, 24)
    if christmas_eve not in dk_holidays:
        result.append(Holiday(christmas_eve, CHRISTMAS_EVE_NAME))
    return tuple(sorted(result, key=lambda h: h.date))


def holidays_for_year(year: int) -> list[Holiday]:
    """Return all Danish public holidays in a calendar year, sorted by date.

    Args:
        year: Calendar year.

    Returns:
        List of holidays.
    """
    return list(_holidays_for_year(year))


def holiday_name(value: date | datetime) -> str | None:
    """Return the holiday name for a date, or None for ordinary days."""
    day = _as_date(value)
    for holiday in _holidays_for_year(day.year):
        if holiday.date == day:
            return holiday.name
    return None


def is_holiday(value: date | datetime) -> bool:
    """Check if a date is a Danish public holiday (time of day is ignored)."""
    return holiday_name(value) is not None


def is_weekend(value: date | datetime) -> bool:
    """Check if a date falls on Saturday or Sunday."""
    return _as_date(value).weekday() >= 5


def is_working_day(value: date | datetime) -> bool:
    """Check if a date is neither a weekend nor a public holiday."""
    return not is_weekend(value) and not is_holiday(value)


def count_working_days(start: date | datetime, end: date | datetime) -> int:
    """Count working days between two dates, both inclusive.

    Datetimes are reduced to their calendar date before counting.

    Args:
        start: First day of the range.
        end: Last day of the range.

    Returns:
        Number of working days, 0 when start is after end.
    """
    current = _as_date(start)
    last = _as_date(end)
    if current > last:
        return 0

    working_days = 0
    while current <= last:
        if is_working_day(current):
            working_days += 1
        current += timedelta(days=1)
    return working_days


def holidays_between(start: date | datetime, end: date | datetime) -> list[Holiday]:
    """Return holidays within an inclusive date range, sorted by date."""
    first = _as_date(start)
    last = _as_date(end)
    if first > last:
        return []

    result: list[Holiday] = []
    for year in range(first.year, last.year + 1):
        result.extend(h for h in _holidays_for_year(year) if first <= h.date <= last)
    return result
