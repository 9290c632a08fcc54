# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday year (ferieår) resolution.

A holiday year runs from September 1 to August 31 and is keyed as
``"<start>-<start+1>"``. Days can still be taken, and transfer agreements
made, until December 31 of the second year.
"""

import re
from datetime import date, datetime

from absence_registration.exceptions import InvalidHolidayYearError

HOLIDAY_YEAR_START_MONTH = 9
HOLIDAY_YEAR_END_MONTH = 8
HOLIDAY_YEAR_END_DAY = 31
TAKING_PERIOD_END_MONTH = 12
TAKING_PERIOD_END_DAY = 31

_HOLIDAY_YEAR_RE = re.compile(r"^(\d{4})-(\d{4})$")


def parse_holiday_year(holiday_year: str) -> tuple[int, int]:
    """Split a holiday year key into its start and end calendar years.

    Raises:
        InvalidHolidayYearError: If the key is malformed or the years are
            not consecutive.
    """
    match = _HOLIDAY_YEAR_RE.match(holiday_year) if isinstance(holiday_year, str) else None
    if not match:
        raise InvalidHolidayYearError(holiday_year)
    start_year, end_year = int(match.group(1)), int(match.group(2))
    if end_year != start_year + 1:
        raise InvalidHolidayYearError(holiday_year)
    return start_year, end_year


def format_holiday_year(start_year: int) -> str:
    """Build the key for the holiday year starting in ``start_year``."""
    return f"{start_year}-{start_year + 1}"


def holiday_year_of(value: date | datetime) -> str:
    """Return the holiday year containing a date."""
    if value.month >= HOLIDAY_YEAR_START_MONTH:
        return format_holiday_year(value.year)
    return format_holiday_year(value.year - 1)


def current_holiday_year(as_of: date | None = None) -> str:
    """Return the holiday year containing ``as_of`` (default: today)."""
    return holiday_year_of(as_of or date.today())


def year_start(holiday_year: str) -> date:
    """September 1 of the first year."""
    start_year, _ = parse_holiday_year(holiday_year)
    return date(start_year, HOLIDAY_YEAR_START_MONTH, 1)


def year_end(holiday_year: str) -> date:
    """August 31 of the second year."""
    _, end_year = parse_holiday_year(holiday_year)
    return date(end_year, HOLIDAY_YEAR_END_MONTH, HOLIDAY_YEAR_END_DAY)


def taking_period_end(holiday_year: str) -> date:
    """December 31 of the second year, the last day holiday can be taken."""
    _, end_year = parse_holiday_year(holiday_year)
    return date(end_year, TAKING_PERIOD_END_MONTH, TAKING_PERIOD_END_DAY)


def transfer_deadline(holiday_year: str) -> date:
    """Last day a transfer agreement can be made."""
    return taking_period_end(holiday_year)


def is_within_transfer_deadline(holiday_year: str, as_of: date | datetime) -> bool:
    """Check whether a transfer agreement dated ``as_of`` is still in time."""
    if isinstance(as_of, datetime):
        as_of = as_of.date()
    return as_of <= transfer_deadline(holiday_year)


def contains(holiday_year: str, value: date | datetime) -> bool:
    """Check whether a date lies in the Sept 1 - Aug 31 window."""
    if isinstance(value, datetime):
        value = value.date()
    return year_start(holiday_year) <= value <= year_end(holiday_year)


def next_holiday_year(holiday_year: str) -> str:
    """Return the following holiday year."""
    _, end_year = parse_holiday_year(holiday_year)
    return format_holiday_year(end_year)


def previous_holiday_year(holiday_year: str) -> str:
    """Return the preceding holiday year."""
    start_year, _ = parse_holiday_year(holiday_year)
    return format_holiday_year(start_year - 1)
