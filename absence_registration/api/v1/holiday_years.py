# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday year API endpoints."""

from datetime import date

from fastapi import APIRouter

from absence_registration.schemas.holiday import HolidayYearResponse
from absence_registration.services import holiday_year as hy

router = APIRouter(prefix="/holiday-years", tags=["holiday-years"])


def _describe(holiday_year: str) -> HolidayYearResponse:
    return HolidayYearResponse(
        holiday_year=holiday_year,
        start_date=hy.year_start(holiday_year),
        end_date=hy.year_end(holiday_year),
        taking_period_end=hy.taking_period_end(holiday_year),
        transfer_deadline=hy.transfer_deadline(holiday_year),
        previous_holiday_year=hy.previous_holiday_year(holiday_year),
        next_holiday_year=hy.next_holiday_year(holiday_year),
    )


@router.get("/current", response_model=HolidayYearResponse)
def get_current_holiday_year() -> HolidayYearResponse:
    """Get the holiday year containing today."""
    return _describe(hy.current_holiday_year())


@router.get("/{on_date}", response_model=HolidayYearResponse)
def get_holiday_year_for_date(on_date: date) -> HolidayYearResponse:
    """Get the holiday year containing a date."""
    return _describe(hy.holiday_year_of(on_date))
