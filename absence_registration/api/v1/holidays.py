# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Danish public holiday API endpoints."""

from datetime import date

from fastapi import APIRouter, HTTPException, Path, Query, status

from absence_registration.schemas.holiday import HolidayResponse, WorkingDaysResponse
from absence_registration.services import danish_holiday_service

router = APIRouter(prefix="/holidays", tags=["holidays"])


def _check_range(start_date: date, end_date: date) -> None:
    if end_date < start_date:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="end_date must be on or after start_date",
        )


@router.get("/working-days", response_model=WorkingDaysResponse)
def get_working_days(
    start_date: date = Query(..., description="First day, inclusive"),
    end_date: date = Query(..., description="Last day, inclusive"),
) -> WorkingDaysResponse:
    """Count Danish working days in a date range."""
    _check_range(start_date, end_date)
    holidays = danish_holiday_service.holidays_between(start_date, end_date)
    return WorkingDaysResponse(
        start_date=start_date,
        end_date=end_date,
        working_days=danish_holiday_service.count_working_days(start_date, end_date),
        holidays=[HolidayResponse.model_validate(h) for h in holidays],
    )


@router.get("/between", response_model=list[HolidayResponse])
def get_holidays_between(
    start_date: date = Query(..., description="First day, inclusive"),
    end_date: date = Query(..., description="Last day, inclusive"),
) -> list[HolidayResponse]:
    """List public holidays in a date range."""
    _check_range(start_date, end_date)
    return [
        HolidayResponse.model_validate(h)
        for h in danish_holiday_service.holidays_between(start_date, end_date)
    ]


@router.get("/{year}", response_model=list[HolidayResponse])
def get_holidays_for_year(
    year: int = Path(..., ge=1583, le=9999),
) -> list[HolidayResponse]:
    """List the public holidays of a calendar year."""
    return [
        HolidayResponse.model_validate(h)
        for h in danish_holiday_service.holidays_for_year(year)
    ]
