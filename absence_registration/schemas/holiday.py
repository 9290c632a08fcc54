# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public holiday and holiday year schemas."""

import datetime

from pydantic import BaseModel


class HolidayResponse(BaseModel):
    """A Danish public holiday."""

    date: datetime.date
    name: str

    model_config = {"from_attributes": True}


class WorkingDaysResponse(BaseModel):
    """Working day count for an inclusive date range."""

    start_date: datetime.date
    end_date: datetime.date
    working_days: int
    holidays: list[HolidayResponse]


class HolidayYearResponse(BaseModel):
    """Boundaries of a holiday year."""

    holiday_year: str
    start_date: datetime.date
    end_date: datetime.date
    taking_period_end: datetime.date
    transfer_deadline: datetime.date
    previous_holiday_year: str
    next_holiday_year: str
