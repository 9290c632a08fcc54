# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Accrual history schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field

from absence_registration.models.enums import AccrualType
from absence_registration.schemas.common import HOLIDAY_YEAR_PATTERN


class AccrualRecord(BaseModel):
    """One immutable accrual ledger entry."""

    id: uuid.UUID | None = None
    name: str | None = None
    employee_email: str
    employee_name: str
    holiday_year: str
    accrual_date: datetime.date
    accrual_month: int
    accrual_year: int
    days_accrued: float
    feriefridage_accrued: float | None = None
    balance_after_accrual: float | None = None
    accrual_type: AccrualType
    notes: str | None = None
    created_at: datetime.datetime | None = None


class AccrualCreate(BaseModel):
    """Schema for creating an accrual entry.

    Holiday year defaults to the one containing ``accrual_date``.
    """

    employee_email: str = Field(..., min_length=3, max_length=255)
    employee_name: str = Field(..., min_length=1, max_length=200)
    holiday_year: str | None = Field(None, pattern=HOLIDAY_YEAR_PATTERN)
    accrual_date: datetime.date
    days_accrued: float = Field(..., allow_inf_nan=False)
    feriefridage_accrued: float | None = Field(None, allow_inf_nan=False)
    balance_after_accrual: float | None = Field(None, allow_inf_nan=False)
    accrual_type: AccrualType = AccrualType.MANUAL_ADJUSTMENT
    notes: str | None = None


class MonthlyAccrualRequest(BaseModel):
    """Grant one month of statutory (and optionally contract) days."""

    employee_email: str = Field(..., min_length=3, max_length=255)
    employee_name: str = Field(..., min_length=1, max_length=200)
    accrual_date: datetime.date
    include_feriefridage: bool = True
