# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Accrual history administration."""

import logging

from absence_registration.config import settings
from absence_registration.models.enums import AccrualType
from absence_registration.schemas.accrual import (
    AccrualCreate,
    AccrualRecord,
    MonthlyAccrualRequest,
)
from absence_registration.services import holiday_year as hy
from absence_registration.services.record_store import RecordStore

logger = logging.getLogger(__name__)

MONTH_ABBREVIATIONS = (
    "",
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "Maj",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Okt",
    "Nov",
    "Dec",
)


def accrual_display_name(
    employee_name: str, accrual_type: AccrualType, month: int, year: int
) -> str:
    """Build the title of an accrual entry, e.g. ``"Jens - Startsaldo - Sep 2024"``."""
    return f"{employee_name} - {accrual_type.label} - {MONTH_ABBREVIATIONS[month]} {year}"


def build_accrual_record(data: AccrualCreate) -> AccrualRecord:
    """Turn creation data into a complete, unsaved accrual record.

    Month and year are taken from the accrual date. A missing holiday year
    is resolved from the accrual date as well.

    Args:
        data: Accrual creation data.

    Returns:
        Accrual record without id.
    """
    holiday_year = data.holiday_year or hy.holiday_year_of(data.accrual_date)
    hy.parse_holiday_year(holiday_year)
    month = data.accrual_date.month
    year = data.accrual_date.year
    return AccrualRecord(
        name=accrual_display_name(data.employee_name, data.accrual_type, month, year),
        employee_email=data.employee_email,
        employee_name=data.employee_name,
        holiday_year=holiday_year,
        accrual_date=data.accrual_date,
        accrual_month=month,
        accrual_year=year,
        days_accrued=data.days_accrued,
        feriefridage_accrued=data.feriefridage_accrued,
        balance_after_accrual=data.balance_after_accrual,
        accrual_type=data.accrual_type,
        notes=data.notes,
    )


def monthly_accrual(
    request: MonthlyAccrualRequest,
    rate: float | None = None,
    feriefridage_rate: float | None = None,
) -> AccrualCreate:
    """Creation data for one month of accrued holiday.

    Rates default to the configured monthly accrual rates.
    """
    days = settings.MONTHLY_ACCRUAL_RATE if rate is None else rate
    feriefridage = None
    if request.include_feriefridage:
        feriefridage = (
            settings.MONTHLY_FERIEFRIDAGE_RATE
            if feriefridage_rate is None
            else feriefridage_rate
        )
    return AccrualCreate(
        employee_email=request.employee_email,
        employee_name=request.employee_name,
        holiday_year=hy.holiday_year_of(request.accrual_date),
        accrual_date=request.accrual_date,
        days_accrued=days,
        feriefridage_accrued=feriefridage,
        accrual_type=AccrualType.MONTHLY_ACCRUAL,
    )


class AccrualService:
    """Administrative operations on the accrual history."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def list_records(self, employee_email: str | None, holiday_year: str) -> list[AccrualRecord]:
        """Accrual records of a holiday year, optionally for one employee."""
        hy.parse_holiday_year(holiday_year)
        if employee_email:
            return self.store.fetch_accrual_records(employee_email, holiday_year)
        return self.store.fetch_all_accrual_records(holiday_year)

    def create(self, data: AccrualCreate) -> AccrualRecord:
        """Create a single accrual entry."""
        record = self.store.create_accrual_record(build_accrual_record(data))
        logger.info(
            f"Created {record.accrual_type.value} accrual of {record.days_accrued} days "
            f"for {record.employee_email} in {record.holiday_year}"
        )
        return record

    def create_monthly(self, request: MonthlyAccrualRequest) -> AccrualRecord:
        """Create the monthly accrual entry for one employee."""
        return self.create(monthly_accrual(request))

    def count(self) -> int:
        """Number of accrual entries."""
        return self.store.count_accrual_records()

    def purge(self) -> int:
        """Delete all accrual entries."""
        deleted = self.store.delete_all_accrual_records()
        logger.info(f"Deleted {deleted} accrual records")
        return deleted
