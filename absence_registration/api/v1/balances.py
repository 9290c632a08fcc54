# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday balance API endpoints."""

from fastapi import APIRouter, Depends, Query

from absence_registration.api.deps import get_balance_service, get_transfer_service
from absence_registration.config import settings
from absence_registration.schemas.balance import (
    CalculatedBalance,
    HolidayBalanceSnapshot,
    YearEndSummaryResponse,
)
from absence_registration.schemas.common import HOLIDAY_YEAR_PATTERN
from absence_registration.services import holiday_year as hy
from absence_registration.services.balance_service import BalanceService
from absence_registration.services.transfer_service import TransferService

router = APIRouter(prefix="/balances", tags=["balances"])


@router.get("", response_model=list[CalculatedBalance])
def list_balances(
    holiday_year: str = Query(..., pattern=HOLIDAY_YEAR_PATTERN),
    service: BalanceService = Depends(get_balance_service),
) -> list[CalculatedBalance]:
    """Balances of all employees with accruals in a holiday year."""
    return service.get_all_employee_balances(holiday_year)


@router.get("/{employee_email}", response_model=CalculatedBalance)
def get_balance(
    employee_email: str,
    holiday_year: str | None = Query(None, pattern=HOLIDAY_YEAR_PATTERN),
    service: BalanceService = Depends(get_balance_service),
) -> CalculatedBalance:
    """Calculate an employee's balance, by default for the current holiday year."""
    return service.calculate_for_user(employee_email, holiday_year)


@router.get("/{employee_email}/snapshot", response_model=HolidayBalanceSnapshot)
def get_balance_snapshot(
    employee_email: str,
    holiday_year: str | None = Query(None, pattern=HOLIDAY_YEAR_PATTERN),
    service: BalanceService = Depends(get_balance_service),
) -> HolidayBalanceSnapshot:
    """Balance including stored transfer bookkeeping."""
    return service.get_balance_snapshot(
        employee_email, holiday_year or hy.current_holiday_year()
    )


@router.get(
    "/{employee_email}/year-end-summary", response_model=YearEndSummaryResponse
)
def get_year_end_summary(
    employee_email: str,
    holiday_year: str | None = Query(None, pattern=HOLIDAY_YEAR_PATTERN),
    service: TransferService = Depends(get_transfer_service),
) -> YearEndSummaryResponse:
    """What happens to the balance when the holiday-taking period ends."""
    return service.year_end_summary(
        employee_email,
        holiday_year or hy.current_holiday_year(),
        lookahead_days=settings.TRANSFER_REMINDER_DAYS,
    )
