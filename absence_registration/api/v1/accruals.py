# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Accrual history API endpoints."""

from fastapi import APIRouter, Depends, Query, status

from absence_registration.api.deps import get_accrual_service
from absence_registration.schemas.accrual import (
    AccrualCreate,
    AccrualRecord,
    MonthlyAccrualRequest,
)
from absence_registration.schemas.common import HOLIDAY_YEAR_PATTERN, CountResponse
from absence_registration.services.accrual_service import AccrualService

router = APIRouter(prefix="/accruals", tags=["accruals"])


@router.get("", response_model=list[AccrualRecord])
def list_accruals(
    holiday_year: str = Query(..., pattern=HOLIDAY_YEAR_PATTERN),
    employee_email: str | None = Query(None, description="Limit to one employee"),
    service: AccrualService = Depends(get_accrual_service),
) -> list[AccrualRecord]:
    """List accrual entries of a holiday year."""
    return service.list_records(employee_email, holiday_year)


@router.get("/count", response_model=CountResponse)
def count_accruals(
    service: AccrualService = Depends(get_accrual_service),
) -> CountResponse:
    """Number of accrual entries."""
    return CountResponse(count=service.count())


@router.post("", response_model=AccrualRecord, status_code=status.HTTP_201_CREATED)
def create_accrual(
    data: AccrualCreate,
    service: AccrualService = Depends(get_accrual_service),
) -> AccrualRecord:
    """Create an accrual entry (initial balance, adjustment, ...)."""
    return service.create(data)


@router.post(
    "/monthly", response_model=AccrualRecord, status_code=status.HTTP_201_CREATED
)
def create_monthly_accrual(
    data: MonthlyAccrualRequest,
    service: AccrualService = Depends(get_accrual_service),
) -> AccrualRecord:
    """Create one month of accrued holiday at the configured rates."""
    return service.create_monthly(data)


@router.delete("", response_model=CountResponse)
def purge_accruals(
    service: AccrualService = Depends(get_accrual_service),
) -> CountResponse:
    """Delete all accrual entries."""
    return CountResponse(count=service.purge())
