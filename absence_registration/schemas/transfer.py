# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Year-end transfer schemas."""

import datetime

from pydantic import BaseModel, Field

from absence_registration.models.enums import TransferState
from absence_registration.schemas.accrual import AccrualCreate
from absence_registration.schemas.common import HOLIDAY_YEAR_PATTERN


class TransferRequest(BaseModel):
    """Request to carry unused 5th-week days into the next holiday year.

    Amounts must be finite numbers but are not range-checked here; the
    transfer engine reports out-of-range amounts as validation errors.
    """

    employee_email: str = Field(..., min_length=3, max_length=255)
    employee_name: str = Field(..., min_length=1, max_length=200)
    current_holiday_year: str = Field(..., pattern=HOLIDAY_YEAR_PATTERN)
    feriedage_to_transfer: float = Field(..., allow_inf_nan=False)
    feriefridage_to_transfer: float | None = Field(None, allow_inf_nan=False)
    agreement_date: datetime.date
    notes: str | None = None


class TransferValidationResult(BaseModel):
    """Outcome of validating a transfer request against a balance."""

    state: TransferState
    is_valid: bool
    errors: list[str] = []
    warnings: list[str] = []
    max_feriedage_transferable: float
    deadline_date: datetime.date
    is_deadline_passed: bool
    mandatory_days_taken: float
    days_at_risk: float


class CurrentYearTransferUpdate(BaseModel):
    """Fields to set on the source year's stored balance."""

    employee_email: str
    employee_name: str
    holiday_year: str
    transferred_out_days: float
    has_transfer_agreement: bool = True
    transfer_agreement_date: datetime.date
    feriefridage_transferred_out: float = 0.0


class NextYearTransferSeed(BaseModel):
    """Fields to set on the receiving year's stored balance."""

    employee_email: str
    employee_name: str
    holiday_year: str
    transferred_in_days: float
    feriefridage_transferred_in: float = 0.0
    transfer_source: str


class YearEndTransfer(BaseModel):
    """Both halves of a year-end transfer."""

    current_year: CurrentYearTransferUpdate
    next_year: NextYearTransferSeed


class TransferResult(BaseModel):
    """Result of processing a transfer request.

    Nothing is persisted by the engine; an applied result is handed to the
    record store by the caller.
    """

    state: TransferState
    success: bool
    error: str | None = None
    validation: TransferValidationResult
    current_year_update: CurrentYearTransferUpdate | None = None
    next_year_seed: NextYearTransferSeed | None = None
    transfer_accrual_record: AccrualCreate | None = None
