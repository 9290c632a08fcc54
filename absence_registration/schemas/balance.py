# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday balance schemas."""

import datetime

from pydantic import BaseModel, ConfigDict, computed_field


class CalculatedBalance(BaseModel):
    """Balance for one employee and holiday year, derived on every request.

    ``total_accrued_days`` sums every accrual record of the year, including
    transfer-in records; ``transferred_in_days`` reports that transfer-in
    share separately.
    """

    model_config = ConfigDict(frozen=True)

    employee_email: str
    employee_name: str
    holiday_year: str

    # Feriedage (statutory)
    total_accrued_days: float = 0.0
    transferred_in_days: float = 0.0
    used_days: float = 0.0
    pending_days: float = 0.0
    available_days: float = 0.0

    # Feriefridage (contract)
    total_accrued_feriefridage: float = 0.0
    transferred_in_feriefridage: float = 0.0
    used_feriefridage: float = 0.0
    pending_feriefridage: float = 0.0
    available_feriefridage: float = 0.0

    accrual_history_count: int = 0
    absence_registration_count: int = 0

    @property
    def is_negative(self) -> bool:
        """True when either pool is overdrawn."""
        return self.available_days < 0 or self.available_feriefridage < 0


class StoredTransferState(BaseModel):
    """Persisted transfer bookkeeping for one employee and holiday year."""

    model_config = ConfigDict(from_attributes=True)

    employee_email: str
    employee_name: str
    holiday_year: str
    carried_over_days: float = 0.0
    transferred_in_days: float = 0.0
    transferred_out_days: float = 0.0
    has_transfer_agreement: bool = False
    transfer_agreement_date: datetime.date | None = None
    feriefridage_transferred_in: float = 0.0
    feriefridage_transferred_out: float = 0.0


class HolidayBalanceSnapshot(BaseModel):
    """Balance in the shape consumed by the transfer engine.

    ``accrued_days`` excludes transferred-in days, which are reported in
    ``transferred_in_days``.
    """

    model_config = ConfigDict(frozen=True)

    employee_email: str
    employee_name: str
    holiday_year: str

    accrued_days: float = 0.0
    used_days: float = 0.0
    pending_days: float = 0.0
    carried_over_days: float = 0.0
    transferred_in_days: float = 0.0
    transferred_out_days: float = 0.0
    has_transfer_agreement: bool = False
    transfer_agreement_date: datetime.date | None = None

    feriefridage_accrued: float = 0.0
    feriefridage_used: float = 0.0
    feriefridage_pending: float = 0.0
    feriefridage_transferred_in: float = 0.0
    feriefridage_transferred_out: float = 0.0

    @computed_field
    @property
    def available_days(self) -> float:
        """accrued + carried over + transferred in - used - pending."""
        return (
            self.accrued_days
            + self.carried_over_days
            + self.transferred_in_days
            - self.used_days
            - self.pending_days
        )

    @computed_field
    @property
    def available_feriefridage(self) -> float:
        """Contract days left, pending registrations included."""
        return (
            self.feriefridage_accrued
            + self.feriefridage_transferred_in
            - self.feriefridage_used
            - self.feriefridage_pending
        )


class YearEndSummary(BaseModel):
    """What happens to a balance at the end of the holiday-taking period."""

    holiday_year: str
    total_available: float
    mandatory_days_remaining: float
    days_to_be_forfeited: float
    days_transferable_with_agreement: float
    days_to_be_paid_out: float
    feriefridage_remaining: float
    recommendations: list[str]


class YearEndSummaryResponse(YearEndSummary):
    """Year-end summary with deadline information for display."""

    transfer_deadline: datetime.date
    is_approaching_deadline: bool
