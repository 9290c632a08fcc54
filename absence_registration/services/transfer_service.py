# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Year-end holiday transfers under Ferieloven §19.

Only the 5th week (the days above the mandatory 20) can be transferred,
at most 5 days per holiday year, and only with a written agreement made by
December 31 of the holiday-taking period. Feriefridage are contract days
and not covered by the act.

The functions in this module are pure. ``TransferService`` wires them to a
record store.
"""

import logging
import math
from datetime import date, timedelta

from absence_registration.models.enums import AccrualType, TransferState
from absence_registration.schemas.accrual import AccrualCreate
from absence_registration.schemas.balance import (
    HolidayBalanceSnapshot,
    YearEndSummary,
    YearEndSummaryResponse,
)
from absence_registration.schemas.transfer import (
    CurrentYearTransferUpdate,
    NextYearTransferSeed,
    TransferRequest,
    TransferResult,
    TransferValidationResult,
    YearEndTransfer,
)
from absence_registration.services import holiday_year as hy
from absence_registration.services.balance_service import BalanceService
from absence_registration.services.record_store import RecordStore

logger = logging.getLogger(__name__)

MANDATORY_VACATION_DAYS = 20
MAX_TRANSFER_DAYS_PER_YEAR = 5
ANNUAL_VACATION_DAYS = 25


def _days(value: float) -> str:
    """Format a day count without a trailing ``.0``."""
    return f"{value:g}"


def max_transferable_days(balance: HolidayBalanceSnapshot) -> float:
    """Days of the 5th week that can still be transferred (0-5)."""
    total = balance.accrued_days + balance.transferred_in_days + balance.carried_over_days
    remaining = total - balance.used_days - balance.pending_days
    above_mandatory = max(0.0, remaining - MANDATORY_VACATION_DAYS)
    return min(above_mandatory, MAX_TRANSFER_DAYS_PER_YEAR)


def has_mandatory_vacation_been_taken(balance: HolidayBalanceSnapshot) -> bool:
    """True once the mandatory 20 days have been used."""
    return balance.used_days >= MANDATORY_VACATION_DAYS


def days_at_risk_of_forfeiture(balance: HolidayBalanceSnapshot) -> float:
    """Mandatory days not yet taken, capped at what is still available."""
    mandatory_remaining = max(0.0, MANDATORY_VACATION_DAYS - balance.used_days)
    return min(mandatory_remaining, balance.available_days)


def validate_transfer(
    balance: HolidayBalanceSnapshot, request: TransferRequest
) -> TransferValidationResult:
    """Check a transfer request against a balance.

    Rule violations are returned as errors; a missing mandatory vacation
    and a feriefridage amount only produce warnings.

    Args:
        balance: Balance of the holiday year the days come from.
        request: Transfer request. Its agreement date is checked against
            the transfer deadline.

    Returns:
        Validation result in state VALIDATED or REJECTED.
    """
    errors: list[str] = []
    warnings: list[str] = []

    deadline = hy.transfer_deadline(balance.holiday_year)
    is_deadline_passed = not hy.is_within_transfer_deadline(
        balance.holiday_year, request.agreement_date
    )
    max_transferable = max_transferable_days(balance)
    days_at_risk = days_at_risk_of_forfeiture(balance)
    requested = request.feriedage_to_transfer

    if is_deadline_passed:
        errors.append(
            "Transfer deadline has passed. Agreement must be made by "
            f"December 31, {deadline.year}."
        )

    feriefridage = request.feriefridage_to_transfer
    if not math.isfinite(requested) or (
        feriefridage is not None and not math.isfinite(feriefridage)
    ):
        errors.append("Transfer amount must be a finite number.")

    if requested > MAX_TRANSFER_DAYS_PER_YEAR:
        errors.append(
            f"Cannot transfer more than {MAX_TRANSFER_DAYS_PER_YEAR} feriedage per year "
            f"(requested: {_days(requested)})."
        )

    if requested > max_transferable:
        errors.append(
            f"Only {_days(max_transferable)} days are available for transfer. "
            f"First {MANDATORY_VACATION_DAYS} days must be taken."
        )

    if requested < 0:
        errors.append("Transfer amount cannot be negative.")

    if not has_mandatory_vacation_been_taken(balance):
        warnings.append(
            f"Employee has not taken mandatory {MANDATORY_VACATION_DAYS} vacation days yet. "
            f"{_days(days_at_risk)} days may be forfeited if not taken by deadline."
        )

    if feriefridage and feriefridage > 0:
        warnings.append(
            "Feriefridage transfer is not covered by Ferieloven. "
            "Please verify company policy allows this transfer."
        )

    is_valid = not errors
    logger.debug(
        f"Validated transfer of {_days(requested)} days for {balance.employee_email} "
        f"from {balance.holiday_year}: {len(errors)} errors, {len(warnings)} warnings"
    )
    return TransferValidationResult(
        state=TransferState.VALIDATED if is_valid else TransferState.REJECTED,
        is_valid=is_valid,
        errors=errors,
        warnings=warnings,
        max_feriedage_transferable=max_transferable,
        deadline_date=deadline,
        is_deadline_passed=is_deadline_passed,
        mandatory_days_taken=balance.used_days,
        days_at_risk=days_at_risk,
    )


def prepare_year_end_transfer(
    balance: HolidayBalanceSnapshot,
    days_to_transfer: float,
    agreement_date: date,
    feriefridage_to_transfer: float = 0.0,
) -> YearEndTransfer:
    """Build the current-year update and next-year seed of a transfer.

    No validation is done here.
    """
    next_year = hy.next_holiday_year(balance.holiday_year)
    return YearEndTransfer(
        current_year=CurrentYearTransferUpdate(
            employee_email=balance.employee_email,
            employee_name=balance.employee_name,
            holiday_year=balance.holiday_year,
            transferred_out_days=days_to_transfer,
            has_transfer_agreement=True,
            transfer_agreement_date=agreement_date,
            feriefridage_transferred_out=feriefridage_to_transfer,
        ),
        next_year=NextYearTransferSeed(
            employee_email=balance.employee_email,
            employee_name=balance.employee_name,
            holiday_year=next_year,
            transferred_in_days=days_to_transfer,
            feriefridage_transferred_in=feriefridage_to_transfer,
            transfer_source=balance.holiday_year,
        ),
    )


def process_transfer(
    balance: HolidayBalanceSnapshot, request: TransferRequest
) -> TransferResult:
    """Validate a transfer request and compute its effects.

    Nothing is persisted. A rejected result carries the validation errors
    joined into ``error`` and no updates.

    Args:
        balance: Balance of the holiday year the days come from.
        request: Transfer request.

    Returns:
        Transfer result in state APPLIED or REJECTED.
    """
    validation = validate_transfer(balance, request)
    if not validation.is_valid:
        return TransferResult(
            state=TransferState.REJECTED,
            success=False,
            error=" ".join(validation.errors),
            validation=validation,
        )

    feriefridage = request.feriefridage_to_transfer or 0.0
    transfer = prepare_year_end_transfer(
        balance, request.feriedage_to_transfer, request.agreement_date, feriefridage
    )

    note = f"Transferred from {balance.holiday_year}"
    if request.notes:
        note = f"{note}: {request.notes}"

    accrual = AccrualCreate(
        employee_email=balance.employee_email,
        employee_name=balance.employee_name,
        holiday_year=transfer.next_year.holiday_year,
        accrual_date=request.agreement_date,
        days_accrued=request.feriedage_to_transfer,
        feriefridage_accrued=feriefridage,
        accrual_type=AccrualType.YEAR_START_TRANSFER,
        notes=note,
    )

    return TransferResult(
        state=TransferState.APPLIED,
        success=True,
        validation=validation,
        current_year_update=transfer.current_year,
        next_year_seed=transfer.next_year,
        transfer_accrual_record=accrual,
    )


def calculate_year_end_summary(balance: HolidayBalanceSnapshot) -> YearEndSummary:
    """Summarize what happens to a balance when the taking period ends.

    Mandatory days not taken are forfeited, up to 5 days above the
    mandatory 20 can be transferred with an agreement, and days above the
    mandatory 20 that are not transferred are paid out.
    """
    total_available = balance.available_days
    mandatory_remaining = max(0.0, MANDATORY_VACATION_DAYS - balance.used_days)
    above_mandatory = max(0.0, total_available - MANDATORY_VACATION_DAYS)

    days_to_be_forfeited = min(mandatory_remaining, total_available)
    days_transferable = min(above_mandatory, MAX_TRANSFER_DAYS_PER_YEAR)
    if balance.has_transfer_agreement:
        days_to_be_paid_out = max(0.0, above_mandatory - balance.transferred_out_days)
    else:
        days_to_be_paid_out = above_mandatory

    feriefridage_remaining = (
        balance.feriefridage_accrued
        + balance.feriefridage_transferred_in
        - balance.feriefridage_used
        - balance.feriefridage_transferred_out
    )

    recommendations: list[str] = []
    if mandatory_remaining > 0:
        recommendations.append(
            f"You need to take {_days(mandatory_remaining)} more mandatory vacation days "
            "to avoid forfeiture."
        )
    if days_transferable > 0 and not balance.has_transfer_agreement:
        recommendations.append(
            f"You can transfer up to {_days(days_transferable)} days to next year "
            "with a written agreement by December 31."
        )
    if days_to_be_paid_out > 0 and not balance.has_transfer_agreement:
        recommendations.append(
            f"{_days(days_to_be_paid_out)} days (5th week) will be paid out "
            "if no transfer agreement is made."
        )
    if feriefridage_remaining > 0:
        recommendations.append(
            f"{_days(feriefridage_remaining)} feriefridage remaining. "
            "Check company policy for transfer/payout rules."
        )

    return YearEndSummary(
        holiday_year=balance.holiday_year,
        total_available=total_available,
        mandatory_days_remaining=mandatory_remaining,
        days_to_be_forfeited=days_to_be_forfeited,
        days_transferable_with_agreement=days_transferable,
        days_to_be_paid_out=days_to_be_paid_out,
        feriefridage_remaining=feriefridage_remaining,
        recommendations=recommendations,
    )


def is_approaching_deadline(
    holiday_year: str, lookahead_days: int = 30, as_of: date | None = None
) -> bool:
    """True within ``lookahead_days`` before the transfer deadline, deadline included."""
    deadline = hy.transfer_deadline(holiday_year)
    today = as_of or date.today()
    return deadline - timedelta(days=lookahead_days) <= today <= deadline


class TransferService:
    """Year-end transfers against a record store."""

    def __init__(self, store: RecordStore) -> None:
        """Initialize the transfer service.

        Args:
            store: Record store providing balances and persisting transfers.
        """
        self.store = store
        self.balances = BalanceService(store)

    def _snapshot(self, request: TransferRequest) -> HolidayBalanceSnapshot:
        snapshot = self.balances.get_balance_snapshot(
            request.employee_email, request.current_holiday_year
        )
        if snapshot.employee_name == snapshot.employee_email:
            snapshot = snapshot.model_copy(update={"employee_name": request.employee_name})
        return snapshot

    def validate(self, request: TransferRequest) -> TransferValidationResult:
        """Validate a transfer request against the employee's current balance."""
        return validate_transfer(self._snapshot(request), request)

    def process(self, request: TransferRequest) -> TransferResult:
        """Process a transfer request and persist it when applied."""
        result = process_transfer(self._snapshot(request), request)
        if not result.success:
            logger.warning(
                f"Rejected transfer for {request.employee_email} from "
                f"{request.current_holiday_year}: {result.error}"
            )
            return result

        self.store.apply_transfer(result)
        logger.info(
            f"Applied transfer of {_days(request.feriedage_to_transfer)} days for "
            f"{request.employee_email} from {request.current_holiday_year} to "
            f"{result.next_year_seed.holiday_year}"
        )
        return result

    def year_end_summary(
        self,
        employee_email: str,
        holiday_year: str,
        lookahead_days: int = 30,
        as_of: date | None = None,
    ) -> YearEndSummaryResponse:
        """Year-end summary with transfer deadline information."""
        snapshot = self.balances.get_balance_snapshot(employee_email, holiday_year)
        summary = calculate_year_end_summary(snapshot)
        return YearEndSummaryResponse(
            **summary.model_dump(),
            transfer_deadline=hy.transfer_deadline(holiday_year),
            is_approaching_deadline=is_approaching_deadline(
                holiday_year, lookahead_days, as_of
            ),
        )
