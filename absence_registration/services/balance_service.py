# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday balance calculation.

Balances are derived from accrual history and absence registrations on
every call and are never stored.
"""

import logging
from collections.abc import Iterable
from datetime import date

from absence_registration.models.enums import (
    BALANCE_CATEGORIES,
    AbsenceCategory,
    AccrualType,
    RegistrationStatus,
)
from absence_registration.schemas.absence import AbsenceRecord
from absence_registration.schemas.accrual import AccrualRecord
from absence_registration.schemas.balance import (
    CalculatedBalance,
    HolidayBalanceSnapshot,
    StoredTransferState,
)
from absence_registration.services import holiday_year as hy
from absence_registration.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def calculate_holiday_balance(
    employee_email: str,
    holiday_year: str,
    accrual_records: Iterable[AccrualRecord],
    absence_records: Iterable[AbsenceRecord],
) -> CalculatedBalance:
    """Reduce accrual and absence records to a balance.

    Accrual records count when tagged with ``holiday_year``. Absence
    records count when they are ferie or feriefridage, approved or pending
    approval, and start inside the Sept 1 - Aug 31 window. Available days
    may be negative.

    Args:
        employee_email: Employee the records belong to.
        holiday_year: Holiday year key, e.g. ``"2024-2025"``.
        accrual_records: The employee's accrual records.
        absence_records: The employee's absence records, any year.

    Returns:
        Calculated balance for both pools.

    Raises:
        InvalidHolidayYearError: If the holiday year key is malformed.
    """
    window_start = hy.year_start(holiday_year)
    window_end = hy.year_end(holiday_year)

    accruals = [r for r in accrual_records if r.holiday_year == holiday_year]
    total_accrued = sum(r.days_accrued for r in accruals)
    total_accrued_ff = sum(r.feriefridage_accrued or 0.0 for r in accruals)
    transfers = [r for r in accruals if r.accrual_type == AccrualType.YEAR_START_TRANSFER]
    transferred_in = sum(r.days_accrued for r in transfers)
    transferred_in_ff = sum(r.feriefridage_accrued or 0.0 for r in transfers)

    relevant = [
        r
        for r in absence_records
        if r.absence_type in BALANCE_CATEGORIES
        and window_start <= r.start_date <= window_end
    ]

    used = pending = used_ff = pending_ff = 0.0
    for record in relevant:
        days = record.number_of_days or 0.0
        is_ferie = record.absence_type == AbsenceCategory.FERIE
        if record.status == RegistrationStatus.APPROVED:
            if is_ferie:
                used += days
            else:
                used_ff += days
        elif record.status == RegistrationStatus.PENDING_APPROVAL:
            if is_ferie:
                pending += days
            else:
                pending_ff += days

    if accruals:
        employee_name = accruals[0].employee_name
    elif relevant:
        employee_name = relevant[0].employee_name
    else:
        employee_name = ""

    logger.debug(
        f"Balance for {employee_email} in {holiday_year} from "
        f"{len(accruals)} accruals and {len(relevant)} absences"
    )

    return CalculatedBalance(
        employee_email=employee_email,
        employee_name=employee_name or employee_email,
        holiday_year=holiday_year,
        total_accrued_days=total_accrued,
        transferred_in_days=transferred_in,
        used_days=used,
        pending_days=pending,
        available_days=total_accrued - used - pending,
        total_accrued_feriefridage=total_accrued_ff,
        transferred_in_feriefridage=transferred_in_ff,
        used_feriefridage=used_ff,
        pending_feriefridage=pending_ff,
        available_feriefridage=total_accrued_ff - used_ff - pending_ff,
        accrual_history_count=len(accruals),
        absence_registration_count=len(relevant),
    )


def snapshot_from_calculated(
    calculated: CalculatedBalance,
    stored: StoredTransferState | None = None,
) -> HolidayBalanceSnapshot:
    """Combine a calculated balance with stored transfer bookkeeping.

    Transfer-in accrual records are reported as ``transferred_in_days`` and
    left out of ``accrued_days``, so the snapshot's available days equal the
    calculated balance plus any legacy carried-over days.
    """
    snapshot = HolidayBalanceSnapshot(
        employee_email=calculated.employee_email,
        employee_name=calculated.employee_name,
        holiday_year=calculated.holiday_year,
        accrued_days=calculated.total_accrued_days - calculated.transferred_in_days,
        used_days=calculated.used_days,
        pending_days=calculated.pending_days,
        transferred_in_days=calculated.transferred_in_days,
        feriefridage_accrued=(
            calculated.total_accrued_feriefridage
            - calculated.transferred_in_feriefridage
        ),
        feriefridage_used=calculated.used_feriefridage,
        feriefridage_pending=calculated.pending_feriefridage,
        feriefridage_transferred_in=calculated.transferred_in_feriefridage,
    )
    if stored is None:
        return snapshot
    return snapshot.model_copy(
        update={
            "carried_over_days": stored.carried_over_days,
            "transferred_out_days": stored.transferred_out_days,
            "has_transfer_agreement": stored.has_transfer_agreement,
            "transfer_agreement_date": stored.transfer_agreement_date,
            "feriefridage_transferred_out": stored.feriefridage_transferred_out,
        }
    )


class BalanceService:
    """Balance lookups against a record store."""

    def __init__(self, store: RecordStore) -> None:
        """Initialize the balance service.

        Args:
            store: Source of accrual and absence records.
        """
        self.store = store

    def calculate_for_user(
        self,
        employee_email: str,
        holiday_year: str | None = None,
        as_of: date | None = None,
    ) -> CalculatedBalance:
        """Calculate one employee's balance.

        Args:
            employee_email: Employee email, matched case-insensitively.
            holiday_year: Holiday year key, defaults to the current one.
            as_of: Reference date for the current holiday year.

        Returns:
            Calculated balance.
        """
        holiday_year = holiday_year or hy.current_holiday_year(as_of)
        hy.parse_holiday_year(holiday_year)
        accruals = self.store.fetch_accrual_records(employee_email, holiday_year)
        absences = self.store.fetch_absence_records(employee_email)
        balance = calculate_holiday_balance(employee_email, holiday_year, accruals, absences)
        if balance.is_negative:
            logger.warning(
                f"Negative holiday balance for {employee_email} in {holiday_year}: "
                f"{balance.available_days} feriedage, "
                f"{balance.available_feriefridage} feriefridage"
            )
        return balance

    def get_all_employee_balances(self, holiday_year: str) -> list[CalculatedBalance]:
        """Balances of every employee with accruals in the holiday year.

        Employees are identified by email, case-insensitively, and returned
        sorted by display name.
        """
        hy.parse_holiday_year(holiday_year)
        employees: dict[str, str] = {}
        for record in self.store.fetch_all_accrual_records(holiday_year):
            employees.setdefault(record.employee_email.lower(), record.employee_email)

        balances = [
            self.calculate_for_user(email, holiday_year) for email in employees.values()
        ]
        return sorted(balances, key=lambda b: (b.employee_name.lower(), b.employee_email))

    def get_balance_snapshot(
        self, employee_email: str, holiday_year: str
    ) -> HolidayBalanceSnapshot:
        """Balance in the shape used for year-end transfers."""
        calculated = self.calculate_for_user(employee_email, holiday_year)
        stored = self.store.get_holiday_balance(employee_email, holiday_year)
        return snapshot_from_calculated(calculated, stored)
