# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Record store interface consumed by the services."""

import uuid
from abc import ABC, abstractmethod
from typing import Any

from absence_registration.models.enums import RegistrationStatus
from absence_registration.schemas.absence import AbsenceRecord
from absence_registration.schemas.accrual import AccrualRecord
from absence_registration.schemas.balance import StoredTransferState
from absence_registration.schemas.transfer import TransferResult


class RecordStore(ABC):
    """Source of accrual and absence records.

    Implementations raise on failure rather than returning partial data.
    """

    # --- Accrual history ---

    @abstractmethod
    def fetch_accrual_records(
        self, employee_email: str, holiday_year: str
    ) -> list[AccrualRecord]:
        """Accrual records of one employee in one holiday year."""
        ...

    @abstractmethod
    def fetch_all_accrual_records(self, holiday_year: str) -> list[AccrualRecord]:
        """Accrual records of all employees in one holiday year."""
        ...

    @abstractmethod
    def create_accrual_record(self, record: AccrualRecord) -> AccrualRecord:
        """Persist a new accrual record and return it with its id."""
        ...

    @abstractmethod
    def count_accrual_records(self) -> int:
        """Total number of accrual records."""
        ...

    @abstractmethod
    def delete_all_accrual_records(self) -> int:
        """Delete every accrual record. Returns the number deleted."""
        ...

    # --- Absence registrations ---

    @abstractmethod
    def fetch_absence_records(self, employee_email: str) -> list[AbsenceRecord]:
        """All absence records of one employee, newest start date first."""
        ...

    @abstractmethod
    def fetch_absence_records_by_status(
        self, employee_email: str, status: RegistrationStatus
    ) -> list[AbsenceRecord]:
        """Absence records of one employee in a given status."""
        ...

    @abstractmethod
    def fetch_pending_approvals(self, approver_email: str) -> list[AbsenceRecord]:
        """Pending records assigned to an approver, oldest start date first."""
        ...

    @abstractmethod
    def fetch_all_absence_records(self) -> list[AbsenceRecord]:
        """Every absence record, newest first."""
        ...

    @abstractmethod
    def get_absence_record(self, record_id: uuid.UUID) -> AbsenceRecord:
        """Get one absence record or raise RecordNotFoundError."""
        ...

    @abstractmethod
    def create_absence_record(self, record: AbsenceRecord) -> AbsenceRecord:
        """Persist a new absence record and return it with its id."""
        ...

    @abstractmethod
    def update_absence_record(
        self, record_id: uuid.UUID, changes: dict[str, Any]
    ) -> AbsenceRecord:
        """Apply field changes to an absence record."""
        ...

    @abstractmethod
    def delete_absence_record(self, record_id: uuid.UUID) -> None:
        """Delete one absence record or raise RecordNotFoundError."""
        ...

    @abstractmethod
    def delete_all_absence_records(self) -> int:
        """Delete every absence record. Returns the number deleted."""
        ...

    # --- Transfer bookkeeping ---

    @abstractmethod
    def get_holiday_balance(
        self, employee_email: str, holiday_year: str
    ) -> StoredTransferState | None:
        """Stored transfer fields for an employee and holiday year."""
        ...

    @abstractmethod
    def apply_transfer(self, result: TransferResult) -> None:
        """Persist an applied transfer result.

        Stored transfer fields are set, not added to. The transfer-in ledger
        entry from the source year is replaced when a transfer is processed
        again, so applying the same result twice leaves the store unchanged.
        """
        ...

