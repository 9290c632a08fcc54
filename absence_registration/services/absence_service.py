# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Absence registration lifecycle."""

import logging
import uuid
from datetime import datetime

from absence_registration.exceptions import InvalidStatusTransitionError
from absence_registration.models.enums import RegistrationStatus
from absence_registration.schemas.absence import (
    AbsenceCreate,
    AbsenceRecord,
    AbsenceUpdate,
)
from absence_registration.services.danish_holiday_service import count_working_days
from absence_registration.services.record_store import RecordStore

logger = logging.getLogger(__name__)

# Columns that cannot be cleared; an explicit null leaves them unchanged
REQUIRED_FIELDS = frozenset({"start_date", "end_date", "number_of_days", "absence_type"})

# Allowed status changes: current status -> possible next statuses
STATUS_TRANSITIONS: dict[RegistrationStatus, frozenset[RegistrationStatus]] = {
    RegistrationStatus.DRAFT: frozenset({RegistrationStatus.PENDING_APPROVAL}),
    RegistrationStatus.PENDING_APPROVAL: frozenset(
        {RegistrationStatus.APPROVED, RegistrationStatus.REJECTED}
    ),
    RegistrationStatus.APPROVED: frozenset(),
    RegistrationStatus.REJECTED: frozenset(),
}


def _check_transition(current: RegistrationStatus, target: RegistrationStatus) -> None:
    if target not in STATUS_TRANSITIONS[current]:
        raise InvalidStatusTransitionError(current.value, target.value)


class AbsenceService:
    """Create, update and move absence registrations through approval."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def list_for_employee(
        self, employee_email: str, status: RegistrationStatus | None = None
    ) -> list[AbsenceRecord]:
        """An employee's registrations, optionally filtered by status."""
        if status is None:
            return self.store.fetch_absence_records(employee_email)
        return self.store.fetch_absence_records_by_status(employee_email, status)

    def list_all(self) -> list[AbsenceRecord]:
        """All registrations."""
        return self.store.fetch_all_absence_records()

    def pending_approvals(self, approver_email: str) -> list[AbsenceRecord]:
        """Registrations waiting for an approver's decision."""
        return self.store.fetch_pending_approvals(approver_email)

    def get(self, record_id: uuid.UUID) -> AbsenceRecord:
        """Get a registration by id."""
        return self.store.get_absence_record(record_id)

    def create(self, data: AbsenceCreate) -> AbsenceRecord:
        """Register an absence.

        The number of days defaults to the working days between start and
        end date.

        Args:
            data: Registration data.

        Returns:
            Created registration.
        """
        number_of_days = data.number_of_days
        if number_of_days is None:
            number_of_days = float(count_working_days(data.start_date, data.end_date))

        record = AbsenceRecord(
            employee_email=data.employee_email,
            employee_name=data.employee_name,
            approver_email=data.approver_email,
            approver_name=data.approver_name,
            start_date=data.start_date,
            end_date=data.end_date,
            number_of_days=number_of_days,
            absence_type=data.absence_type,
            status=data.status,
            notes=data.notes,
        )
        created = self.store.create_absence_record(record)
        logger.info(
            f"Registered {created.absence_type.value} for {created.employee_email}: "
            f"{created.start_date} - {created.end_date} ({created.number_of_days} days)"
        )
        return created

    def update(self, record_id: uuid.UUID, data: AbsenceUpdate) -> AbsenceRecord:
        """Update a registration.

        Changing the dates without giving a number of days recalculates the
        working days. Null values for required fields are ignored.

        Raises:
            RecordNotFoundError: If the registration does not exist.
            ValueError: If the resulting end date precedes the start date.
        """
        current = self.store.get_absence_record(record_id)
        changes = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key not in REQUIRED_FIELDS
        }

        start_date = changes.get("start_date", current.start_date)
        end_date = changes.get("end_date", current.end_date)
        if end_date < start_date:
            raise ValueError("end_date must be on or after start_date")

        dates_changed = "start_date" in changes or "end_date" in changes
        if dates_changed and "number_of_days" not in changes:
            changes["number_of_days"] = float(count_working_days(start_date, end_date))

        return self.store.update_absence_record(record_id, changes)

    def delete(self, record_id: uuid.UUID) -> None:
        """Delete a registration."""
        self.store.delete_absence_record(record_id)
        logger.info(f"Deleted absence registration {record_id}")

    def purge(self) -> int:
        """Delete all registrations."""
        deleted = self.store.delete_all_absence_records()
        logger.info(f"Deleted {deleted} absence registrations")
        return deleted

    def _transition(
        self,
        record_id: uuid.UUID,
        target: RegistrationStatus,
        comments: str | None = None,
    ) -> AbsenceRecord:
        current = self.store.get_absence_record(record_id)
        _check_transition(current.status, target)

        changes: dict = {"status": target}
        if target in (RegistrationStatus.APPROVED, RegistrationStatus.REJECTED):
            changes["approval_date"] = datetime.utcnow()
            changes["approver_comments"] = comments

        updated = self.store.update_absence_record(record_id, changes)
        logger.info(
            f"Absence registration {record_id} changed from "
            f"{current.status.value} to {target.value}"
        )
        return updated

    def submit(self, record_id: uuid.UUID) -> AbsenceRecord:
        """Submit a draft for approval."""
        return self._transition(record_id, RegistrationStatus.PENDING_APPROVAL)

    def approve(self, record_id: uuid.UUID, comments: str | None = None) -> AbsenceRecord:
        """Approve a pending registration."""
        return self._transition(record_id, RegistrationStatus.APPROVED, comments)

    def reject(self, record_id: uuid.UUID, comments: str) -> AbsenceRecord:
        """Reject a pending registration with a reason."""
        return self._transition(record_id, RegistrationStatus.REJECTED, comments)
