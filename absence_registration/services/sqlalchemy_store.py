# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Record store backed by SQLAlchemy.

The services only see named categories, statuses and accrual kinds. The
numeric option-set codes stored in the tables are translated here and
nowhere else.
"""

import logging
import uuid
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from absence_registration.exceptions import RecordNotFoundError
from absence_registration.models import (
    AbsenceCategory,
    AbsenceRegistration,
    AccrualHistory,
    AccrualType,
    HolidayBalance,
    RegistrationStatus,
)
from absence_registration.schemas.absence import AbsenceRecord
from absence_registration.schemas.accrual import AccrualRecord
from absence_registration.schemas.balance import StoredTransferState
from absence_registration.schemas.transfer import TransferResult
from absence_registration.services.accrual_service import build_accrual_record
from absence_registration.services.record_store import RecordStore

logger = logging.getLogger(__name__)

ABSENCE_TYPE_CODES: dict[AbsenceCategory, int] = {
    AbsenceCategory.FERIE: 100000000,
    AbsenceCategory.SYGDOM: 100000001,
    AbsenceCategory.BARSELSORLOV: 100000002,
    AbsenceCategory.FERIEFRIDAGE: 100000003,
    AbsenceCategory.FLEX: 100000004,
    AbsenceCategory.ANDET: 100000005,
}
STATUS_CODES: dict[RegistrationStatus, int] = {
    RegistrationStatus.DRAFT: 100000000,
    RegistrationStatus.PENDING_APPROVAL: 100000001,
    RegistrationStatus.APPROVED: 100000002,
    RegistrationStatus.REJECTED: 100000003,
}
ACCRUAL_TYPE_CODES: dict[AccrualType, int] = {
    AccrualType.MONTHLY_ACCRUAL: 100000000,
    AccrualType.YEAR_START_TRANSFER: 100000001,
    AccrualType.MANUAL_ADJUSTMENT: 100000002,
    AccrualType.INITIAL_BALANCE: 100000003,
}

_ABSENCE_TYPE_FROM_CODE = {code: name for name, code in ABSENCE_TYPE_CODES.items()}
_STATUS_FROM_CODE = {code: name for name, code in STATUS_CODES.items()}
_ACCRUAL_TYPE_FROM_CODE = {code: name for name, code in ACCRUAL_TYPE_CODES.items()}


def absence_type_from_code(code: int) -> AbsenceCategory:
    """Unknown codes map to ANDET so they never count towards a balance."""
    return _ABSENCE_TYPE_FROM_CODE.get(code, AbsenceCategory.ANDET)


def status_from_code(code: int) -> RegistrationStatus:
    """Unknown codes map to DRAFT."""
    return _STATUS_FROM_CODE.get(code, RegistrationStatus.DRAFT)


def accrual_type_from_code(code: int) -> AccrualType:
    """Unknown codes map to MANUAL_ADJUSTMENT."""
    return _ACCRUAL_TYPE_FROM_CODE.get(code, AccrualType.MANUAL_ADJUSTMENT)



class SqlAlchemyRecordStore(RecordStore):
    """Record store backed by a SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        """Initialize the store.

        Args:
            db: Database session.
        """
        self.db = db

    def _commit(self) -> None:
        """Commit, rolling the session back if the commit fails."""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Commit failed, session rolled back: {e}")
            raise

    # --- Mapping ---

    @staticmethod
    def _to_accrual_record(row: AccrualHistory) -> AccrualRecord:
        return AccrualRecord(
            id=row.id,
            name=row.name,
            employee_email=row.employee_email,
            employee_name=row.employee_name,
            holiday_year=row.holiday_year,
            accrual_date=row.accrual_date,
            accrual_month=row.accrual_month,
            accrual_year=row.accrual_year,
            days_accrued=row.days_accrued or 0.0,
            feriefridage_accrued=row.feriefridage_accrued,
            balance_after_accrual=row.balance_after_accrual,
            accrual_type=accrual_type_from_code(row.accrual_type),
            notes=row.notes,
            created_at=row.created_at,
        )

    @staticmethod
    def _to_absence_record(row: AbsenceRegistration) -> AbsenceRecord:
        return AbsenceRecord(
            id=row.id,
            employee_email=row.employee_email,
            employee_name=row.employee_name,
            approver_email=row.approver_email,
            approver_name=row.approver_name,
            start_date=row.start_date,
            end_date=row.end_date,
            number_of_days=row.number_of_days,
            absence_type=absence_type_from_code(row.absence_type),
            status=status_from_code(row.status),
            notes=row.notes,
            approval_date=row.approval_date,
            approver_comments=row.approver_comments,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    # --- Accrual history ---

    def fetch_accrual_records(
        self, employee_email: str, holiday_year: str
    ) -> list[AccrualRecord]:
        rows = (
            self.db.query(AccrualHistory)
            .filter(
                func.lower(AccrualHistory.employee_email) == employee_email.lower(),
                AccrualHistory.holiday_year == holiday_year,
            )
            .order_by(AccrualHistory.accrual_date.asc(), AccrualHistory.created_at.asc())
            .all()
        )
        return [self._to_accrual_record(row) for row in rows]

    def fetch_all_accrual_records(self, holiday_year: str) -> list[AccrualRecord]:
        rows = (
            self.db.query(AccrualHistory)
            .filter(AccrualHistory.holiday_year == holiday_year)
            .order_by(AccrualHistory.accrual_date.asc(), AccrualHistory.created_at.asc())
            .all()
        )
        return [self._to_accrual_record(row) for row in rows]

    def create_accrual_record(self, record: AccrualRecord) -> AccrualRecord:
        row = self._add_accrual(record)
        self._commit()
        self.db.refresh(row)
        return self._to_accrual_record(row)

    def _add_accrual(self, record: AccrualRecord) -> AccrualHistory:
        row = AccrualHistory(
            name=record.name or "",
            employee_email=record.employee_email,
            employee_name=record.employee_name,
            holiday_year=record.holiday_year,
            accrual_date=record.accrual_date,
            accrual_month=record.accrual_month,
            accrual_year=record.accrual_year,
            days_accrued=record.days_accrued,
            feriefridage_accrued=record.feriefridage_accrued,
            balance_after_accrual=record.balance_after_accrual,
            accrual_type=ACCRUAL_TYPE_CODES[record.accrual_type],
            notes=record.notes,
        )
        self.db.add(row)
        return row

    def count_accrual_records(self) -> int:
        return self.db.query(func.count(AccrualHistory.id)).scalar() or 0

    def delete_all_accrual_records(self) -> int:
        deleted = self.db.query(AccrualHistory).delete(synchronize_session=False)
        self._commit()
        return deleted

    # --- Absence registrations ---

    def fetch_absence_records(self, employee_email: str) -> list[AbsenceRecord]:
        rows = (
            self.db.query(AbsenceRegistration)
            .filter(
                func.lower(AbsenceRegistration.employee_email) == employee_email.lower()
            )
            .order_by(AbsenceRegistration.start_date.desc())
            .all()
        )
        return [self._to_absence_record(row) for row in rows]

    def fetch_absence_records_by_status(
        self, employee_email: str, status: RegistrationStatus
    ) -> list[AbsenceRecord]:
        rows = (
            self.db.query(AbsenceRegistration)
            .filter(
                func.lower(AbsenceRegistration.employee_email) == employee_email.lower(),
                AbsenceRegistration.status == STATUS_CODES[status],
            )
            .order_by(AbsenceRegistration.start_date.desc())
            .all()
        )
        return [self._to_absence_record(row) for row in rows]

    def fetch_pending_approvals(self, approver_email: str) -> list[AbsenceRecord]:
        rows = (
            self.db.query(AbsenceRegistration)
            .filter(
                func.lower(AbsenceRegistration.approver_email) == approver_email.lower(),
                AbsenceRegistration.status
                == STATUS_CODES[RegistrationStatus.PENDING_APPROVAL],
            )
            .order_by(AbsenceRegistration.start_date.asc())
            .all()
        )
        return [self._to_absence_record(row) for row in rows]

    def fetch_all_absence_records(self) -> list[AbsenceRecord]:
        rows = (
            self.db.query(AbsenceRegistration)
            .order_by(AbsenceRegistration.created_at.desc())
            .all()
        )
        return [self._to_absence_record(row) for row in rows]

    def _get_absence_row(self, record_id: uuid.UUID) -> AbsenceRegistration:
        row = (
            self.db.query(AbsenceRegistration)
            .filter(AbsenceRegistration.id == record_id)
            .first()
        )
        if not row:
            raise RecordNotFoundError("Absence registration", record_id)
        return row

    def get_absence_record(self, record_id: uuid.UUID) -> AbsenceRecord:
        return self._to_absence_record(self._get_absence_row(record_id))

    def create_absence_record(self, record: AbsenceRecord) -> AbsenceRecord:
        row = AbsenceRegistration(
            name=f"{record.employee_name} - {record.absence_type.label}",
            employee_email=record.employee_email,
            employee_name=record.employee_name,
            approver_email=record.approver_email,
            approver_name=record.approver_name,
            start_date=record.start_date,
            end_date=record.end_date,
            number_of_days=record.number_of_days,
            absence_type=ABSENCE_TYPE_CODES[record.absence_type],
            status=STATUS_CODES[record.status],
            notes=record.notes or "",
        )
        self.db.add(row)
        self._commit()
        self.db.refresh(row)
        return self._to_absence_record(row)

    def update_absence_record(
        self, record_id: uuid.UUID, changes: dict[str, Any]
    ) -> AbsenceRecord:
        row = self._get_absence_row(record_id)
        for key, value in changes.items():
            if key == "absence_type":
                value = ABSENCE_TYPE_CODES[AbsenceCategory(value)]
            elif key == "status":
                value = STATUS_CODES[RegistrationStatus(value)]
            elif not hasattr(row, key):
                continue
            setattr(row, key, value)
        self._commit()
        self.db.refresh(row)
        return self._to_absence_record(row)

    def delete_absence_record(self, record_id: uuid.UUID) -> None:
        row = self._get_absence_row(record_id)
        self.db.delete(row)
        self._commit()

    def delete_all_absence_records(self) -> int:
        deleted = self.db.query(AbsenceRegistration).delete(synchronize_session=False)
        self._commit()
        return deleted

    # --- Transfer bookkeeping ---

    def _get_balance_row(
        self, employee_email: str, holiday_year: str
    ) -> HolidayBalance | None:
        return (
            self.db.query(HolidayBalance)
            .filter(
                func.lower(HolidayBalance.employee_email) == employee_email.lower(),
                HolidayBalance.holiday_year == holiday_year,
            )
            .first()
        )

    def _get_or_add_balance_row(
        self, employee_email: str, employee_name: str, holiday_year: str
    ) -> HolidayBalance:
        row = self._get_balance_row(employee_email, holiday_year)
        if not row:
            row = HolidayBalance(
                employee_email=employee_email,
                employee_name=employee_name,
                holiday_year=holiday_year,
                carried_over_days=0.0,
                transferred_in_days=0.0,
                transferred_out_days=0.0,
                has_transfer_agreement=False,
                feriefridage_transferred_in=0.0,
                feriefridage_transferred_out=0.0,
            )
            self.db.add(row)
        return row

    def get_holiday_balance(
        self, employee_email: str, holiday_year: str
    ) -> StoredTransferState | None:
        row = self._get_balance_row(employee_email, holiday_year)
        if not row:
            return None
        return StoredTransferState.model_validate(row)

    def _set_transfer_accrual(self, accrual: AccrualRecord, source_year: str) -> None:
        """Add or replace the transfer-in ledger entry from one source year."""
        row = (
            self.db.query(AccrualHistory)
            .filter(
                func.lower(AccrualHistory.employee_email) == accrual.employee_email.lower(),
                AccrualHistory.holiday_year == accrual.holiday_year,
                AccrualHistory.accrual_type
                == ACCRUAL_TYPE_CODES[AccrualType.YEAR_START_TRANSFER],
                AccrualHistory.notes.startswith(f"Transferred from {source_year}"),
            )
            .first()
        )
        if not row:
            self._add_accrual(accrual)
            return

        if (
            row.accrual_date != accrual.accrual_date
            or row.days_accrued != accrual.days_accrued
            or row.feriefridage_accrued != accrual.feriefridage_accrued
        ):
            logger.info(
                f"Replacing transfer-in of {row.days_accrued} days for "
                f"{accrual.employee_email} in {accrual.holiday_year} with "
                f"{accrual.days_accrued} days"
            )
        row.name = accrual.name or ""
        row.accrual_date = accrual.accrual_date
        row.accrual_month = accrual.accrual_month
        row.accrual_year = accrual.accrual_year
        row.days_accrued = accrual.days_accrued
        row.feriefridage_accrued = accrual.feriefridage_accrued
        row.notes = accrual.notes

    def apply_transfer(self, result: TransferResult) -> None:
        if (
            not result.success
            or result.current_year_update is None
            or result.next_year_seed is None
        ):
            raise ValueError("Only applied transfer results can be persisted")

        current = result.current_year_update
        seed = result.next_year_seed

        current_row = self._get_or_add_balance_row(
            current.employee_email, current.employee_name, current.holiday_year
        )
        current_row.transferred_out_days = current.transferred_out_days
        current_row.has_transfer_agreement = current.has_transfer_agreement
        current_row.transfer_agreement_date = current.transfer_agreement_date
        current_row.feriefridage_transferred_out = current.feriefridage_transferred_out

        next_row = self._get_or_add_balance_row(
            seed.employee_email, seed.employee_name, seed.holiday_year
        )
        next_row.transferred_in_days = seed.transferred_in_days
        next_row.feriefridage_transferred_in = seed.feriefridage_transferred_in

        if result.transfer_accrual_record is not None:
            self._set_transfer_accrual(
                build_accrual_record(result.transfer_accrual_record), seed.transfer_source
            )

        self._commit()
