# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from absence_registration.database import SessionLocal
from absence_registration.services.absence_service import AbsenceService
from absence_registration.services.accrual_service import AccrualService
from absence_registration.services.balance_service import BalanceService
from absence_registration.services.export_service import HolidayDataExporter
from absence_registration.services.record_store import RecordStore
from absence_registration.services.sqlalchemy_store import SqlAlchemyRecordStore
from absence_registration.services.transfer_service import TransferService


def get_db() -> Generator[Session]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_record_store(db: Session = Depends(get_db)) -> RecordStore:
    """Record store bound to the request's database session."""
    return SqlAlchemyRecordStore(db)


def get_balance_service(store: RecordStore = Depends(get_record_store)) -> BalanceService:
    return BalanceService(store)


def get_transfer_service(
    store: RecordStore = Depends(get_record_store),
) -> TransferService:
    return TransferService(store)


def get_absence_service(store: RecordStore = Depends(get_record_store)) -> AbsenceService:
    return AbsenceService(store)


def get_accrual_service(store: RecordStore = Depends(get_record_store)) -> AccrualService:
    return AccrualService(store)


def get_exporter(store: RecordStore = Depends(get_record_store)) -> HolidayDataExporter:
    return HolidayDataExporter(store)
