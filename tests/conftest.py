# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from absence_registration.api.deps import get_db
from absence_registration.main import app
from absence_registration.models import AbsenceCategory, AccrualType, RegistrationStatus
from absence_registration.models.base import Base
from absence_registration.schemas.absence import AbsenceRecord
from absence_registration.schemas.accrual import AccrualRecord
from absence_registration.services.sqlalchemy_store import SqlAlchemyRecordStore

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

EMPLOYEE_EMAIL = "jens@example.dk"
EMPLOYEE_NAME = "Jens Hansen"
APPROVER_EMAIL = "mette@example.dk"


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def store(db_session) -> SqlAlchemyRecordStore:
    """Record store on the test database."""
    return SqlAlchemyRecordStore(db_session)


def _make_accrual(
    days: float = 25.0,
    holiday_year: str = "2024-2025",
    accrual_date: date = date(2024, 9, 1),
    accrual_type: AccrualType = AccrualType.INITIAL_BALANCE,
    feriefridage: float | None = None,
    email: str = EMPLOYEE_EMAIL,
    name: str = EMPLOYEE_NAME,
) -> AccrualRecord:
    """Build an unsaved accrual record."""
    return AccrualRecord(
        employee_email=email,
        employee_name=name,
        holiday_year=holiday_year,
        accrual_date=accrual_date,
        accrual_month=accrual_date.month,
        accrual_year=accrual_date.year,
        days_accrued=days,
        feriefridage_accrued=feriefridage,
        accrual_type=accrual_type,
    )


def _make_absence(
    days: float = 10.0,
    start_date: date = date(2024, 12, 2),
    end_date: date | None = None,
    absence_type: AbsenceCategory = AbsenceCategory.FERIE,
    status: RegistrationStatus = RegistrationStatus.APPROVED,
    email: str = EMPLOYEE_EMAIL,
    name: str = EMPLOYEE_NAME,
    approver_email: str | None = APPROVER_EMAIL,
) -> AbsenceRecord:
    """Build an unsaved absence record."""
    return AbsenceRecord(
        employee_email=email,
        employee_name=name,
        approver_email=approver_email,
        approver_name="Mette Jensen" if approver_email else None,
        start_date=start_date,
        end_date=end_date or start_date,
        number_of_days=days,
        absence_type=absence_type,
        status=status,
    )


@pytest.fixture
def make_accrual():
    """Factory for unsaved accrual records."""
    return _make_accrual


@pytest.fixture
def make_absence():
    """Factory for unsaved absence records."""
    return _make_absence
