# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Absence registration model."""

import uuid as uuid_lib
from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from absence_registration.models.base import Base, TimestampMixin


class AbsenceRegistration(Base, TimestampMixin):
    """A single absence registration for an employee.

    Category and status are stored as the numeric option-set codes used by
    the record store; see services.sqlalchemy_store for the mapping.
    """

    __tablename__ = "absence_registrations"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(300), nullable=False, default="")
    employee_email: Mapped[str] = mapped_column(String(255), nullable=False)
    employee_name: Mapped[str] = mapped_column(String(200), nullable=False)
    approver_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    approver_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    number_of_days: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    absence_type: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    approval_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    approver_comments: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("idx_absence_employee_start", "employee_email", "start_date"),
        Index("idx_absence_approver_status", "approver_email", "status"),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<AbsenceRegistration(id={self.id}, employee={self.employee_email!r}, "
            f"start={self.start_date}, days={self.number_of_days})>"
        )
