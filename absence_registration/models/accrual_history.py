# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Accrual history ledger model."""

import uuid as uuid_lib
from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from absence_registration.models.base import Base


class AccrualHistory(Base):
    """One grant of holiday days to an employee in a holiday year.

    Rows are immutable once written; they are only removed by the
    administrative purge.
    """

    __tablename__ = "accrual_history"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(300), nullable=False, default="")
    employee_email: Mapped[str] = mapped_column(String(255), nullable=False)
    employee_name: Mapped[str] = mapped_column(String(200), nullable=False)
    holiday_year: Mapped[str] = mapped_column(String(9), nullable=False)
    accrual_date: Mapped[date] = mapped_column(Date, nullable=False)
    accrual_month: Mapped[int] = mapped_column(Integer, nullable=False)
    accrual_year: Mapped[int] = mapped_column(Integer, nullable=False)
    days_accrued: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    feriefridage_accrued: Mapped[float | None] = mapped_column(Float, nullable=True)
    balance_after_accrual: Mapped[float | None] = mapped_column(Float, nullable=True)
    accrual_type: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, nullable=False
    )

    __table_args__ = (
        Index("idx_accrual_employee_year", "employee_email", "holiday_year"),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<AccrualHistory(id={self.id}, employee={self.employee_email!r}, "
            f"year={self.holiday_year}, days={self.days_accrued})>"
        )
