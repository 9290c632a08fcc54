# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Persisted transfer state per employee and holiday year."""

import uuid as uuid_lib
from datetime import date

from sqlalchemy import Boolean, Date, Float, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from absence_registration.models.base import Base, TimestampMixin


class HolidayBalance(Base, TimestampMixin):
    """Transfer bookkeeping for one employee in one holiday year.

    Accrued, used and pending days are never stored; they are recalculated
    from the accrual history and absence registrations on every request.
    """

    __tablename__ = "holiday_balances"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    employee_email: Mapped[str] = mapped_column(String(255), nullable=False)
    employee_name: Mapped[str] = mapped_column(String(200), nullable=False)
    holiday_year: Mapped[str] = mapped_column(String(9), nullable=False)

    # Legacy carry-over from before transfer agreements were tracked
    carried_over_days: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)

    # Ferieloven §19 transfer tracking
    transferred_in_days: Mapped[float] = mapped_column(
        Float, default=0.0, nullable=False
    )
    transferred_out_days: Mapped[float] = mapped_column(
        Float, default=0.0, nullable=False
    )
    has_transfer_agreement: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False
    )
    transfer_agreement_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # Feriefridage transfers follow company policy
    feriefridage_transferred_in: Mapped[float] = mapped_column(
        Float, default=0.0, nullable=False
    )
    feriefridage_transferred_out: Mapped[float] = mapped_column(
        Float, default=0.0, nullable=False
    )

    __table_args__ = (
        UniqueConstraint(
            "employee_email", "holiday_year", name="uq_holiday_balance_employee_year"
        ),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<HolidayBalance(employee={self.employee_email!r}, "
            f"year={self.holiday_year})>"
        )
