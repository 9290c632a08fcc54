# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from absence_registration.models.absence_registration import AbsenceRegistration
from absence_registration.models.accrual_history import AccrualHistory
from absence_registration.models.base import Base, TimestampMixin
from absence_registration.models.enums import (
    AbsenceCategory,
    AccrualType,
    RegistrationStatus,
    TransferState,
)
from absence_registration.models.holiday_balance import HolidayBalance

__all__ = [
    "AbsenceCategory",
    "AbsenceRegistration",
    "AccrualHistory",
    "AccrualType",
    "Base",
    "HolidayBalance",
    "RegistrationStatus",
    "TimestampMixin",
    "TransferState",
]
