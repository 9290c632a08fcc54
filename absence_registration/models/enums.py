# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types shared by models, schemas and services."""

from enum import Enum


class AbsenceCategory(str, Enum):
    """Absence category enumeration.

    Only FERIE (statutory vacation) and FERIEFRIDAGE (contract extra days)
    take part in holiday balance calculations.
    """

    FERIE = "ferie"
    SYGDOM = "sygdom"
    BARSELSORLOV = "barselsorlov"
    FERIEFRIDAGE = "feriefridage"
    FLEX = "flex"
    ANDET = "andet"

    @property
    def label(self) -> str:
        """Danish display label."""
        return _ABSENCE_LABELS[self]


_ABSENCE_LABELS = {
    AbsenceCategory.FERIE: "Ferie",
    AbsenceCategory.SYGDOM: "Sygdom",
    AbsenceCategory.BARSELSORLOV: "Barselsorlov",
    AbsenceCategory.FERIEFRIDAGE: "Feriefridage",
    AbsenceCategory.FLEX: "Flex/afspadsering",
    AbsenceCategory.ANDET: "Andet fravær",
}

BALANCE_CATEGORIES = frozenset({AbsenceCategory.FERIE, AbsenceCategory.FERIEFRIDAGE})


class RegistrationStatus(str, Enum):
    """Absence registration status enumeration.

    Status flow:
        DRAFT → PENDING_APPROVAL → APPROVED
                        ↓
                    REJECTED
    """

    DRAFT = "draft"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def label(self) -> str:
        """Danish display label."""
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    RegistrationStatus.DRAFT: "Kladde",
    RegistrationStatus.PENDING_APPROVAL: "Afventer godkendelse",
    RegistrationStatus.APPROVED: "Godkendt",
    RegistrationStatus.REJECTED: "Afvist",
}


class AccrualType(str, Enum):
    """Kind of accrual ledger entry."""

    MONTHLY_ACCRUAL = "monthly_accrual"
    YEAR_START_TRANSFER = "year_start_transfer"
    MANUAL_ADJUSTMENT = "manual_adjustment"
    INITIAL_BALANCE = "initial_balance"

    @property
    def label(self) -> str:
        """Danish display label."""
        return _ACCRUAL_LABELS[self]


_ACCRUAL_LABELS = {
    AccrualType.MONTHLY_ACCRUAL: "Månedlig optjening",
    AccrualType.YEAR_START_TRANSFER: "Årsstart overførsel",
    AccrualType.MANUAL_ADJUSTMENT: "Manuel justering",
    AccrualType.INITIAL_BALANCE: "Startsaldo",
}


class TransferState(str, Enum):
    """States of a year-end transfer.

    ELIGIBLE → VALIDATED → APPLIED
                   ↓
               REJECTED
    """

    ELIGIBLE = "eligible"
    VALIDATED = "validated"
    APPLIED = "applied"
    REJECTED = "rejected"
