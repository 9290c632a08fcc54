# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Absence registration schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field, model_validator

from absence_registration.models.enums import AbsenceCategory, RegistrationStatus


class AbsenceRecord(BaseModel):
    """An absence registration as seen by the services and the API."""

    id: uuid.UUID | None = None
    employee_email: str
    employee_name: str
    approver_email: str | None = None
    approver_name: str | None = None
    start_date: datetime.date
    end_date: datetime.date
    number_of_days: float
    absence_type: AbsenceCategory
    status: RegistrationStatus
    notes: str | None = None
    approval_date: datetime.datetime | None = None
    approver_comments: str | None = None
    created_at: datetime.datetime | None = None
    updated_at: datetime.datetime | None = None


class AbsenceCreate(BaseModel):
    """Schema for registering an absence.

    When ``number_of_days`` is omitted it is set to the number of Danish
    working days between start and end date.
    """

    employee_email: str = Field(..., min_length=3, max_length=255)
    employee_name: str = Field(..., min_length=1, max_length=200)
    approver_email: str | None = Field(None, max_length=255)
    approver_name: str | None = Field(None, max_length=200)
    start_date: datetime.date
    end_date: datetime.date
    number_of_days: float | None = Field(None, ge=0, allow_inf_nan=False)
    absence_type: AbsenceCategory
    notes: str | None = None
    status: RegistrationStatus = RegistrationStatus.DRAFT

    @model_validator(mode="after")
    def validate_dates_and_status(self) -> "AbsenceCreate":
        """End date must not precede start date; only open statuses allowed."""
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        if self.status not in (
            RegistrationStatus.DRAFT,
            RegistrationStatus.PENDING_APPROVAL,
        ):
            raise ValueError("New registrations must be draft or pending approval")
        return self


class AbsenceUpdate(BaseModel):
    """Schema for updating an absence registration."""

    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    number_of_days: float | None = Field(None, ge=0, allow_inf_nan=False)
    absence_type: AbsenceCategory | None = None
    approver_email: str | None = Field(None, max_length=255)
    approver_name: str | None = Field(None, max_length=200)
    notes: str | None = None


class ApprovalDecision(BaseModel):
    """Approver comments attached to an approval."""

    comments: str | None = None


class RejectionDecision(BaseModel):
    """Approver comments are required when rejecting."""

    comments: str = Field(..., min_length=1)
