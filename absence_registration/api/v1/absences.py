# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Absence registration API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status

from absence_registration.api.deps import get_absence_service
from absence_registration.models.enums import RegistrationStatus
from absence_registration.schemas.absence import (
    AbsenceCreate,
    AbsenceRecord,
    AbsenceUpdate,
    ApprovalDecision,
    RejectionDecision,
)
from absence_registration.schemas.common import CountResponse
from absence_registration.services.absence_service import AbsenceService

router = APIRouter(prefix="/absences", tags=["absences"])


@router.get("", response_model=list[AbsenceRecord])
def list_absences(
    employee_email: str | None = Query(None),
    status_filter: RegistrationStatus | None = Query(None, alias="status"),
    service: AbsenceService = Depends(get_absence_service),
) -> list[AbsenceRecord]:
    """List registrations, all or one employee's."""
    if employee_email:
        return service.list_for_employee(employee_email, status_filter)
    records = service.list_all()
    if status_filter is not None:
        records = [r for r in records if r.status == status_filter]
    return records


@router.get("/pending", response_model=list[AbsenceRecord])
def list_pending_approvals(
    approver_email: str = Query(...),
    service: AbsenceService = Depends(get_absence_service),
) -> list[AbsenceRecord]:
    """Registrations waiting for an approver."""
    return service.pending_approvals(approver_email)


@router.post("", response_model=AbsenceRecord, status_code=status.HTTP_201_CREATED)
def create_absence(
    data: AbsenceCreate,
    service: AbsenceService = Depends(get_absence_service),
) -> AbsenceRecord:
    """Register an absence."""
    return service.create(data)


@router.delete("", response_model=CountResponse)
def purge_absences(
    service: AbsenceService = Depends(get_absence_service),
) -> CountResponse:
    """Delete all registrations."""
    return CountResponse(count=service.purge())


@router.get("/{absence_id}", response_model=AbsenceRecord)
def get_absence(
    absence_id: uuid.UUID,
    service: AbsenceService = Depends(get_absence_service),
) -> AbsenceRecord:
    """Get a registration."""
    return service.get(absence_id)


@router.put("/{absence_id}", response_model=AbsenceRecord)
def update_absence(
    absence_id: uuid.UUID,
    data: AbsenceUpdate,
    service: AbsenceService = Depends(get_absence_service),
) -> AbsenceRecord:
    """Update a registration."""
    try:
        return service.update(absence_id, data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e


@router.delete("/{absence_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_absence(
    absence_id: uuid.UUID,
    service: AbsenceService = Depends(get_absence_service),
) -> None:
    """Delete a registration."""
    service.delete(absence_id)


@router.post("/{absence_id}/submit", response_model=AbsenceRecord)
def submit_absence(
    absence_id: uuid.UUID,
    service: AbsenceService = Depends(get_absence_service),
) -> AbsenceRecord:
    """Submit a draft for approval."""
    return service.submit(absence_id)


@router.post("/{absence_id}/approve", response_model=AbsenceRecord)
def approve_absence(
    absence_id: uuid.UUID,
    data: ApprovalDecision | None = None,
    service: AbsenceService = Depends(get_absence_service),
) -> AbsenceRecord:
    """Approve a pending registration."""
    return service.approve(absence_id, data.comments if data else None)


@router.post("/{absence_id}/reject", response_model=AbsenceRecord)
def reject_absence(
    absence_id: uuid.UUID,
    data: RejectionDecision,
    service: AbsenceService = Depends(get_absence_service),
) -> AbsenceRecord:
    """Reject a pending registration."""
    return service.reject(absence_id, data.comments)
