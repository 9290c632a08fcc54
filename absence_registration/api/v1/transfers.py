# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Year-end transfer API endpoints."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from absence_registration.api.deps import get_transfer_service
from absence_registration.schemas.transfer import (
    TransferRequest,
    TransferResult,
    TransferValidationResult,
)
from absence_registration.services.transfer_service import TransferService

router = APIRouter(prefix="/transfers", tags=["transfers"])


@router.post("/validate", response_model=TransferValidationResult)
def validate_transfer(
    data: TransferRequest,
    service: TransferService = Depends(get_transfer_service),
) -> TransferValidationResult:
    """Check a transfer request without applying it."""
    return service.validate(data)


@router.post(
    "",
    response_model=TransferResult,
    responses={status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": TransferResult}},
)
def process_transfer(
    data: TransferRequest,
    service: TransferService = Depends(get_transfer_service),
) -> TransferResult | JSONResponse:
    """Apply a transfer to the current and next holiday year.

    A rejected transfer is returned with status 422 and its validation
    errors.
    """
    result = service.process(data)
    if not result.success:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=result.model_dump(mode="json"),
        )
    return result
