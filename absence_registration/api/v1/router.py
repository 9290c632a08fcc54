# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from absence_registration.api.v1 import (
    absences,
    accruals,
    balances,
    exports,
    holiday_years,
    holidays,
    transfers,
)

api_router = APIRouter()

# Calendar routes
api_router.include_router(holidays.router)
api_router.include_router(holiday_years.router)

# Balance and transfer routes
api_router.include_router(balances.router)
api_router.include_router(transfers.router)

# Record routes
api_router.include_router(absences.router)
api_router.include_router(accruals.router)

# Export routes
api_router.include_router(exports.router)
