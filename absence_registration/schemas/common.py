# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""
from pydantic import BaseModel

# Holiday year keys, e.g. "2024-2025"
HOLIDAY_YEAR_PATTERN = r"^\d{4}-\d{4}$"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class CountResponse(BaseModel):
    """Number of records affected or found."""

    count: int
