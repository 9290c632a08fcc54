# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""
from absence_registration.services import (
    danish_holiday_service,
    holiday_year,
)

__all__ = [
    "danish_holiday_service",
    "holiday_year",
]
