# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Holiday data export API endpoints."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from absence_registration.api.deps import get_exporter
from absence_registration.schemas.common import HOLIDAY_YEAR_PATTERN
from absence_registration.services import holiday_year as hy
from absence_registration.services.export_service import HolidayDataExporter

router = APIRouter(prefix="/exports", tags=["exports"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("/{employee_email}")
def export_holiday_data(
    employee_email: str,
    holiday_year: str | None = Query(None, pattern=HOLIDAY_YEAR_PATTERN),
    exporter: HolidayDataExporter = Depends(get_exporter),
) -> Response:
    """Download an employee's balance, absences and accruals as Excel."""
    holiday_year = holiday_year or hy.current_holiday_year()
    content, balance = exporter.generate(employee_email, holiday_year)
    filename = exporter.get_filename(balance.employee_name, holiday_year)
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
