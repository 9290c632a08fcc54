# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee holiday data export to Excel."""

import io
from datetime import date, datetime

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet
from slugify import slugify

from absence_registration.schemas.absence import AbsenceRecord
from absence_registration.schemas.accrual import AccrualRecord
from absence_registration.schemas.balance import CalculatedBalance
from absence_registration.services import holiday_year as hy
from absence_registration.services.balance_service import calculate_holiday_balance
from absence_registration.services.record_store import RecordStore

HEADER_FONT = Font(bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="4472C4", end_color="4472C4", fill_type="solid")
HEADER_ALIGNMENT = Alignment(horizontal="center", vertical="center")
BORDER = Border(
    left=Side(style="thin"),
    right=Side(style="thin"),
    top=Side(style="thin"),
    bottom=Side(style="thin"),
)
DAYS_FORMAT = "0.00"
DATE_FORMAT = "DD-MM-YYYY"
DATETIME_FORMAT = "DD-MM-YYYY HH:MM"


def _slugify_filename(name: str, max_length: int = 50) -> str:
    """Create a slug suitable for filenames."""
    slug = slugify(name, lowercase=True, separator="_")
    return slug[:max_length]


def _write_header(ws: Worksheet, row: int, headers: list[str]) -> None:
    for col, header in enumerate(headers, 1):
        cell = ws.cell(row=row, column=col, value=header)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = HEADER_ALIGNMENT
        cell.border = BORDER


def _set_widths(ws: Worksheet, widths: list[int]) -> None:
    for col, width in enumerate(widths, 1):
        ws.column_dimensions[get_column_letter(col)].width = width


class HolidayDataExporter:
    """Builds an employee's holiday workbook: balance, absences and accruals."""

    def __init__(self, store: RecordStore) -> None:
        """Initialize the exporter.

        Args:
            store: Record store to read the employee's records from.
        """
        self.store = store

    def generate(
        self, employee_email: str, holiday_year: str | None = None
    ) -> tuple[bytes, CalculatedBalance]:
        """Create the workbook for one employee and holiday year.

        Args:
            employee_email: Employee email.
            holiday_year: Holiday year key, defaults to the current one.

        Returns:
            Tuple of workbook bytes and the balance shown in it.
        """
        holiday_year = holiday_year or hy.current_holiday_year()
        accruals = self.store.fetch_accrual_records(employee_email, holiday_year)
        absences = self.store.fetch_absence_records(employee_email)
        balance = calculate_holiday_balance(employee_email, holiday_year, accruals, absences)
        return self._create_excel(balance, absences, accruals), balance

    def _create_excel(
        self,
        balance: CalculatedBalance,
        absences: list[AbsenceRecord],
        accruals: list[AccrualRecord],
    ) -> bytes:
        wb = Workbook()
        self._write_balance_sheet(wb.active, balance)
        self._write_absence_sheet(wb.create_sheet("Fraværsregistreringer"), absences)
        self._write_accrual_sheet(wb.create_sheet("Optjeningshistorik"), accruals)

        output = io.BytesIO()
        wb.save(output)
        return output.getvalue()

    def _write_balance_sheet(self, ws: Worksheet, balance: CalculatedBalance) -> None:
        ws.title = "Feriesaldo"

        ws.merge_cells("A1:C1")
        title_cell = ws["A1"]
        title_cell.value = f"Feriesaldo: {balance.employee_name}"
        title_cell.font = Font(bold=True, size=14)
        title_cell.alignment = Alignment(horizontal="center")

        ws["A2"] = f"Medarbejder: {balance.employee_email}"
        ws["A3"] = f"Ferieår: {balance.holiday_year}"
        ws["A4"] = f"Eksporteret: {datetime.now().strftime('%d-%m-%Y %H:%M')}"

        header_row = 6
        _write_header(ws, header_row, ["Beskrivelse", "Feriedage", "Feriefridage"])
        rows = [
            ("Optjent", balance.total_accrued_days, balance.total_accrued_feriefridage),
            (
                "Heraf overført",
                balance.transferred_in_days,
                balance.transferred_in_feriefridage,
            ),
            ("Brugt (godkendt)", balance.used_days, balance.used_feriefridage),
            ("Afventer godkendelse", balance.pending_days, balance.pending_feriefridage),
            ("Til rådighed", balance.available_days, balance.available_feriefridage),
        ]
        for idx, (label, days, feriefridage) in enumerate(rows, 1):
            row = header_row + idx
            ws.cell(row=row, column=1, value=label).border = BORDER
            for col, value in ((2, days), (3, feriefridage)):
                cell = ws.cell(row=row, column=col, value=value)
                cell.number_format = DAYS_FORMAT
                cell.border = BORDER

        # Available row
        for col in range(1, 4):
            ws.cell(row=header_row + len(rows), column=col).font = Font(bold=True)

        _set_widths(ws, [24, 14, 14])

    def _write_absence_sheet(self, ws: Worksheet, absences: list[AbsenceRecord]) -> None:
        headers = [
            "Fraværstype",
            "Startdato",
            "Slutdato",
            "Antal dage",
            "Status",
            "Godkender",
            "Noter",
            "Oprettet",
        ]
        _write_header(ws, 1, headers)
        if not absences:
            ws.cell(row=2, column=1, value="Ingen fraværsregistreringer fundet")

        for row, record in enumerate(absences, 2):
            values = [
                record.absence_type.label,
                record.start_date,
                record.end_date,
                record.number_of_days,
                record.status.label,
                record.approver_name or "",
                record.notes or "",
                record.created_at,
            ]
            for col, value in enumerate(values, 1):
                cell = ws.cell(row=row, column=col, value=value)
                cell.border = BORDER
                if isinstance(value, datetime):
                    cell.number_format = DATETIME_FORMAT
                elif isinstance(value, date):
                    cell.number_format = DATE_FORMAT
            ws.cell(row=row, column=4).number_format = DAYS_FORMAT

        _set_widths(ws, [18, 12, 12, 11, 22, 24, 35, 17])

    def _write_accrual_sheet(self, ws: Worksheet, accruals: list[AccrualRecord]) -> None:
        _write_header(ws, 1, ["Dato", "Type", "Ferieår", "Feriedage", "Feriefridage", "Noter"])
        if not accruals:
            ws.cell(row=2, column=1, value="Ingen optjeningshistorik fundet")

        for row, record in enumerate(accruals, 2):
            values = [
                record.accrual_date,
                record.accrual_type.label,
                record.holiday_year,
                record.days_accrued,
                record.feriefridage_accrued or 0.0,
                record.notes or "",
            ]
            for col, value in enumerate(values, 1):
                ws.cell(row=row, column=col, value=value).border = BORDER
            ws.cell(row=row, column=1).number_format = DATE_FORMAT
            ws.cell(row=row, column=4).number_format = DAYS_FORMAT
            ws.cell(row=row, column=5).number_format = DAYS_FORMAT

        _set_widths(ws, [12, 20, 11, 11, 12, 40])

    def get_filename(self, employee_name: str, holiday_year: str) -> str:
        """Get the filename for the workbook."""
        name_slug = _slugify_filename(employee_name)
        date_str = datetime.now().strftime("%Y-%m-%d")
        return f"feriedata_{name_slug}_{holiday_year}_{date_str}.xlsx"
