"""Build .xlsx downloads with openpyxl."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from io import BytesIO
from typing import Any

from fastapi.responses import Response
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Excel caps sheet titles at 31 characters.
MAX_SHEET_TITLE_LEN = 31
MIN_COLUMN_WIDTH = 10

_HEADER_FILL = PatternFill(fill_type="solid", fgColor="FFE0E0E0")
_HEADER_FONT = Font(bold=True)

# Text starting with these is what spreadsheet apps evaluate as a formula.
FORMULA_PREFIXES = ("=", "+", "-", "@")


@dataclass(frozen=True)
class ExcelColumn:
    header: str
    key: str


def _cell_value(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, datetime):
        # openpyxl rejects tz-aware datetimes.
        return value.replace(tzinfo=None)
    if isinstance(value, (bool, int, float, str, date)):
        return value
    return str(value)


def build_workbook(
    sheet_name: str,
    columns: list[ExcelColumn],
    rows: Iterable[Mapping[str, Any]],
) -> bytes:
    """One sheet: bold grey header row, one line per row mapping, widths fitted to content."""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name[:MAX_SHEET_TITLE_LEN]

    ws.append([c.header for c in columns])
    for row in rows:
        values = [_cell_value(row.get(c.key)) for c in columns]
        ws.append(values)
        # openpyxl turns "=..." into a formula cell; submitted text must stay text.
        for cell, value in zip(ws[ws.max_row], values):
            if isinstance(value, str) and value.startswith(FORMULA_PREFIXES):
                cell.data_type = "s"

    for cell in ws[1]:
        cell.font = _HEADER_FONT
        cell.fill = _HEADER_FILL

    for idx, column_cells in enumerate(ws.iter_cols(min_row=1, max_row=ws.max_row), start=1):
        longest = max((len(str(c.value)) for c in column_cells if c.value is not None), default=0)
        width = MIN_COLUMN_WIDTH if longest < MIN_COLUMN_WIDTH else longest + 2
        ws.column_dimensions[get_column_letter(idx)].width = width

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def export_filename(prefix: str, today: date | None = None) -> str:
    """'<prefix>-export-YYYY-MM-DD.xlsx'"""
    today = today or date.today()
    return f"{prefix}-export-{today.isoformat()}.xlsx"


def excel_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
