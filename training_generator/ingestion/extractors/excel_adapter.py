import io
from datetime import date, datetime, time

import openpyxl
import xlrd

from training_generator.ingestion.exceptions import ExtractionFailedError
from training_generator.ingestion.extractors.base import BaseContentExtractor
from training_generator.ingestion.models import CellValue, DataRow, TabularContent, UploadedFile
from training_generator.ingestion.tabular import format_table_text

# Legacy BIFF (.xls) files are OLE2 compound documents.
_OLE2_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"

RawRow = tuple[object, ...]


class ExcelAdapter(BaseContentExtractor):
    """Reads the first worksheet of a workbook.

    XLSX goes through openpyxl, legacy BIFF workbooks through xlrd.
    """

    def extract(self, file: UploadedFile) -> TabularContent:
        if file.data.startswith(_OLE2_SIGNATURE):
            raw_rows = _read_xls_rows(file.data)
        else:
            raw_rows = _read_xlsx_rows(file.data)
        raw_rows = [
            row for row in raw_rows
            if any(cell is not None and cell != "" for cell in row)
        ]

        if not raw_rows:
            return TabularContent(text=format_table_text([], []))

        width = max(len(row) for row in raw_rows)
        headers = _build_headers(raw_rows[0], width)
        rows = [_build_row(headers, values) for values in raw_rows[1:]]
        return TabularContent(
            headers=tuple(headers),
            rows=tuple(rows),
            text=format_table_text(headers, rows),
        )


def _read_xlsx_rows(data: bytes) -> list[RawRow]:
    try:
        workbook = openpyxl.load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    except Exception as exc:
        raise ExtractionFailedError(f"openpyxl could not open workbook: {exc}") from exc

    try:
        if not workbook.worksheets:
            return []
        return list(workbook.worksheets[0].iter_rows(values_only=True))
    finally:
        workbook.close()


def _read_xls_rows(data: bytes) -> list[RawRow]:
    try:
        book = xlrd.open_workbook(file_contents=data, on_demand=True)
    except Exception as exc:
        raise ExtractionFailedError(f"xlrd could not open workbook: {exc}") from exc

    try:
        if book.nsheets == 0:
            return []
        sheet = book.sheet_by_index(0)
        return [
            tuple(_xls_value(cell, book.datemode) for cell in sheet.row(index))
            for index in range(sheet.nrows)
        ]
    finally:
        book.release_resources()


def _xls_value(cell: xlrd.sheet.Cell, datemode: int) -> object:
    if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
        return None
    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    if cell.ctype == xlrd.XL_CELL_DATE:
        return xlrd.xldate.xldate_as_datetime(cell.value, datemode)
    if cell.ctype == xlrd.XL_CELL_ERROR:
        return xlrd.biffh.error_text_from_code.get(cell.value, "#ERROR")
    if cell.ctype == xlrd.XL_CELL_NUMBER and float(cell.value).is_integer():
        # BIFF stores every number as a float.
        return int(cell.value)
    return cell.value


def _build_headers(values: RawRow, width: int) -> list[str]:
    # Trailing empty cells are not stored, so the header row can be shorter than the data.
    headers: list[str] = []
    for index in range(1, width + 1):
        header = _to_cell(values[index - 1]) if index <= len(values) else ""
        headers.append(str(header) if header != "" else f"Column {index}")
    return headers


def _build_row(headers: list[str], values: RawRow) -> DataRow:
    row: DataRow = {}
    for index, header in enumerate(headers):
        row[header] = _to_cell(values[index]) if index < len(values) else ""
    return row


def _to_cell(value: object) -> CellValue:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).upper()
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value).strip()
