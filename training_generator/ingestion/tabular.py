"""Quote-aware CSV line parsing and the shared tabular text summary."""

import re
from collections.abc import Sequence

from training_generator.ingestion.models import CellValue, DataRow

SUMMARY_ROW_LIMIT = 20

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?P<frac>\.\d*)?|(?P<lead>\.\d+))(?P<exp>[eE][+-]?\d+)?$")


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV line into trimmed fields.

    A double quote toggles the quoted state and is dropped; commas inside
    a quoted run are literal.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append("".join(current).strip())
    return fields


def coerce_value(value: str) -> CellValue:
    """Return an int or float when the whole value is a number literal."""
    match = _NUMBER_RE.match(value)
    if match is None:
        return value
    if match.group("frac") is None and match.group("lead") is None and match.group("exp") is None:
        return int(value)
    return float(value)


def parse_csv(text: str) -> tuple[list[str], list[DataRow]]:
    """Parse CSV text into headers and rows keyed by header.

    Blank lines are skipped; missing trailing values become empty strings.
    """
    lines = [line.rstrip("\r") for line in text.split("\n") if line.strip()]
    if not lines:
        return [], []
    headers = parse_csv_line(lines[0])
    rows: list[DataRow] = []
    for line in lines[1:]:
        values = parse_csv_line(line)
        row: DataRow = {}
        for index, header in enumerate(headers):
            raw = values[index] if index < len(values) else ""
            row[header] = coerce_value(raw)
        rows.append(row)
    return headers, rows


def serialize_csv(headers: Sequence[str], rows: Sequence[DataRow]) -> str:
    """Write rows in the dialect parse_csv reads back."""
    lines = [",".join(_quote(h) for h in headers)]
    for row in rows:
        lines.append(",".join(_quote(format_cell(row.get(h, ""))) for h in headers))
    return "\n".join(lines) + "\n"


def _quote(value: str) -> str:
    if "," in value:
        return f'"{value}"'
    return value


def format_cell(value: CellValue) -> str:
    return str(value)


def format_table_text(headers: Sequence[str], rows: Sequence[DataRow]) -> str:
    """Readable summary of a table: counts, columns and the first rows."""
    lines = [
        f"Data with {len(rows)} rows and {len(headers)} columns:",
        f"Columns: {', '.join(headers)}",
        "",
    ]
    for index, row in enumerate(rows[:SUMMARY_ROW_LIMIT], start=1):
        lines.append(f"Row {index}: {format_row(headers, row)}")
    text = "\n".join(lines) + "\n"
    if len(rows) > SUMMARY_ROW_LIMIT:
        text += f"\n... and {len(rows) - SUMMARY_ROW_LIMIT} more rows"
    return text


def format_row(headers: Sequence[str], row: DataRow) -> str:
    return ", ".join(f'{h}="{format_cell(row.get(h, ""))}"' for h in headers)
