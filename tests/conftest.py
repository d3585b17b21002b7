import io
from datetime import date
from pathlib import Path

import cv2
import numpy as np
import pytest
import xlwt
from openpyxl import Workbook
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def long_pdf_bytes() -> bytes:
    """Generate a 25-page PDF, one numbered line per page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for number in range(1, 26):
        c.drawString(72, 720, f"Section {number}")
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sales_csv_bytes() -> bytes:
    return b"name,signups,revenue\nAna,3,1200.5\nBo,0,0\n"


@pytest.fixture()
def xlsx_bytes() -> bytes:
    """Workbook with a header row, a blank row and a date cell."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Sales"
    ws.append(["rep", "closed", None])
    ws.append(["Ana", 4, date(2024, 3, 1)])
    ws.append([None, None, None])
    ws.append(["Bo", 0, None])
    other = wb.create_sheet("Ignored")
    other.append(["should", "not", "appear"])
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


@pytest.fixture()
def xls_bytes() -> bytes:
    """Legacy BIFF workbook with a date cell, a boolean and a blank row."""
    wb = xlwt.Workbook()
    ws = wb.add_sheet("Sales")
    date_style = xlwt.easyxf(num_format_str="YYYY-MM-DD")
    ws.write(0, 0, "rep")
    ws.write(0, 1, "closed")
    ws.write(1, 0, "Ana")
    ws.write(1, 1, 4)
    ws.write(1, 2, date(2024, 3, 1), date_style)
    ws.write(3, 0, "Bo")
    ws.write(3, 1, 0)
    ws.write(3, 2, True)
    other = wb.add_sheet("Ignored")
    other.write(0, 0, "should")
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (4, 3), color=(200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture()
def video_bytes(tmp_path: Path) -> bytes:
    """Two-second 64x48 MJPG video at 10 fps."""
    path = tmp_path / "clip.avi"
    writer = cv2.VideoWriter(str(path), cv2.VideoWriter_fourcc(*"MJPG"), 10.0, (64, 48))
    for index in range(20):
        frame = np.full((48, 64, 3), index * 10, dtype=np.uint8)
        writer.write(frame)
    writer.release()
    return path.read_bytes()
