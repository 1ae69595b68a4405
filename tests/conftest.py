import io
from collections.abc import Callable
from pathlib import Path
from typing import Any

import docx
import openpyxl
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from app.dataset.loader import (
    GENDER_HEADER,
    MARKER_HEADER,
    MAX_HEADER,
    MIN_HEADER,
    SEVERITY_HEADER,
)

REPORT_LINES = [
    "CITY DIAGNOSTICS LABORATORY - COMPLETE BLOOD COUNT",
    "Patient: Jane Roe    Gender: Female    Age: 42 years",
    "Hemoglobin 13.2 g/dL Reference: 12.0 - 15.5 g/dL",
    "WBC 6.8 x10^3/uL Reference: 4.0 - 11.0 x10^3/uL",
    "Glucose 105 mg/dL Reference: 70 - 99 mg/dL",
]

DATASET_HEADER = [MARKER_HEADER, GENDER_HEADER, MIN_HEADER, MAX_HEADER, SEVERITY_HEADER]


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
def report_pdf_bytes() -> bytes:
    """A one-page lab report long enough to pass the minimum text check."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 720
    for line in REPORT_LINES:
        c.drawString(72, y, line)
        y -= 20
    c.save()
    return buf.getvalue()


@pytest.fixture()
def report_docx_bytes() -> bytes:
    """A Word lab report with paragraphs and a results table."""
    document = docx.Document()
    for line in REPORT_LINES[:2]:
        document.add_paragraph(line)
    table = document.add_table(rows=2, cols=3)
    for cell, text in zip(table.rows[0].cells, ["Test", "Result", "Reference"]):
        cell.text = text
    for cell, text in zip(table.rows[1].cells, ["Ferritin", "45 ng/mL", "15 - 150 ng/mL"]):
        cell.text = text
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def write_dataset(tmp_path: Path) -> Callable[..., Path]:
    """Write an XLSX reference dataset; the first row is the header."""

    def _write(
        rows: list[list[Any]],
        header: list[str] | None = None,
        extra_sheet_rows: list[list[Any]] | None = None,
        name: str = "dataset.xlsx",
    ) -> Path:
        workbook = openpyxl.Workbook()
        sheet = workbook.active
        sheet.append(header if header is not None else DATASET_HEADER)
        for row in rows:
            sheet.append(row)
        if extra_sheet_rows is not None:
            other = workbook.create_sheet("Other")
            other.append(DATASET_HEADER)
            for row in extra_sheet_rows:
                other.append(row)
        path = tmp_path / name
        workbook.save(path)
        return path

    return _write
