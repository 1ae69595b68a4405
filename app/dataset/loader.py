"""Reference dataset loading and its CSV rendering for the analysis prompt."""

import csv
import io
from collections.abc import Sequence
from pathlib import Path
from typing import Any, ClassVar

import openpyxl

from app.dataset.exceptions import DatasetError, DatasetNotFoundError
from app.dataset.models import ReferenceDatasetRow
from app.logging.logger import Log

MARKER_HEADER = "Blood Test Marker"
GENDER_HEADER = "Gender"
MIN_HEADER = "Minimum"
MAX_HEADER = "Maximum"
SEVERITY_HEADER = "Severity Score (1 = mild, 5 = highly significant)"

SERIALIZED_HEADER = ("Marker", "Gender", "Min", "Max", "Severity")


class DatasetLoader:
    """Reads reference rows from the first sheet of an XLSX workbook."""

    HEADERS: ClassVar[dict[str, str]] = {
        "marker": MARKER_HEADER,
        "gender": GENDER_HEADER,
        "min": MIN_HEADER,
        "max": MAX_HEADER,
        "severity": SEVERITY_HEADER,
    }

    def load(self, path: Path) -> list[ReferenceDatasetRow]:
        """Load every row with a non-blank marker.

        Raises:
            DatasetNotFoundError: if *path* does not exist.
            DatasetError: if the workbook cannot be read.
        """
        if not path.exists():
            raise DatasetNotFoundError(f"Dataset file not found at: {path}")
        try:
            raw_rows = self._read_first_sheet(path)
        except Exception as exc:
            raise DatasetError(f"Failed to read dataset {path}: {exc}") from exc

        if not raw_rows:
            return []
        columns = self._resolve_columns(raw_rows[0])
        rows = [
            row
            for row in (self._build_row(values, columns) for values in raw_rows[1:])
            if row is not None
        ]
        Log.info(f"Loaded {len(rows)} reference rows from {path.name}")
        return rows

    @staticmethod
    def _read_first_sheet(path: Path) -> list[tuple[Any, ...]]:
        workbook = openpyxl.load_workbook(path, read_only=True, data_only=True)
        try:
            sheet = workbook.worksheets[0]
            return list(sheet.iter_rows(values_only=True))
        finally:
            workbook.close()

    @classmethod
    def _resolve_columns(cls, header_row: Sequence[Any]) -> dict[str, int | None]:
        """Map each field to its column, trying the canonical header then its lower-case form."""
        positions = {
            str(cell).strip(): index
            for index, cell in enumerate(header_row)
            if cell is not None
        }
        columns: dict[str, int | None] = {}
        for field, header in cls.HEADERS.items():
            position = positions.get(header)
            if position is None:
                position = positions.get(header.lower())
            columns[field] = position
        return columns

    @staticmethod
    def _build_row(
        values: Sequence[Any],
        columns: dict[str, int | None],
    ) -> ReferenceDatasetRow | None:
        def cell(field: str) -> str:
            position = columns[field]
            if position is None or position >= len(values):
                return ""
            return _cell_text(values[position])

        marker = cell("marker").strip()
        if not marker:
            return None
        return ReferenceDatasetRow(
            marker=marker,
            gender=cell("gender").strip().lower(),
            min=cell("min"),
            max=cell("max"),
            severity=cell("severity"),
        )


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def serialize_dataset(rows: Sequence[ReferenceDatasetRow]) -> str:
    """Render rows as CSV with every field quoted and a fixed column order."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(SERIALIZED_HEADER)
    for row in rows:
        writer.writerow((row.marker, row.gender, row.min, row.max, row.severity))
    return buffer.getvalue().rstrip("\n")
