"""Tests for reading the reference dataset workbook and its CSV rendering."""

import csv
import io
from collections.abc import Callable
from pathlib import Path

import pytest

from app.dataset.exceptions import DatasetError, DatasetNotFoundError
from app.dataset.loader import (
    GENDER_HEADER,
    MARKER_HEADER,
    MAX_HEADER,
    MIN_HEADER,
    SERIALIZED_HEADER,
    SEVERITY_HEADER,
    DatasetLoader,
    serialize_dataset,
)
from app.dataset.models import ReferenceDatasetRow


class TestDatasetLoader:
    def test_loads_rows(self, write_dataset: Callable[..., Path]) -> None:
        path = write_dataset(
            [
                ["Glucose", "Both", 70, 99, 2],
                ["Hemoglobin", "Male", 13.5, 17.5, 3],
            ]
        )

        rows = DatasetLoader().load(path)

        assert rows == [
            ReferenceDatasetRow(marker="Glucose", gender="both", min="70", max="99", severity="2"),
            ReferenceDatasetRow(marker="Hemoglobin", gender="male", min="13.5", max="17.5", severity="3"),
        ]

    def test_skips_rows_without_marker(self, write_dataset: Callable[..., Path]) -> None:
        path = write_dataset(
            [
                ["Glucose", "both", 70, 99, 2],
                [None, "male", 1, 2, 1],
                ["   ", "female", 1, 2, 1],
            ]
        )

        rows = DatasetLoader().load(path)

        assert [r.marker for r in rows] == ["Glucose"]

    def test_missing_cells_become_empty_text(self, write_dataset: Callable[..., Path]) -> None:
        path = write_dataset([["Ferritin", None, None, 300, None]])

        row = DatasetLoader().load(path)[0]

        assert row.gender == ""
        assert row.min == ""
        assert row.max == "300"
        assert row.severity == ""

    def test_reads_first_sheet_only(self, write_dataset: Callable[..., Path]) -> None:
        path = write_dataset(
            [["Glucose", "both", 70, 99, 2]],
            extra_sheet_rows=[["Sodium", "both", 135, 145, 3]],
        )

        rows = DatasetLoader().load(path)

        assert [r.marker for r in rows] == ["Glucose"]

    def test_accepts_lowercase_headers(self, write_dataset: Callable[..., Path]) -> None:
        path = write_dataset(
            [["Glucose", "both", 70, 99, 2]],
            header=[
                h.lower()
                for h in (MARKER_HEADER, GENDER_HEADER, MIN_HEADER, MAX_HEADER, SEVERITY_HEADER)
            ],
        )

        rows = DatasetLoader().load(path)

        assert rows[0].marker == "Glucose"
        assert rows[0].severity == "2"

    def test_header_only_workbook(self, write_dataset: Callable[..., Path]) -> None:
        assert DatasetLoader().load(write_dataset([])) == []

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.xlsx"

        with pytest.raises(DatasetNotFoundError, match="Dataset file not found at"):
            DatasetLoader().load(path)

    def test_not_found_is_a_file_not_found_error(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            DatasetLoader().load(tmp_path / "missing.xlsx")

    def test_unreadable_workbook(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.xlsx"
        path.write_bytes(b"not a workbook")

        with pytest.raises(DatasetError, match="Failed to read dataset"):
            DatasetLoader().load(path)

    def test_reloads_on_every_call(self, write_dataset: Callable[..., Path]) -> None:
        loader = DatasetLoader()
        path = write_dataset([["Glucose", "both", 70, 99, 2]])
        assert len(loader.load(path)) == 1

        write_dataset([["Glucose", "both", 70, 99, 2], ["Sodium", "both", 135, 145, 3]])

        assert len(loader.load(path)) == 2


class TestSerializeDataset:
    def test_header_only_for_no_rows(self) -> None:
        assert serialize_dataset([]) == '"Marker","Gender","Min","Max","Severity"'

    def test_quotes_every_field(self) -> None:
        rows = [ReferenceDatasetRow(marker="Glucose", gender="both", min="70", max="99", severity="2")]

        text = serialize_dataset(rows)

        assert text.splitlines() == [
            '"Marker","Gender","Min","Max","Severity"',
            '"Glucose","both","70","99","2"',
        ]

    def test_doubles_embedded_quotes(self) -> None:
        rows = [ReferenceDatasetRow(marker='Vitamin "D"', min="", max="100")]

        text = serialize_dataset(rows)

        assert '"Vitamin ""D""","","","100",""' in text

    def test_readable_as_csv(self) -> None:
        rows = [
            ReferenceDatasetRow(marker="Lipase, serum", gender="female", min="13", max="60", severity="4"),
            ReferenceDatasetRow(marker="CRP", max="5"),
        ]

        parsed = list(csv.reader(io.StringIO(serialize_dataset(rows))))

        assert tuple(parsed[0]) == SERIALIZED_HEADER
        assert parsed[1] == ["Lipase, serum", "female", "13", "60", "4"]
        assert parsed[2] == ["CRP", "", "", "5", ""]

    def test_no_trailing_newline(self) -> None:
        rows = [ReferenceDatasetRow(marker="CRP")]

        assert not serialize_dataset(rows).endswith("\n")
