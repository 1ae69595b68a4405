"""Post-processing of biomarker records returned by the extraction model."""

from typing import Any

from app.biomarkers.exceptions import ContractViolationError
from app.biomarkers.models import BiomarkerRecord
from app.biomarkers.synonyms import standardize_name
from app.biomarkers.units import infer_unit
from app.biomarkers.values import parse_numeric
from app.logging.logger import Log


def post_process(raw_biomarkers: Any) -> list[BiomarkerRecord]:
    """Standardize names, back-fill units and derive numeric values.

    Raises:
        ContractViolationError: if the input is not a list of objects.
    """
    if not isinstance(raw_biomarkers, list):
        raise ContractViolationError("'biomarkers' must be a list")
    records: list[BiomarkerRecord] = []
    for index, raw in enumerate(raw_biomarkers):
        record = _build_record(raw, index)
        if record is not None:
            records.append(record)
    return records


def _build_record(raw: Any, index: int) -> BiomarkerRecord | None:
    if not isinstance(raw, dict):
        raise ContractViolationError(f"Biomarker at index {index} must be an object")
    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        Log.warning(f"Dropping biomarker at index {index}: missing name")
        return None

    value = _optional_text(raw.get("value"), "value", index)
    reference_range = _optional_text(raw.get("referenceRange"), "referenceRange", index)
    unit = _optional_text(raw.get("unit"), "unit", index) or infer_unit(reference_range)

    return BiomarkerRecord(
        name=standardize_name(name),
        group=_optional_text(raw.get("group"), "group", index),
        unit=unit,
        value=value,
        numeric_value=parse_numeric(value),
        reference_range=reference_range,
    )


def _optional_text(raw: Any, field: str, index: int) -> str | None:
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ContractViolationError(
            f"Biomarker at index {index}: '{field}' must be a string or null"
        )
    if isinstance(raw, (int, float)):
        return str(raw)
    if not isinstance(raw, str):
        raise ContractViolationError(
            f"Biomarker at index {index}: '{field}' must be a string or null"
        )
    return raw
