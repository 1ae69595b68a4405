"""Validates the extraction model's JSON and builds an ExtractionResult."""

from typing import Any

from app.biomarkers.exceptions import ContractViolationError
from app.biomarkers.models import ExtractionResult, PatientMetadata
from app.biomarkers.postprocess import post_process

_METADATA_FIELDS = {
    "patientName": "patient_name",
    "age": "age",
    "gender": "gender",
    "dateOfBirth": "date_of_birth",
    "reportGeneratedDate": "report_generated_date",
}


def validate_and_build(data: dict[str, Any]) -> ExtractionResult:
    """Check the top-level shape, then post-process the biomarkers.

    Raises:
        ContractViolationError: on any shape violation.
    """
    for field in ("metadata", "biomarkers"):
        if field not in data:
            raise ContractViolationError(f"Missing required top-level field: {field}")
    metadata = _build_metadata(data["metadata"])
    biomarkers = post_process(data["biomarkers"])
    return ExtractionResult(metadata=metadata, biomarkers=biomarkers)


def _build_metadata(raw: Any) -> PatientMetadata:
    if raw is None:
        return PatientMetadata()
    if not isinstance(raw, dict):
        raise ContractViolationError("'metadata' must be an object")
    values: dict[str, str | None] = {}
    for wire_name, attr in _METADATA_FIELDS.items():
        value = raw.get(wire_name)
        if value is not None and not isinstance(value, (str, int, float)):
            raise ContractViolationError(f"'metadata.{wire_name}' must be a string or null")
        values[attr] = None if value is None else str(value)
    return PatientMetadata(**values)
