from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BiomarkerRecord:
    """A single laboratory result after extraction post-processing."""

    name: str
    group: str | None = None
    unit: str | None = None
    value: str | None = None
    numeric_value: float | None = None
    reference_range: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "group": self.group,
            "unit": self.unit,
            "value": self.value,
            "numericValue": self.numeric_value,
            "referenceRange": self.reference_range,
        }


@dataclass(frozen=True)
class PatientMetadata:
    """Patient details reported alongside the biomarkers."""

    patient_name: str | None = None
    age: str | None = None
    gender: str | None = None
    date_of_birth: str | None = None
    report_generated_date: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "patientName": self.patient_name,
            "age": self.age,
            "gender": self.gender,
            "dateOfBirth": self.date_of_birth,
            "reportGeneratedDate": self.report_generated_date,
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Output of the document extraction flow."""

    metadata: PatientMetadata
    biomarkers: list[BiomarkerRecord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "biomarkers": [b.to_dict() for b in self.biomarkers],
        }


@dataclass(frozen=True)
class MatchCandidate:
    """A biomarker with the reference row the external model proposed for it.

    ``extra`` holds any other keys the model returned (e.g. ``group``).
    """

    name: str | None = None
    value: str | None = None
    unit: str | None = None
    matched_marker: str | None = None
    gender_used: str | None = None
    min: str | None = None
    max: str | None = None
    severity: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class EvaluationResult:
    """One reconciled biomarker, either evaluated or unmatched."""

    name: str | None
    value: str | None
    unit: str | None
    matched_marker: str | None = None
    gender_used: str | None = None
    min: str | None = None
    max: str | None = None
    severity: str | None = None
    is_within_range: bool | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self, *, include_range: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data.update(
            name=self.name,
            value=self.value,
            unit=self.unit,
            matched_marker=self.matched_marker,
            gender_used=self.gender_used,
            min=self.min,
            max=self.max,
            severity=self.severity,
        )
        if include_range:
            data["isWithinRange"] = self.is_within_range
        return data


@dataclass(frozen=True)
class ReconciliationResult:
    """Final evaluated/unmatched partition."""

    evaluated: list[EvaluationResult] = field(default_factory=list)
    unmatched: list[EvaluationResult] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "evaluated": [e.to_dict() for e in self.evaluated],
            "unmatched": [u.to_dict(include_range=False) for u in self.unmatched],
        }
