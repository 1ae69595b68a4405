"""Authoritative evaluated/unmatched partition of the model's proposed matches.

The external model's own split is advisory. Every candidate is re-checked:

* A candidate is a match only if ``matched_marker`` is a non-empty string and
  at least one of ``min``, ``max``, ``severity`` is present. Absent keys count
  as null.
* Matches go to ``evaluated`` with all their fields kept and
  ``is_within_range`` computed from the numeric value and bounds (inclusive;
  a missing bound is open). A non-numeric value leaves it None. Numeric value
  with no numeric bound at all is treated as within range.
* Everything else goes to ``unmatched`` with every match-derived field nulled.

``gender_used`` is passed through as-is; gender consistency is the matching
model's responsibility.
"""

from typing import Any

from app.biomarkers.exceptions import ContractViolationError
from app.biomarkers.models import EvaluationResult, MatchCandidate, ReconciliationResult
from app.biomarkers.values import leading_float

_CANDIDATE_FIELDS = (
    "name",
    "value",
    "unit",
    "matched_marker",
    "gender_used",
    "min",
    "max",
    "severity",
)


def pool_candidates(model_output: dict[str, Any]) -> list[MatchCandidate]:
    """Merge the model's ``evaluated`` and ``unmatched`` lists, in that order.

    A list member that is missing or not a list counts as empty.

    Raises:
        ContractViolationError: if an entry is not an object.
    """
    pooled: list[Any] = []
    for key in ("evaluated", "unmatched"):
        entries = model_output.get(key)
        if isinstance(entries, list):
            pooled.extend(entries)
    return [build_candidate(entry, index) for index, entry in enumerate(pooled)]


def build_candidate(raw: Any, index: int = 0) -> MatchCandidate:
    """Build a MatchCandidate from one raw model entry.

    Raises:
        ContractViolationError: if *raw* is not an object or a field is not
        a string, number or null.
    """
    if not isinstance(raw, dict):
        raise ContractViolationError(f"Candidate at index {index} must be an object")
    fields = {name: _optional_text(raw.get(name), name, index) for name in _CANDIDATE_FIELDS}
    extra = {key: value for key, value in raw.items() if key not in _CANDIDATE_FIELDS}
    return MatchCandidate(**fields, extra=extra)


def reconcile(candidates: list[MatchCandidate]) -> ReconciliationResult:
    """Partition *candidates* into evaluated and unmatched, preserving order."""
    evaluated: list[EvaluationResult] = []
    unmatched: list[EvaluationResult] = []
    for candidate in candidates:
        if is_valid_match(candidate):
            evaluated.append(_evaluate(candidate))
        else:
            unmatched.append(_unmatch(candidate))
    return ReconciliationResult(evaluated=evaluated, unmatched=unmatched)


def is_valid_match(candidate: MatchCandidate) -> bool:
    if candidate.matched_marker is None or candidate.matched_marker == "":
        return False
    return any(
        bound is not None
        for bound in (candidate.min, candidate.max, candidate.severity)
    )


def is_within_range(value: str | None, min_: str | None, max_: str | None) -> bool | None:
    """Inclusive range check; None when *value* is not numeric."""
    patient_value = leading_float(value)
    if patient_value is None:
        return None
    lower = leading_float(min_)
    upper = leading_float(max_)
    if lower is not None and upper is not None:
        return lower <= patient_value <= upper
    if lower is not None:
        return patient_value >= lower
    if upper is not None:
        return patient_value <= upper
    return True


def _evaluate(candidate: MatchCandidate) -> EvaluationResult:
    return EvaluationResult(
        name=candidate.name,
        value=candidate.value,
        unit=candidate.unit,
        matched_marker=candidate.matched_marker,
        gender_used=candidate.gender_used,
        min=candidate.min,
        max=candidate.max,
        severity=candidate.severity,
        is_within_range=is_within_range(candidate.value, candidate.min, candidate.max),
        extra=dict(candidate.extra),
    )


def _unmatch(candidate: MatchCandidate) -> EvaluationResult:
    return EvaluationResult(
        name=candidate.name or None,
        value=candidate.value or None,
        unit=candidate.unit or None,
    )


def _optional_text(raw: Any, field: str, index: int) -> str | None:
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    raise ContractViolationError(
        f"Candidate at index {index}: '{field}' must be a string, number or null"
    )
