"""Recover a missing unit from a reference-range string."""

import re

# Priority order: the first pattern that matches anywhere wins, even when a
# later pattern would match earlier in the string.
_UNIT_PATTERNS: tuple[re.Pattern[str], ...] = (
    # concentration
    re.compile(r"(?<![A-Za-z])(?:mg|g|µg|μg|ug|mcg|ng|pg)/(?:dL|mL|L)\b", re.IGNORECASE),
    # international units
    re.compile(r"(?<![A-Za-z])(?:m|µ|μ|u)?IU/(?:mL|L)\b", re.IGNORECASE),
    re.compile(r"(?<![A-Za-z])U/L\b", re.IGNORECASE),
    # molar
    re.compile(r"(?<![A-Za-z])(?:mmol|µmol|μmol|umol|nmol|pmol|mol|mEq)/L\b", re.IGNORECASE),
    # cell counts
    re.compile(r"(?:[x×]\s*)?10\^?\d+\s*/\s*(?:µL|μL|uL|L|mm3)", re.IGNORECASE),
    re.compile(r"(?<![A-Za-z])(?:cells|thou|mill|lakhs?)/(?:µL|μL|uL|cumm|mm3)\b", re.IGNORECASE),
    re.compile(r"/(?:cumm|hpf)\b", re.IGNORECASE),
    # percentage
    re.compile(r"%"),
    # ratio / index
    re.compile(r"\b(?:ratio|index)\b", re.IGNORECASE),
    # time and rate
    re.compile(r"\bmm/hr?\b", re.IGNORECASE),
    re.compile(r"\b(?:sec|seconds|min)\b", re.IGNORECASE),
    # volume and cell indices
    re.compile(r"(?<![A-Za-z])(?:fL|pg|mL)\b"),
)

_FALLBACK_TOKEN_RE = re.compile(r"[A-Za-zµμ%][\w/%^.µμ]*")

_NON_UNIT_WORDS = frozenset({
    "normal", "abnormal", "high", "low", "range", "reference", "ref", "adult",
    "adults", "male", "males", "female", "females", "men", "women", "both",
    "child", "children", "positive", "negative", "reactive", "nonreactive",
    "detected", "not", "none", "seen", "nil", "absent", "present", "trace",
    "to", "and", "or", "up", "upto", "less", "than", "more", "greater",
    "optimal", "desirable", "borderline", "years",
})

_MAX_FALLBACK_LENGTH = 8


def infer_unit(reference_range: str | None) -> str | None:
    """Return the unit written inside *reference_range*, or None."""
    if not isinstance(reference_range, str):
        return None
    for pattern in _UNIT_PATTERNS:
        match = pattern.search(reference_range)
        if match:
            return match.group(0)
    return _fallback_unit(reference_range)


def _fallback_unit(text: str) -> str | None:
    for token in _FALLBACK_TOKEN_RE.findall(text):
        candidate = token.rstrip(".")
        if candidate.lower() in _NON_UNIT_WORDS:
            continue
        if len(candidate) > _MAX_FALLBACK_LENGTH:
            continue
        if not any(ch.isalpha() for ch in candidate):
            continue
        return candidate
    return None
