"""Numeric parsing of biomarker values and range bounds."""

import math
import re

_OPERATOR_CHARS_RE = re.compile(r"[<>≤≥]")
_LEADING_NUMBER_RE = re.compile(r"^\d+(?:\.\d+)?")
_LEADING_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_numeric(value: str | None) -> float | None:
    """Parse the leading number of *value* after dropping comparison operators.

    "<0.5" -> 0.5, ">100" -> 100.0, "NONE SEEN" -> None. Never raises.
    """
    if not isinstance(value, str):
        return None
    stripped = _OPERATOR_CHARS_RE.sub("", value).strip()
    match = _LEADING_NUMBER_RE.match(stripped)
    if match is None:
        return None
    number = float(match.group(0))
    return number if math.isfinite(number) else None


def leading_float(text: object) -> float | None:
    """Lenient float prefix parse used for range bounds.

    Accepts a sign, a bare fraction (".5") and an exponent, and ignores
    trailing text ("70 mg/dL" -> 70.0). Operator glyphs are dropped first.
    """
    if isinstance(text, bool) or text is None:
        return None
    if isinstance(text, (int, float)):
        number = float(text)
        return number if math.isfinite(number) else None
    if not isinstance(text, str):
        return None
    stripped = _OPERATOR_CHARS_RE.sub("", text).strip()
    match = _LEADING_FLOAT_RE.match(stripped)
    if match is None:
        return None
    number = float(match.group(0))
    return number if math.isfinite(number) else None
