"""Cleanup of raw text extracted from lab report documents.

The steps run in a fixed order; each later step assumes the output of the
earlier ones:

1. Collapse runs of horizontal whitespace to one space.
2. Repair OCR letter/digit confusions next to digits ("1O.5" -> "10.5").
3. Repair broken unit tokens ("mg/dI" -> "mg/dL").
4. Normalize "label: value" spacing and operator/digit spacing ("< 5" -> "<5").
5. Collapse three or more newlines to a blank line.
6. Trim.
"""

import re
from collections.abc import Callable

_HORIZONTAL_WS_RE = re.compile(r"[ \t\f\v\u00a0]{2,}")

# Letters standing in for 0 and 1. After a digit they are always repaired
# ("5Omg" -> "50mg"); before a digit only when they do not end a word ("CO2").
_ZERO_AFTER_DIGIT_RE = re.compile(r"(?<=\d)[Oo]")
_ZERO_BEFORE_DIGIT_RE = re.compile(r"(?<![A-Za-z])[Oo](?=\d)")
_ONE_AFTER_DIGIT_RE = re.compile(r"(?<=\d)[lI]")
_ONE_BEFORE_DIGIT_RE = re.compile(r"(?<![A-Za-z])[lI](?=\d)")

_UNIT_TOKEN_REPAIRS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bmg/dI\b"), "mg/dL"),
    (re.compile(r"\bg/dI\b"), "g/dL"),
    (re.compile(r"\bmmol/I\b"), "mmol/L"),
)

_LABEL_COLON_RE = re.compile(r"([A-Za-z)\]]):[ \t]*(?=\S)")
_OPERATOR_SPACE_RE = re.compile(r"([<>≤≥])[ \t]+(?=\d)")

_BLANK_LINES_RE = re.compile(r"\n(?:[ \t]*\n){2,}")


def collapse_horizontal_whitespace(text: str) -> str:
    """Replace runs of two or more spaces/tabs with a single space."""
    return _HORIZONTAL_WS_RE.sub(" ", text)


def repair_digit_confusions(text: str) -> str:
    """Rewrite O/o as 0 and l/I as 1 where they touch a digit.

    Bare letters and word-final letters before a digit ("Iron", "CO2") are
    left alone.
    Expects single-spaced input.
    """
    text = _ZERO_AFTER_DIGIT_RE.sub("0", text)
    text = _ZERO_BEFORE_DIGIT_RE.sub("0", text)
    text = _ONE_AFTER_DIGIT_RE.sub("1", text)
    return _ONE_BEFORE_DIGIT_RE.sub("1", text)


def repair_unit_tokens(text: str) -> str:
    """Restore unit tokens whose trailing L was read as a capital I."""
    for pattern, replacement in _UNIT_TOKEN_REPAIRS:
        text = pattern.sub(replacement, text)
    return text


def normalize_label_spacing(text: str) -> str:
    """Exactly one space after "Label:", none between an operator and its number."""
    text = _LABEL_COLON_RE.sub(r"\1: ", text)
    return _OPERATOR_SPACE_RE.sub(r"\1", text)


def collapse_blank_lines(text: str) -> str:
    return _BLANK_LINES_RE.sub("\n\n", text)


NORMALIZATION_STEPS: tuple[Callable[[str], str], ...] = (
    collapse_horizontal_whitespace,
    repair_digit_confusions,
    repair_unit_tokens,
    normalize_label_spacing,
    collapse_blank_lines,
    str.strip,
)


def normalize_text(raw_text: str) -> str:
    """Run every cleanup step over *raw_text* in order."""
    if not isinstance(raw_text, str):
        raise TypeError(f"normalize_text expects str, got {type(raw_text).__name__}")
    text = raw_text
    for step in NORMALIZATION_STEPS:
        text = step(text)
    return text
