from dataclasses import dataclass


@dataclass(frozen=True)
class ReferenceDatasetRow:
    """One normal-range entry of the reference dataset.

    ``min``, ``max`` and ``severity`` are kept as text; numeric coercion
    happens during reconciliation.
    """

    marker: str
    gender: str = ""
    min: str = ""
    max: str = ""
    severity: str = ""
