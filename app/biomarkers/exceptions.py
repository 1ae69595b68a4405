class BiomarkerError(Exception):
    """Base exception for biomarker post-processing and reconciliation."""


class ContractViolationError(BiomarkerError):
    """Raised when input does not match the documented biomarker/candidate shape."""
