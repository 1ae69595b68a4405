class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class DocumentTooLargeError(ProcessorError):
    """Raised when an upload exceeds the configured size limit."""


class InsufficientTextError(ProcessorError):
    """Raised when too little text was extracted to analyze the document."""
