class DocumentExtractionError(Exception):
    """Raised when text cannot be extracted from an uploaded document."""


class UnsupportedDocumentTypeError(DocumentExtractionError):
    """Raised when the uploaded document is neither a PDF nor a DOCX file."""
