from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class UploadedDocument:
    """A document saved to the upload directory for the duration of one request."""

    filename: str
    content_type: str
    path: Path
    size_bytes: int
