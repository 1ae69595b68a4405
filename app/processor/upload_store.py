import uuid
from pathlib import Path

from app.logging.logger import Log
from app.processor.models import UploadedDocument


class UploadStore:
    """Saves uploads under a unique name, reads them back and deletes them."""

    def __init__(self, upload_dir: Path) -> None:
        self._upload_dir = upload_dir

    def save(self, filename: str, content_type: str, content: bytes) -> UploadedDocument:
        """Write *content* to a new uniquely named file.

        A partially written file is removed before the error propagates.
        """
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        path = self._upload_dir / f"{uuid.uuid4().hex}{Path(filename).suffix.lower()}"
        try:
            path.write_bytes(content)
        except OSError:
            path.unlink(missing_ok=True)
            raise
        return UploadedDocument(
            filename=filename,
            content_type=content_type,
            path=path,
            size_bytes=len(content),
        )

    def load(self, document: UploadedDocument) -> bytes:
        """Read document bytes from disk.

        Raises:
            FileNotFoundError: if the file does not exist at its saved path.
        """
        if not document.path.exists():
            raise FileNotFoundError(f"File not found: {document.path}")
        return document.path.read_bytes()

    def delete(self, document: UploadedDocument) -> None:
        """Remove the saved file. A failed delete is logged, never raised."""
        try:
            document.path.unlink(missing_ok=True)
        except OSError as exc:
            Log.error(f"Error deleting uploaded file {document.path}: {exc}")
