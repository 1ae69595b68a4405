import io

import pdfplumber

from app.documents.base import BaseTextExtractor
from app.documents.exceptions import DocumentExtractionError


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, content: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
            return "\n".join(pages).strip()
        except DocumentExtractionError:
            raise
        except Exception as exc:
            raise DocumentExtractionError(f"pdfplumber extraction failed: {exc}") from exc
