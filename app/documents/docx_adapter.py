import io

import docx

from app.documents.base import BaseTextExtractor
from app.documents.exceptions import DocumentExtractionError


class DocxAdapter(BaseTextExtractor):
    """Extracts raw text from a Word document using python-docx.

    Paragraphs come first, then table rows with cells separated by tabs;
    lab reports often keep their results in tables.
    """

    def extract(self, content: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(content))
            lines = [p.text for p in document.paragraphs]
            for table in document.tables:
                for row in table.rows:
                    lines.append("\t".join(cell.text for cell in row.cells))
            return "\n".join(lines).strip()
        except DocumentExtractionError:
            raise
        except Exception as exc:
            raise DocumentExtractionError(f"python-docx extraction failed: {exc}") from exc
