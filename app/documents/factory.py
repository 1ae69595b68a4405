from app.documents.base import BaseTextExtractor
from app.documents.docx_adapter import DocxAdapter
from app.documents.exceptions import UnsupportedDocumentTypeError
from app.documents.pdfplumber_adapter import PdfPlumberAdapter
from app.documents.pymupdf_adapter import PyMuPdfAdapter

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class TextExtractorFactory:
    """Creates the text extractor for an uploaded document's MIME type."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, content_type: str, pdf_engine: str) -> BaseTextExtractor:
        """Pick an adapter by MIME type.

        Raises:
            UnsupportedDocumentTypeError: for anything but PDF and DOCX.
            ValueError: if *pdf_engine* is unknown.
        """
        mime_type = (content_type or "").split(";")[0].strip().lower()
        if mime_type == PDF_MIME_TYPE:
            return cls._create_pdf_adapter(pdf_engine)
        if mime_type == DOCX_MIME_TYPE or "wordprocessingml" in mime_type:
            return DocxAdapter()
        raise UnsupportedDocumentTypeError(
            "Unsupported file type. Only PDF and DOCX documents are supported."
        )

    @classmethod
    def _create_pdf_adapter(cls, pdf_engine: str) -> BaseTextExtractor:
        engine = pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()
