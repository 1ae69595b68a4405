from typing import Any

from app.analysis.analyzer import DatasetAnalyzer
from app.biomarkers.exceptions import ContractViolationError
from app.biomarkers.models import ExtractionResult, ReconciliationResult
from app.config.settings import Settings
from app.documents.factory import TextExtractorFactory
from app.extraction.extractor import BiomarkerExtractor
from app.llm.factory import LLMClientFactory
from app.logging.logger import Log
from app.processor.exceptions import DocumentTooLargeError, InsufficientTextError
from app.processor.upload_store import UploadStore
from app.text.normalizer import normalize_text


class Processor:
    """Orchestrates the two request flows.

    Extraction: save -> extract text -> normalize -> check length -> AI extract.
    The saved upload is deleted on every exit path.
    Analysis: validate payload -> AI match against dataset -> reconcile.
    """

    def __init__(
        self,
        *,
        upload_store: UploadStore,
        extractor: BiomarkerExtractor,
        analyzer: DatasetAnalyzer,
        pdf_engine: str = "pdfplumber",
        max_upload_bytes: int = 25 * 1024 * 1024,
        min_text_chars: int = 100,
        max_input_chars: int = 3_500_000,
    ) -> None:
        self._upload_store = upload_store
        self._extractor = extractor
        self._analyzer = analyzer
        self._pdf_engine = pdf_engine
        self._max_upload_bytes = max_upload_bytes
        self._min_text_chars = min_text_chars
        self._max_input_chars = max_input_chars

    def extract_report(
        self,
        filename: str,
        content_type: str,
        content: bytes,
    ) -> ExtractionResult:
        """Extract biomarkers from one uploaded PDF or DOCX document.

        Raises:
            ContractViolationError: if the upload is empty.
            DocumentTooLargeError: if the upload exceeds the size limit.
            UnsupportedDocumentTypeError: if the file is not PDF or DOCX.
            InsufficientTextError: if too little text could be extracted.
            ExternalModelError: if the extraction model call fails.
        """
        if not content:
            raise ContractViolationError("No file uploaded.")
        if len(content) > self._max_upload_bytes:
            raise DocumentTooLargeError(
                f"File is {len(content)} bytes; the limit is {self._max_upload_bytes} bytes"
            )

        document = self._upload_store.save(filename, content_type, content)
        Log.info(f"Saved upload {filename!r} ({document.size_bytes} bytes) as {document.path.name}")
        try:
            text_extractor = TextExtractorFactory.create(content_type, self._pdf_engine)
            raw_text = text_extractor.extract(self._upload_store.load(document))
            text = self._prepare_text(raw_text)
            return self._extractor.extract(text)
        finally:
            self._upload_store.delete(document)

    def analyze(self, payload: Any) -> ReconciliationResult:
        """Evaluate ``payload["biomarkers"]`` against the reference dataset.

        Raises:
            ContractViolationError: if the payload has no biomarkers list.
            DatasetNotFoundError: if the dataset file is missing.
            ExternalModelError: if the analysis model call fails.
        """
        if not isinstance(payload, dict) or not isinstance(payload.get("biomarkers"), list):
            raise ContractViolationError(
                "Request body must contain a 'data.biomarkers' array."
            )
        metadata = payload.get("metadata")
        gender = metadata.get("gender") if isinstance(metadata, dict) else None
        if gender is not None and not isinstance(gender, str):
            raise ContractViolationError("'metadata.gender' must be a string or null")

        biomarkers: list[Any] = payload["biomarkers"]
        Log.info(f"Analyzing {len(biomarkers)} biomarkers (gender={gender or 'unknown'})")
        return self._analyzer.analyze(biomarkers, gender)

    def _prepare_text(self, raw_text: str) -> str:
        text = normalize_text(raw_text)
        Log.info(f"Extracted {len(raw_text)} chars, {len(text)} after normalization")
        if len(text) < self._min_text_chars:
            raise InsufficientTextError(
                f"Extracted text is too short ({len(text)} characters, minimum "
                f"{self._min_text_chars}). Please upload a clearer document."
            )
        if len(text) > self._max_input_chars:
            Log.warning(
                f"Input text length ({len(text)} characters) exceeds the maximum for a "
                f"single model call. Truncating to {self._max_input_chars} characters."
            )
            text = text[: self._max_input_chars]
        return text


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    client = LLMClientFactory.create(settings)
    model = "example" if settings.llm_provider.lower() == "example" else settings.llm_model_name
    extractor = BiomarkerExtractor(
        client=client,
        model=model,
        temperature=settings.llm_temperature,
        max_output_tokens=settings.llm_max_output_tokens,
    )
    analyzer = DatasetAnalyzer(
        client=client,
        model=model,
        dataset_path=settings.dataset_path,
        temperature=settings.llm_temperature,
        max_output_tokens=settings.llm_max_output_tokens,
    )
    return Processor(
        upload_store=UploadStore(settings.upload_dir),
        extractor=extractor,
        analyzer=analyzer,
        pdf_engine=settings.pdf_engine,
        max_upload_bytes=settings.max_upload_bytes,
        min_text_chars=settings.min_text_chars,
        max_input_chars=settings.max_input_chars,
    )
