"""AI-powered biomarker extraction from normalized report text."""

from pathlib import Path

from app.biomarkers.exceptions import ContractViolationError
from app.biomarkers.models import ExtractionResult
from app.extraction.validator import validate_and_build
from app.llm.client_base import BaseLLMClient
from app.llm.exceptions import ExternalModelError
from app.llm.prompt_loader import load_json_schema, load_prompt_template
from app.llm.response_parser import parse_json_object
from app.logging.logger import Log

SCHEMA_NAME = "biomarker_extraction"


class BiomarkerExtractor:
    """Extracts patient metadata and biomarkers from report text using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseLLMClient,
        model: str,
        temperature: float = 0.2,
        max_output_tokens: int = 16384,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_output_tokens = max_output_tokens
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template("extraction", prompt_template_path)
        self._json_schema = load_json_schema("extraction", json_schema_path)

    def extract(self, text: str) -> ExtractionResult:
        """Turn normalized report text into post-processed biomarker records.

        Raises:
            ExternalModelError: if the model call fails or its output does not
                have the extraction shape.
        """
        prompt = self._prompt_template.format(raw_text=text)
        Log.debug(f"Extraction prompt:\n{prompt}")

        raw_response = self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_output_tokens=self._max_output_tokens,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            schema_name=SCHEMA_NAME,
            json_schema=self._json_schema,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        try:
            result = validate_and_build(parse_json_object(raw_response))
        except ContractViolationError as exc:
            raise ExternalModelError(f"AI returned an invalid extraction result: {exc}") from exc
        Log.info(f"Extraction complete: {len(result.biomarkers)} biomarkers extracted")
        return result
