"""Matches biomarkers against the reference dataset and reconciles the result."""

import json
from pathlib import Path
from typing import Any

from app.biomarkers.exceptions import ContractViolationError
from app.biomarkers.models import ReconciliationResult
from app.biomarkers.reconciler import pool_candidates, reconcile
from app.dataset.loader import DatasetLoader, serialize_dataset
from app.llm.client_base import BaseLLMClient
from app.llm.exceptions import ExternalModelError
from app.llm.prompt_loader import load_json_schema, load_prompt_template
from app.llm.response_parser import parse_json_object
from app.logging.logger import Log

SCHEMA_NAME = "biomarker_analysis"


class DatasetAnalyzer:
    """Proposes matches with an AI provider, then applies the reconciliation rules."""

    def __init__(
        self,
        *,
        client: BaseLLMClient,
        model: str,
        dataset_path: Path,
        dataset_loader: DatasetLoader | None = None,
        temperature: float = 0.2,
        max_output_tokens: int = 16384,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._dataset_path = dataset_path
        self._dataset_loader = dataset_loader or DatasetLoader()
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_output_tokens = max_output_tokens
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template("analysis", prompt_template_path)
        self._json_schema = load_json_schema("analysis", json_schema_path)

    def analyze(self, biomarkers: list[Any], gender: str | None) -> ReconciliationResult:
        """Evaluate *biomarkers* for a patient of *gender*.

        The dataset is re-read on every call.

        Raises:
            DatasetNotFoundError: if the dataset file is missing.
            ExternalModelError: if the model call fails, returns invalid JSON
                or returns a malformed entry.
        """
        rows = self._dataset_loader.load(self._dataset_path)
        prompt = self._prompt_template.format(
            gender=(gender or "").lower(),
            biomarkers_json=json.dumps(biomarkers, indent=2, ensure_ascii=False),
            dataset_csv=serialize_dataset(rows),
        )
        Log.debug(f"Analysis prompt:\n{prompt}")

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
            candidates = pool_candidates(parse_json_object(raw_response))
        except ContractViolationError as exc:
            raise ExternalModelError(f"AI returned an invalid match list: {exc}") from exc
        result = reconcile(candidates)
        Log.info(
            f"Analysis complete: {len(result.evaluated)} evaluated, "
            f"{len(result.unmatched)} unmatched"
        )
        return result
