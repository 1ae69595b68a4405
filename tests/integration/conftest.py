import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.analysis.analyzer import DatasetAnalyzer
from app.api.app import create_app
from app.config.settings import Settings
from app.extraction.extractor import BiomarkerExtractor
from app.llm.client_base import BaseLLMClient
from app.processor.processor import Processor, build_processor
from app.processor.upload_store import UploadStore


class ScriptedClient(BaseLLMClient):
    """Returns a canned JSON document per schema name and records prompts."""

    def __init__(self, responses: dict[str, Any]) -> None:
        self.responses = responses
        self.prompts: list[str] = []

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_output_tokens: int,
        system_prompt: str,
        user_prompt: str,
        schema_name: str,
        json_schema: dict[str, object],
    ) -> str:
        self.prompts.append(user_prompt)
        response = self.responses[schema_name]
        return response if isinstance(response, str) else json.dumps(response)


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        llm_provider="example",
        upload_dir=tmp_path / "uploads",
        dataset_path=tmp_path / "dataset.xlsx",
    )


@pytest.fixture()
def example_client(test_settings: Settings) -> TestClient:
    """The full app wired with the offline example provider."""
    app = create_app(test_settings, processor=build_processor(test_settings))
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def scripted_app(test_settings: Settings) -> Callable[[dict[str, Any]], tuple[TestClient, ScriptedClient]]:
    """Build the app around a ScriptedClient with the given responses."""

    def _build(responses: dict[str, Any]) -> tuple[TestClient, ScriptedClient]:
        llm = ScriptedClient(responses)
        processor = Processor(
            upload_store=UploadStore(test_settings.upload_dir),
            extractor=BiomarkerExtractor(client=llm, model="scripted"),
            analyzer=DatasetAnalyzer(
                client=llm,
                model="scripted",
                dataset_path=test_settings.dataset_path,
            ),
        )
        app = create_app(test_settings, processor=processor)
        return TestClient(app, raise_server_exceptions=False), llm

    return _build
