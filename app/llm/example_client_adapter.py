"""Example client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseLLMClient and register the provider in LLMClientFactory.
"""

import json
from typing import ClassVar

from app.llm.client_base import BaseLLMClient


class ExampleClientAdapter(BaseLLMClient):
    """Example adapter that returns an empty, schema-valid document.

    No network calls. Useful for local development and tests.
    """

    RESPONSES: ClassVar[dict[str, dict[str, object]]] = {
        "biomarker_extraction": {
            "metadata": {
                "patientName": None,
                "age": None,
                "gender": None,
                "dateOfBirth": None,
                "reportGeneratedDate": None,
            },
            "biomarkers": [],
        },
        "biomarker_analysis": {
            "evaluated": [],
            "unmatched": [],
        },
    }

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
        _ = model, temperature, max_output_tokens, system_prompt, user_prompt, json_schema
        return json.dumps(self.RESPONSES.get(schema_name, {}))
