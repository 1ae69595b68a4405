import httpx
import openai

from app.llm.client_base import BaseLLMClient
from app.llm.exceptions import (
    ExternalModelError,
    ExternalModelIncompleteError,
    ExternalModelNetworkError,
)


class OpenAIClientAdapter(BaseLLMClient):
    """Structured-output client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

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
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_output_tokens,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": schema_name,
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=messages,
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExternalModelNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise ExternalModelNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise ExternalModelError("AI returned no choices")
        choice = response.choices[0]
        if choice.finish_reason == "length":
            raise ExternalModelIncompleteError(
                "AI response was truncated at the output token limit"
            )
        content = choice.message.content
        if content is None:
            raise ExternalModelError("AI returned empty response")
        return content
