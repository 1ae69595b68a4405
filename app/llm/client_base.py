from abc import ABC, abstractmethod


class BaseLLMClient(ABC):
    """Contract for provider-specific structured-output clients."""

    @abstractmethod
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
        """Return provider response as plain text."""
