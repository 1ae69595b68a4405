from app.llm.client_base import BaseLLMClient
from app.llm.factory import LLMClientFactory
from app.llm.response_parser import parse_json_object

__all__ = ["BaseLLMClient", "LLMClientFactory", "parse_json_object"]
