"""
Text-generation boundary for the Mirror compiler.

Key components:
- base: capability interface, message and response types, error family
- local_llm: httpx client for OpenAI-compatible local servers
"""

from .base import (
    BaseLLM,
    ChatMessage,
    LLMError,
    LLMNetworkError,
    LLMResponse,
    LLMServiceError,
)
from .local_llm import DEFAULT_BASE_URL, DEFAULT_MODEL, LocalChatLLM

__all__ = [
    "BaseLLM",
    "ChatMessage",
    "LLMError",
    "LLMNetworkError",
    "LLMResponse",
    "LLMServiceError",
    "LocalChatLLM",
    "DEFAULT_BASE_URL",
    "DEFAULT_MODEL",
]
