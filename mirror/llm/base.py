"""Base LLM interface and response types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ChatMessage:
    """A single message in a chat conversation."""

    role: str  # "system", "user", "assistant"
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "content": self.content}


@dataclass
class LLMResponse:
    """Response from an LLM generation call."""

    text: str
    """The primary generated text response."""

    raw: Any
    """The decoded JSON body returned by the server."""

    model: str
    """The model that generated the response."""

    usage: Optional[Dict[str, Any]] = None
    """Token usage if the server reports it."""

    finish_reason: Optional[str] = None

    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def total_tokens(self) -> int:
        if self.usage:
            return self.usage.get(
                "total_tokens",
                self.usage.get("prompt_tokens", 0) + self.usage.get("completion_tokens", 0),
            )
        return 0


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    def __init__(
        self,
        message: str,
        *,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        status_code: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.provider = provider
        self.model = model
        self.status_code = status_code
        self.original_error = original_error


class LLMNetworkError(LLMError):
    """The server could not be reached or did not answer in time."""


class LLMServiceError(LLMError):
    """The server answered with an error status or an error body."""


class BaseLLM(ABC):
    """
    Capability interface for text generation.

    The compiler only depends on this interface, so tests and alternative
    transports can provide their own implementation.
    """

    def __init__(self, model: str, config: Optional[Dict[str, Any]] = None):
        self.model = model
        self.config = config or {}
        self.timeout = self.config.get("timeout", 60.0)

    @abstractmethod
    def generate_chat(self, messages: List[ChatMessage], **kwargs: Any) -> LLMResponse:
        """
        Generate a completion for a chat conversation.

        Raises:
            LLMNetworkError: If the server is unreachable
            LLMServiceError: If the server reports an error
        """

    def generate(self, prompt: str, **kwargs: Any) -> LLMResponse:
        """Send ``prompt`` as a single user message."""
        return self.generate_chat([ChatMessage(role="user", content=prompt)], **kwargs)

    def list_models(self) -> List[str]:
        """Model identifiers offered by the backend."""
        return [self.model]

    def close(self) -> None:
        """Release transport resources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
