"""OpenAI-compatible chat-completions client for locally hosted models."""

import logging
import time
from typing import Any, Callable, Dict, List, Optional

import httpx

from .base import BaseLLM, ChatMessage, LLMError, LLMNetworkError, LLMResponse, LLMServiceError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:1234/v1"
DEFAULT_MODEL = "tinyllama-claude"


class LocalChatLLM(BaseLLM):
    """
    Client for a local server exposing ``/v1/chat/completions`` (LM Studio,
    llama.cpp server, vLLM and similar).

    Configuration:
        - base_url: API base URL including ``/v1`` (default: http://127.0.0.1:1234/v1)
        - timeout: Request timeout in seconds (default: 60)
        - max_retries: Extra attempts after a network error or 5xx (default: 2)
        - retry_base_delay: First backoff delay in seconds (default: 0.5)
        - retry_max_delay: Backoff ceiling in seconds (default: 5.0)
        - transport: Optional ``httpx.BaseTransport``, used by tests

    Example:
        >>> with LocalChatLLM('meta-llama-3-8b-instruct') as llm:
        ...     print(llm.generate('Say hi').text)  # doctest: +SKIP
    """

    provider = "local"

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        config: Optional[Dict[str, Any]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        super().__init__(model, config)
        self.base_url = (self.config.get("base_url") or DEFAULT_BASE_URL).rstrip("/")
        self.max_retries = int(self.config.get("max_retries", 2))
        self.retry_base_delay = float(self.config.get("retry_base_delay", 0.5))
        self.retry_max_delay = float(self.config.get("retry_max_delay", 5.0))
        self._transport = self.config.get("transport")
        self._sleep = sleep
        self._http_client: Optional[httpx.Client] = None

    def _get_http_client(self) -> httpx.Client:
        if self._http_client is None:
            self._http_client = httpx.Client(timeout=self.timeout, transport=self._transport)
        return self._http_client

    def close(self) -> None:
        if self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def generate_chat(self, messages: List[ChatMessage], **kwargs: Any) -> LLMResponse:
        model = kwargs.pop("model", None) or self.model
        payload: Dict[str, Any] = {
            "model": model,
            "messages": [msg.to_dict() for msg in messages],
        }
        for key in ("temperature", "max_tokens", "top_p", "stop"):
            if key in kwargs:
                payload[key] = kwargs[key]

        data = self._request("POST", "/chat/completions", model, json=payload)

        try:
            choice = data["choices"][0]
            text = choice["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise LLMServiceError(
                "Malformed chat completion response: missing choices[0].message.content",
                provider=self.provider,
                model=model,
                original_error=exc,
            ) from exc

        return LLMResponse(
            text=text,
            raw=data,
            model=data.get("model", model),
            usage=data.get("usage"),
            finish_reason=choice.get("finish_reason"),
            metadata={"provider": self.provider, "base_url": self.base_url},
        )

    def list_models(self) -> List[str]:
        data = self._request("GET", "/models", self.model)
        # OpenAI-style servers answer {"data": [{"id": ...}]}, some local ones {"models": [...]}
        entries = data.get("data")
        if entries is None:
            entries = data.get("models", [])
        models = []
        for entry in entries:
            if isinstance(entry, dict):
                models.append(entry.get("id") or entry.get("name") or "")
            else:
                models.append(str(entry))
        return [name for name in models if name]

    def _request(self, method: str, path: str, model: str, **kwargs: Any) -> Dict[str, Any]:
        """Send a request, retrying network errors and 5xx responses."""
        client = self._get_http_client()
        url = f"{self.base_url}{path}"
        attempts = self.max_retries + 1
        last_error: Optional[LLMError] = None

        for attempt in range(1, attempts + 1):
            logger.debug("%s %s (attempt %d/%d)", method, url, attempt, attempts)
            started = time.monotonic()
            try:
                response = client.request(method, url, **kwargs)
            except httpx.TransportError as exc:
                last_error = LLMNetworkError(
                    f"Could not reach {url}: {exc}",
                    provider=self.provider,
                    model=model,
                    original_error=exc,
                )
            else:
                logger.debug(
                    "%s %s -> %d in %.2fs",
                    method,
                    url,
                    response.status_code,
                    time.monotonic() - started,
                )
                if response.status_code < 400:
                    return self._decode(response, model)
                last_error = LLMServiceError(
                    self._error_message(response),
                    provider=self.provider,
                    model=model,
                    status_code=response.status_code,
                )
                if response.status_code < 500:
                    raise last_error

            if attempt < attempts:
                delay = min(self.retry_base_delay * (2 ** (attempt - 1)), self.retry_max_delay)
                logger.warning("Request to %s failed (%s); retrying in %.1fs", url, last_error, delay)
                self._sleep(delay)

        raise last_error

    def _decode(self, response: httpx.Response, model: str) -> Dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise LLMServiceError(
                f"Server returned invalid JSON: {exc}",
                provider=self.provider,
                model=model,
                status_code=response.status_code,
                original_error=exc,
            ) from exc
        if isinstance(data, dict) and isinstance(data.get("error"), dict):
            raise LLMServiceError(
                data["error"].get("message") or "Unknown error",
                provider=self.provider,
                model=model,
                status_code=response.status_code,
            )
        if not isinstance(data, dict):
            raise LLMServiceError(
                "Server returned a non-object JSON body",
                provider=self.provider,
                model=model,
                status_code=response.status_code,
            )
        return data

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and error.get("message"):
                return error["message"]
            if isinstance(error, str) and error:
                return error
        return f"HTTP {response.status_code}: Unknown error"
