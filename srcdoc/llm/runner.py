"""Adapter around the Anthropic Messages API."""

from __future__ import annotations

import http.client
import json
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from ..config import DEFAULT_BASE_URL, DEFAULT_MODEL, ENV_API_KEY, GeneratorConfig
from ..errors import ProviderError

ANTHROPIC_VERSION = "2023-06-01"


@dataclass
class LLMRequest:
    """Represents a single completion request."""

    prompt: str
    model: str
    max_tokens: int
    temperature: Optional[float]
    base_url: str
    api_key: Optional[str]
    request_timeout: Optional[float]


class AnthropicRunner:
    """Sends one prompt to the Messages endpoint and returns the reply text."""

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 4000,
        temperature: Optional[float] = 0.1,
        base_url: str = DEFAULT_BASE_URL,
        request_timeout: Optional[float] = 120.0,
        transport: Callable[[LLMRequest], str] | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.base_url = base_url.rstrip("/")
        self.request_timeout = request_timeout
        self._transport = transport or self._http_transport

    @classmethod
    def from_config(
        cls,
        config: GeneratorConfig,
        *,
        transport: Callable[[LLMRequest], str] | None = None,
    ) -> "AnthropicRunner":
        return cls(
            api_key=config.api_key,
            model=config.model,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            base_url=config.base_url,
            request_timeout=config.request_timeout,
            transport=transport,
        )

    def run(self, prompt: str) -> str:
        """Send the prompt and return the generated text."""
        if not self.api_key:
            raise ProviderError(
                f"{ENV_API_KEY} is not configured. Set the environment variable "
                "or use the interactive mode."
            )
        request = LLMRequest(
            prompt=prompt,
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            base_url=self.base_url,
            api_key=self.api_key,
            request_timeout=self.request_timeout,
        )
        return self._transport(request)

    @staticmethod
    def _http_transport(request: LLMRequest) -> str:
        endpoint = f"{request.base_url}/messages"
        payload: dict[str, object] = {
            "model": request.model,
            "max_tokens": request.max_tokens,
            "messages": [{"role": "user", "content": request.prompt}],
        }
        if request.temperature is not None:
            payload["temperature"] = request.temperature

        data = json.dumps(payload).encode("utf-8")
        headers = {
            "Content-Type": "application/json",
            "x-api-key": request.api_key or "",
            "anthropic-version": ANTHROPIC_VERSION,
        }
        http_request = Request(endpoint, data=data, headers=headers, method="POST")
        timeout = request.request_timeout or 120.0

        try:
            with urlopen(http_request, timeout=timeout) as response:  # type: ignore[arg-type]
                raw = response.read()
        except HTTPError as exc:
            detail = exc.read().decode("utf-8", errors="ignore") if hasattr(exc, "read") else ""
            message = detail.strip() or exc.reason
            raise ProviderError(f"API error: {exc.code} {message}") from exc
        except URLError as exc:
            raise ProviderError(f"API request failed: {exc.reason}") from exc
        except (OSError, http.client.HTTPException) as exc:
            raise ProviderError(f"API request failed: {exc!r}") from exc

        try:
            response_payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ProviderError("API returned invalid JSON") from exc

        content = AnthropicRunner._extract_text(response_payload)
        if not content:
            raise ProviderError("API returned an empty response")
        return content

    @staticmethod
    def _extract_text(payload: object) -> str:
        if not isinstance(payload, dict):
            return ""
        blocks = payload.get("content")
        if not isinstance(blocks, list):
            return ""
        for block in blocks:
            if isinstance(block, dict) and block.get("type", "text") == "text":
                text = block.get("text")
                if isinstance(text, str):
                    return text
        return ""


__all__ = ["AnthropicRunner", "LLMRequest", "ProviderError"]
