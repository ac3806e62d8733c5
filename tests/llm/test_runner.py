"""Tests for the Anthropic Messages runner."""

from __future__ import annotations

import http.client
import io
import json
from urllib.error import HTTPError, URLError

import pytest

from srcdoc.config import GeneratorConfig
from srcdoc.errors import ProviderError
from srcdoc.llm.runner import AnthropicRunner


class FakeResponse:
    def __init__(self, body: bytes) -> None:
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


def test_runner_constructs_request_from_config(tmp_path) -> None:
    captured = {}

    def fake_transport(request):
        captured["prompt"] = request.prompt
        captured["model"] = request.model
        captured["max_tokens"] = request.max_tokens
        captured["temperature"] = request.temperature
        captured["base_url"] = request.base_url
        captured["api_key"] = request.api_key
        captured["request_timeout"] = request.request_timeout
        return "response"

    config = GeneratorConfig(
        root=tmp_path,
        api_key="sk-test",
        model="claude-test",
        max_tokens=256,
        temperature=0.2,
        base_url="http://localhost:9999/v1",
        request_timeout=30.0,
    )
    runner = AnthropicRunner.from_config(config, transport=fake_transport)

    assert runner.run("Document this") == "response"
    assert captured == {
        "prompt": "Document this",
        "model": "claude-test",
        "max_tokens": 256,
        "temperature": 0.2,
        "base_url": "http://localhost:9999/v1",
        "api_key": "sk-test",
        "request_timeout": 30.0,
    }


def test_runner_requires_api_key() -> None:
    runner = AnthropicRunner(api_key=None, transport=lambda request: "unused")

    with pytest.raises(ProviderError, match="ANTHROPIC_API_KEY"):
        runner.run("prompt")


def test_http_transport_posts_messages_payload(monkeypatch) -> None:
    captured = {}

    def fake_urlopen(request, timeout=None):
        captured["url"] = request.full_url
        captured["headers"] = {k.lower(): v for k, v in request.header_items()}
        captured["payload"] = json.loads(request.data.decode("utf-8"))
        captured["timeout"] = timeout
        body = {"content": [{"type": "text", "text": "## Summary\nRenders a card."}]}
        return FakeResponse(json.dumps(body).encode("utf-8"))

    monkeypatch.setattr("srcdoc.llm.runner.urlopen", fake_urlopen)

    runner = AnthropicRunner(
        api_key="sk-live",
        model="claude-3-5-sonnet-20241022",
        max_tokens=4000,
        temperature=0.1,
        base_url="https://api.anthropic.com/v1/",
        request_timeout=45.0,
    )
    result = runner.run("Describe Card.tsx")

    assert result == "## Summary\nRenders a card."
    assert captured["url"] == "https://api.anthropic.com/v1/messages"
    headers = captured["headers"]
    assert headers["content-type"] == "application/json"
    assert headers["x-api-key"] == "sk-live"
    assert headers["anthropic-version"] == "2023-06-01"
    assert captured["payload"] == {
        "model": "claude-3-5-sonnet-20241022",
        "max_tokens": 4000,
        "temperature": 0.1,
        "messages": [{"role": "user", "content": "Describe Card.tsx"}],
    }
    assert captured["timeout"] == 45.0


def test_http_error_status_becomes_provider_error(monkeypatch) -> None:
    def fake_urlopen(request, timeout=None):
        raise HTTPError(
            request.full_url,
            401,
            "Unauthorized",
            hdrs=None,
            fp=io.BytesIO(b'{"error": "invalid x-api-key"}'),
        )

    monkeypatch.setattr("srcdoc.llm.runner.urlopen", fake_urlopen)

    with pytest.raises(ProviderError, match="401"):
        AnthropicRunner(api_key="bad").run("prompt")


def test_transport_failure_becomes_provider_error(monkeypatch) -> None:
    def fake_urlopen(request, timeout=None):
        raise URLError("connection refused")

    monkeypatch.setattr("srcdoc.llm.runner.urlopen", fake_urlopen)

    with pytest.raises(ProviderError, match="connection refused"):
        AnthropicRunner(api_key="key").run("prompt")


@pytest.mark.parametrize(
    "body",
    [b"not json", json.dumps({"content": []}).encode("utf-8")],
)
def test_invalid_or_empty_reply_becomes_provider_error(monkeypatch, body) -> None:
    monkeypatch.setattr(
        "srcdoc.llm.runner.urlopen",
        lambda request, timeout=None: FakeResponse(body),
    )

    with pytest.raises(ProviderError):
        AnthropicRunner(api_key="key").run("prompt")


class RaisingResponse(FakeResponse):
    def __init__(self, error: BaseException) -> None:
        super().__init__(b"")
        self._error = error

    def read(self) -> bytes:
        raise self._error


@pytest.mark.parametrize(
    "error",
    [
        TimeoutError("The read operation timed out"),
        ConnectionResetError("connection reset by peer"),
        http.client.RemoteDisconnected("Remote end closed connection"),
        http.client.IncompleteRead(b"partial"),
    ],
)
def test_read_failures_become_provider_error(monkeypatch, error) -> None:
    monkeypatch.setattr(
        "srcdoc.llm.runner.urlopen",
        lambda request, timeout=None: RaisingResponse(error),
    )

    with pytest.raises(ProviderError) as excinfo:
        AnthropicRunner(api_key="key").run("prompt")
    assert excinfo.value.__cause__ is error


def test_undecodable_reply_becomes_provider_error(monkeypatch) -> None:
    monkeypatch.setattr(
        "srcdoc.llm.runner.urlopen",
        lambda request, timeout=None: FakeResponse(b"\xff\xfe\xfa"),
    )

    with pytest.raises(ProviderError, match="invalid JSON"):
        AnthropicRunner(api_key="key").run("prompt")
