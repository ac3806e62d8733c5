"""Tests for the documentation providers."""

from __future__ import annotations

import io

import pytest

from srcdoc.config import GeneratorConfig
from srcdoc.errors import ProviderError
from srcdoc.llm.providers import (
    ApiDocumentationProvider,
    ManualDocumentationProvider,
    build_provider,
)
from srcdoc.llm.runner import AnthropicRunner


class StubProvider:
    def __init__(self, text: str) -> None:
        self.text = text
        self.calls: list[tuple[str, str]] = []

    def generate(self, path: str, content: str) -> str:
        self.calls.append((path, content))
        return self.text


def test_api_provider_sends_rendered_prompt() -> None:
    prompts: list[str] = []

    def transport(request):
        prompts.append(request.prompt)
        return "docs"

    provider = ApiDocumentationProvider(AnthropicRunner(api_key="key", transport=transport))

    assert provider.generate("src/lib/db.ts", "export const db = 1;") == "docs"
    assert "**File:** src/lib/db.ts" in prompts[0]
    assert "export const db = 1;" in prompts[0]


def test_manual_provider_collects_lines_until_end_marker() -> None:
    stdin = io.StringIO("# Card\n\nRenders a card.\n  END  \nignored\n")
    stdout = io.StringIO()
    provider = ManualDocumentationProvider(stdin=stdin, stdout=stdout)

    result = provider.generate("src/components/Card.tsx", "export const Card = 1;")

    assert result == "# Card\n\nRenders a card.\n"
    shown = stdout.getvalue()
    assert "=" * 80 in shown
    assert "**File:** src/components/Card.tsx" in shown


def test_manual_provider_stops_at_end_of_stream() -> None:
    stdin = io.StringIO("partial reply")
    provider = ManualDocumentationProvider(stdin=stdin, stdout=io.StringIO())

    assert provider.generate("a.ts", "") == "partial reply\n"


def test_manual_provider_rejects_empty_capture() -> None:
    provider = ManualDocumentationProvider(stdin=io.StringIO("END\n"), stdout=io.StringIO())

    with pytest.raises(ProviderError, match="No documentation"):
        provider.generate("a.ts", "")


def test_manual_provider_falls_back_when_capture_fails() -> None:
    fallback = StubProvider("from api")
    provider = ManualDocumentationProvider(
        stdin=io.StringIO(""),
        stdout=io.StringIO(),
        fallback=fallback,
    )

    assert provider.generate("a.ts", "content") == "from api"
    assert fallback.calls == [("a.ts", "content")]


def test_build_provider_selects_by_configuration(tmp_path) -> None:
    api = build_provider(GeneratorConfig(root=tmp_path, use_api=True, api_key="key"))
    manual = build_provider(GeneratorConfig(root=tmp_path))
    manual_with_key = build_provider(GeneratorConfig(root=tmp_path, api_key="key"))

    assert isinstance(api, ApiDocumentationProvider)
    assert isinstance(manual, ManualDocumentationProvider)
    assert manual.fallback is None
    assert isinstance(manual_with_key, ManualDocumentationProvider)
    assert isinstance(manual_with_key.fallback, ApiDocumentationProvider)
