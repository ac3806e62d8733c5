from __future__ import annotations

from pathlib import Path

import pytest

from srcdoc.config import GeneratorConfig
from tests._fixtures.source_tree import SourceTreeBuilder


class RecordingProvider:
    """Test double that records generate calls and returns canned text."""

    def __init__(self, text: str = "# Generated\n") -> None:
        self.text = text
        self.calls: list[tuple[str, str]] = []

    def generate(self, path: str, content: str) -> str:
        self.calls.append((path, content))
        return self.text


@pytest.fixture
def source_tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> SourceTreeBuilder:
    """Provide a project directory and make it the working directory."""
    builder = SourceTreeBuilder(tmp_path)
    monkeypatch.chdir(builder.root)
    return builder


@pytest.fixture
def config(source_tree: SourceTreeBuilder) -> GeneratorConfig:
    return GeneratorConfig(root=source_tree.root.resolve())


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()
