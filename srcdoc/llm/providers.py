"""Documentation providers: direct API calls or interactive capture."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from ..config import GeneratorConfig
from ..logging import get_logger
from ..prompting import PromptBuilder
from .runner import AnthropicRunner, ProviderError

END_MARKER = "END"
_RULER = "=" * 80

logger = get_logger("llm")


class DocumentationProvider(Protocol):
    """Produces documentation text for one source file or raises ProviderError."""

    def generate(self, path: str, content: str) -> str:
        ...


class ApiDocumentationProvider:
    """Requests documentation from the Anthropic API."""

    def __init__(
        self,
        runner: AnthropicRunner,
        prompt_builder: PromptBuilder | None = None,
    ) -> None:
        self.runner = runner
        self.prompt_builder = prompt_builder or PromptBuilder()

    def generate(self, path: str, content: str) -> str:
        logger.info("Calling the API for %s", path)
        prompt = self.prompt_builder.build(path, content)
        return self.runner.run(prompt)


class ManualDocumentationProvider:
    """Shows the prompt and captures a pasted reply terminated by ``END``.

    When capture fails and a fallback provider is set, the fallback is used
    instead.
    """

    def __init__(
        self,
        prompt_builder: PromptBuilder | None = None,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        fallback: DocumentationProvider | None = None,
    ) -> None:
        self.prompt_builder = prompt_builder or PromptBuilder()
        self._stdin = stdin
        self._stdout = stdout
        self.fallback = fallback

    def generate(self, path: str, content: str) -> str:
        try:
            return self._capture(self.prompt_builder.build(path, content))
        except ProviderError as exc:
            if self.fallback is None:
                raise
            logger.warning("Interactive capture failed (%s); falling back to the API", exc)
            return self.fallback.generate(path, content)

    def _capture(self, prompt: str) -> str:
        stdin = self._stdin or sys.stdin
        stdout = self._stdout or sys.stdout

        print("Copy the following prompt into your assistant:", file=stdout)
        print(_RULER, file=stdout)
        print(prompt, file=stdout)
        print(_RULER, file=stdout)
        print(
            f"\nPaste the reply below, then type {END_MARKER} on its own line to finish:",
            file=stdout,
        )
        stdout.flush()

        lines: list[str] = []
        for line in stdin:
            line = line.rstrip("\r\n")
            if line.strip() == END_MARKER:
                break
            lines.append(line)

        if not any(line.strip() for line in lines):
            raise ProviderError("No documentation was captured")
        return "".join(f"{line}\n" for line in lines)


def build_provider(
    config: GeneratorConfig,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> DocumentationProvider:
    """Select the provider implementation for this run."""
    prompt_builder = PromptBuilder()
    api_provider = ApiDocumentationProvider(AnthropicRunner.from_config(config), prompt_builder)
    if config.use_api:
        return api_provider
    return ManualDocumentationProvider(
        prompt_builder,
        stdin=stdin,
        stdout=stdout,
        fallback=api_provider if config.api_key else None,
    )


__all__ = [
    "ApiDocumentationProvider",
    "DocumentationProvider",
    "ManualDocumentationProvider",
    "build_provider",
]
