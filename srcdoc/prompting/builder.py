"""Builds the documentation prompt sent to the text-generation collaborator."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .constants import CLOSING_INSTRUCTION, INSTRUCTIONS


class PromptBuilder:
    """Renders the fixed instructions plus a file's path and raw content."""

    TEMPLATE_NAME = "file_prompt.md.j2"

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        instructions: str = INSTRUCTIONS,
    ) -> None:
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self.instructions = instructions
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            keep_trailing_newline=False,
        )

    def build(self, path: str, content: str) -> str:
        template = self._env.get_template(self.TEMPLATE_NAME)
        return template.render(
            instructions=self.instructions,
            path=path,
            content=content,
            closing=CLOSING_INSTRUCTION,
        )


__all__ = ["PromptBuilder"]
