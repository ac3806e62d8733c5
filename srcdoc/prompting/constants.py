"""Shared constants for documentation prompting."""

from __future__ import annotations

DOCUMENTATION_SECTIONS: tuple[tuple[str, str], ...] = (
    ("Summary", "What this code does, in one sentence"),
    ("Features", "The main capabilities it provides"),
    ("Parameters", "Detailed inputs and outputs"),
    ("Usage examples", "Concrete examples of how to use it"),
    ("Dependencies", "Links with other modules"),
    ("Technical notes", "Caveats, pitfalls and optimisation opportunities"),
)

INSTRUCTIONS = (
    "You are an expert in code documentation. For every file or function I give you:\n"
    "\n"
    "## Analyse and produce:\n"
    + "".join(
        f"{index}. **{title}**: {description}\n"
        for index, (title, description) in enumerate(DOCUMENTATION_SECTIONS, start=1)
    )
    + "\n"
    "## Output format:\n"
    "- Markdown suitable for a module README\n"
    "- Doc comments for the functions\n"
    "- Mermaid diagrams for complex flows\n"
    "\n"
    "## Tone:\n"
    "Professional but approachable, with practical examples.\n"
    "\n"
    "Here is the file to document:"
)

CLOSING_INSTRUCTION = "Generate the complete documentation for this file."


__all__ = ["CLOSING_INSTRUCTION", "DOCUMENTATION_SECTIONS", "INSTRUCTIONS"]
