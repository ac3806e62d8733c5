"""Rebuilds the documentation index (docs/README.md) from the files on disk."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import Callable, List, Tuple

from ..logging import get_logger

INDEX_FILENAME = "README.md"
MARKDOWN_SUFFIX = ".md"
DEFAULT_EMOJI = "📁"

CATEGORY_EMOJIS: dict[str, str] = {
    "components": "🧩",
    "api": "🔌",
    "hooks": "🎣",
    "utils": "🛠️",
    "types": "📝",
    "pages": "📄",
    "layouts": "🏗️",
    "services": "⚙️",
    "lib": "📚",
    "middleware": "🔀",
    "general": "📋",
}


def _utc_now() -> datetime:
    return datetime.now(UTC)


class IndexBuilder:
    """Renders one section per non-empty category followed by run statistics."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or _utc_now
        self.logger = get_logger("index")

    def rebuild(self, docs_root: Path) -> Path | None:
        """Overwrite ``docs_root/README.md``; return its path, or None without a docs root."""
        if not docs_root.is_dir():
            return None
        index_path = docs_root / INDEX_FILENAME
        index_path.write_text(self.render(docs_root), encoding="utf-8")
        self.logger.info("Index generated: %s", index_path)
        return index_path

    def render(self, docs_root: Path) -> str:
        categories = self._collect(docs_root)
        lines: List[str] = [
            "# 📚 Documentation Index",
            "",
            "*Generated automatically by srcdoc*",
            "",
        ]
        for category, files in categories:
            emoji = CATEGORY_EMOJIS.get(category, DEFAULT_EMOJI)
            lines.append(f"## {emoji} {_capitalize(category)}")
            lines.append("")
            for filename in files:
                lines.append(f"- [{Path(filename).stem}]({category}/{filename})")
            lines.append("")

        total_files = sum(len(files) for _, files in categories)
        timestamp = self._clock().strftime("%Y-%m-%d %H:%M:%S UTC")
        lines.extend(
            [
                "---",
                "",
                "📊 **Statistics**",
                f"- **{total_files}** documented files",
                f"- **{len(categories)}** categories",
                f"- Last updated: {timestamp}",
                "",
                "🔧 **Generated with**",
                "- Tool: `srcdoc`",
            ]
        )
        return "\n".join(lines) + "\n"

    @staticmethod
    def _collect(docs_root: Path) -> List[Tuple[str, List[str]]]:
        categories: List[Tuple[str, List[str]]] = []
        for entry in sorted(docs_root.iterdir(), key=lambda item: item.name):
            if not entry.is_dir():
                continue
            files = sorted(
                child.name
                for child in entry.iterdir()
                if child.is_file() and child.name.endswith(MARKDOWN_SUFFIX)
            )
            if files:
                categories.append((entry.name, files))
        return categories


def _capitalize(category: str) -> str:
    return category[:1].upper() + category[1:]


__all__ = ["CATEGORY_EMOJIS", "IndexBuilder"]
