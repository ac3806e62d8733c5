"""Console rendering of a generation run."""

from __future__ import annotations

from typing import List

from .models import RunReport


def render_report(report: RunReport, *, force: bool = False, docs_dir: str = "docs") -> List[str]:
    """Return the printable summary lines for ``report``."""
    generated = report.generated
    skipped = report.skipped
    failed = report.failed

    lines = ["", "Generation report:", f"Generated: {len(generated)}"]
    if skipped:
        lines.append(f"Skipped (already documented): {len(skipped)}")
    if failed:
        lines.append(f"Failed: {len(failed)}")
        lines.extend(f"   - {result.source}: {result.error}" for result in failed)

    grouped = report.by_category()
    if grouped:
        lines.append("")
        lines.append("Documentation by category:")
        for category, names in grouped.items():
            noun = "file" if len(names) == 1 else "files"
            lines.append(f"   {docs_dir}/{category}/ ({len(names)} {noun})")
            lines.extend(f"      - {name}" for name in names)

    if skipped and not force:
        lines.append("")
        lines.append("Tip: use --force to regenerate existing documentation")
    return lines


__all__ = ["render_report"]
