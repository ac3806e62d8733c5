"""Core data models shared across srcdoc components."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional


@dataclass(frozen=True)
class ClassificationRule:
    """Maps a normalized path pattern to a documentation category."""

    pattern: re.Pattern[str]
    category: str

    def matches(self, normalized_path: str) -> bool:
        return self.pattern.search(normalized_path) is not None


@dataclass(frozen=True)
class FileJob:
    """Per-file unit of work with its resolved category and output path."""

    source: Path
    category: str
    output_path: Path
    exists: bool


class ResultStatus(str, Enum):
    GENERATED = "generated"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class RunResult:
    """Outcome of documenting a single source file."""

    source: str
    status: ResultStatus
    category: Optional[str] = None
    output_path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.status is not ResultStatus.FAILED

    @property
    def skipped(self) -> bool:
        return self.status is ResultStatus.SKIPPED


@dataclass
class RunReport:
    """Ordered results of a batch run plus the summaries derived from them."""

    results: List[RunResult] = field(default_factory=list)

    @property
    def generated(self) -> List[RunResult]:
        return [result for result in self.results if result.success and not result.skipped]

    @property
    def skipped(self) -> List[RunResult]:
        return [result for result in self.results if result.success and result.skipped]

    @property
    def failed(self) -> List[RunResult]:
        return [result for result in self.results if not result.success]

    def by_category(self) -> Dict[str, List[str]]:
        """Group basenames of generated files by category, in first-seen order."""
        grouped: Dict[str, List[str]] = {}
        for result in self.generated:
            category = result.category or "general"
            grouped.setdefault(category, []).append(Path(result.source).name)
        return grouped

    @property
    def should_rebuild_index(self) -> bool:
        return bool(self.generated or self.skipped)


__all__ = ["ClassificationRule", "FileJob", "ResultStatus", "RunReport", "RunResult"]
