"""Per-file documentation generation and batch aggregation."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from .classifier import DEFAULT_RULES, classify_path
from .config import GeneratorConfig
from .errors import DocumentationError, OutputWriteError, SourceNotFoundError
from .llm.providers import DocumentationProvider
from .logging import get_logger
from .models import ClassificationRule, FileJob, ResultStatus, RunReport, RunResult
from .postproc.index import IndexBuilder


class Orchestrator:
    """Documents source files one at a time and rebuilds the index afterwards."""

    def __init__(
        self,
        config: GeneratorConfig,
        provider: DocumentationProvider,
        *,
        rules: Sequence[ClassificationRule] = DEFAULT_RULES,
        index_builder: IndexBuilder | None = None,
    ) -> None:
        self.config = config
        self.provider = provider
        self.rules = tuple(rules)
        self.index_builder = index_builder or IndexBuilder()
        self.logger = get_logger("orchestrator")

    def plan(self, path: str | Path) -> FileJob:
        """Resolve category and output path for ``path``; the result depends only on the path."""
        source = Path(path)
        category = classify_path(self._relative(source), self.rules)
        basename = str(path).replace("\\", "/").rsplit("/", 1)[-1]
        output_path = self.config.docs_root / category / f"{Path(basename).stem}.md"
        return FileJob(
            source=source,
            category=category,
            output_path=output_path,
            exists=output_path.exists(),
        )

    def document_file(self, path: str | Path, *, force: bool = False) -> RunResult:
        """Generate documentation for one file, recording failures instead of raising."""
        try:
            return self._document(path, force=force)
        except DocumentationError as exc:
            self.logger.error("Failed to document %s: %s", path, exc)
            return RunResult(source=str(path), status=ResultStatus.FAILED, error=str(exc))

    def document_files(self, paths: Iterable[str | Path], *, force: bool = False) -> RunReport:
        """Document every path in order; one failure never stops the batch."""
        report = RunReport()
        for path in paths:
            report.results.append(self.document_file(path, force=force))
        return report

    def run(self, paths: Iterable[str | Path], *, force: bool = False) -> RunReport:
        """Document ``paths`` and rebuild the index when anything was generated or skipped."""
        report = self.document_files(paths, force=force)
        if report.should_rebuild_index:
            self.logger.info("Rebuilding documentation index")
            self.index_builder.rebuild(self.config.docs_root)
        return report

    def _document(self, path: str | Path, *, force: bool) -> RunResult:
        source = Path(path)
        if not source.exists():
            raise SourceNotFoundError(f"File not found: {path}")

        job = self.plan(path)
        display_path = self._display(job.output_path)
        output_dir = job.output_path.parent
        if not output_dir.exists():
            try:
                output_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise OutputWriteError(f"Cannot create directory {output_dir}: {exc}") from exc
            self.logger.info("Created directory %s", self._display(output_dir))

        if not force and job.exists:
            self.logger.info("Documentation already exists (skipped): %s -> %s", path, display_path)
            return RunResult(
                source=str(path),
                status=ResultStatus.SKIPPED,
                category=job.category,
                output_path=job.output_path,
            )

        self.logger.info("Generating documentation for %s -> %s", path, display_path)
        try:
            content = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise OutputWriteError(f"Cannot read {path}: {exc}") from exc

        documentation = self.provider.generate(str(path), content)

        try:
            job.output_path.write_text(documentation, encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(f"Cannot write {job.output_path}: {exc}") from exc
        self.logger.info("Documentation generated: %s", display_path)

        return RunResult(
            source=str(path),
            status=ResultStatus.GENERATED,
            category=job.category,
            output_path=job.output_path,
        )

    def _relative(self, path: Path) -> Path:
        if not path.is_absolute():
            return path
        try:
            return path.relative_to(self.config.root)
        except ValueError:
            return path

    def _display(self, path: Path) -> str:
        try:
            return path.relative_to(self.config.root).as_posix()
        except ValueError:
            return str(path)


__all__ = ["Orchestrator"]
