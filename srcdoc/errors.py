"""Per-file failures raised while documenting a source file."""

from __future__ import annotations


class DocumentationError(Exception):
    """Base class for failures that are recorded per file instead of aborting a batch."""


class SourceNotFoundError(DocumentationError, FileNotFoundError):
    """The input path does not exist."""


class ProviderError(DocumentationError, RuntimeError):
    """The text-generation collaborator failed to produce documentation."""


class OutputWriteError(DocumentationError, OSError):
    """Creating the output directory or reading/writing a file failed."""


__all__ = ["DocumentationError", "OutputWriteError", "ProviderError", "SourceNotFoundError"]
