"""Post-processing of generated documentation."""

from .index import IndexBuilder

__all__ = ["IndexBuilder"]
