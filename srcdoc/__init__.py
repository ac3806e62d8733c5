"""Generate per-file markdown documentation for a source tree with an LLM."""

__version__ = "0.1.0"

__all__ = ["__version__"]
