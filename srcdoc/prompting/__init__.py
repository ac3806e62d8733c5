"""Prompt construction for per-file documentation requests."""

from .builder import PromptBuilder
from .constants import DOCUMENTATION_SECTIONS, INSTRUCTIONS

__all__ = ["DOCUMENTATION_SECTIONS", "INSTRUCTIONS", "PromptBuilder"]
