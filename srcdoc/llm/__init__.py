"""Text-generation runners and documentation providers."""

from .providers import (
    ApiDocumentationProvider,
    DocumentationProvider,
    ManualDocumentationProvider,
    build_provider,
)
from .runner import AnthropicRunner, ProviderError

__all__ = [
    "AnthropicRunner",
    "ApiDocumentationProvider",
    "DocumentationProvider",
    "ManualDocumentationProvider",
    "ProviderError",
    "build_provider",
]
