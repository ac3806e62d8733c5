"""Maps source file paths to documentation categories."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence, Tuple

from .models import ClassificationRule

GENERAL_CATEGORY = "general"

# Parent directory names that never become a category on their own.
_RESERVED_PARENTS = frozenset({"src", "app"})

_SEGMENT_CATEGORIES = (
    "components",
    "api",
    "hooks",
    "utils",
    "types",
    "lib",
    "services",
    "middleware",
    "pages",
)

_APP_ROUTE_FILES = (
    ("page", "pages"),
    ("layout", "layouts"),
    ("loading", "loading"),
    ("error|not-found", "error"),
)


def _segment_rule(name: str) -> ClassificationRule:
    return ClassificationRule(re.compile(rf"(?:^|/){re.escape(name)}/"), name)


def _app_route_rule(stem: str, category: str) -> ClassificationRule:
    return ClassificationRule(
        re.compile(rf"(?:^|/)app/(?:.*/)?(?:{stem})\.tsx?$"),
        category,
    )


DEFAULT_RULES: Tuple[ClassificationRule, ...] = tuple(
    [_segment_rule(name) for name in _SEGMENT_CATEGORIES]
    + [_app_route_rule(stem, category) for stem, category in _APP_ROUTE_FILES]
)


def normalize_path(path: str | Path) -> str:
    """Lowercase the path and collapse separators to single forward slashes."""
    text = str(path).replace("\\", "/").lower()
    parts = text.split("/")
    kept = [
        part
        for index, part in enumerate(parts)
        if part not in ("", ".") or (index == 0 and part == "")
    ]
    return "/".join(kept)


def classify_path(
    path: str | Path,
    rules: Sequence[ClassificationRule] = DEFAULT_RULES,
) -> str:
    """Return the documentation category for ``path``.

    Rules are tried in order and the first match wins. Without a match the
    immediate parent directory name is used, unless it is a generic root name
    (``src``/``app``) or there is no parent, in which case the file lands in
    ``general``.
    """
    normalized = normalize_path(path)
    for rule in rules:
        if rule.matches(normalized):
            return rule.category
    return _parent_fallback(normalized)


def _parent_fallback(normalized: str) -> str:
    parts = normalized.split("/")
    if len(parts) < 2:
        return GENERAL_CATEGORY
    parent = parts[-2]
    if not parent or parent == ".." or parent in _RESERVED_PARENTS:
        return GENERAL_CATEGORY
    return parent


__all__ = ["DEFAULT_RULES", "GENERAL_CATEGORY", "classify_path", "normalize_path"]
