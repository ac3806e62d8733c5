"""Recursive discovery of source files to document."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List

from .config import DEFAULT_EXCLUDED_DIRS, DEFAULT_EXTENSIONS

_HIDDEN_PREFIX = "."


def _iter_files(root: Path, excluded_dirs: frozenset[str]) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            name
            for name in dirnames
            if not name.startswith(_HIDDEN_PREFIX) and name not in excluded_dirs
        )
        current_dir = Path(dirpath)
        for filename in sorted(filenames):
            if filename.startswith(_HIDDEN_PREFIX):
                continue
            yield current_dir / filename


def find_files_to_document(
    directory: Path | str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    excluded_dirs: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> List[Path]:
    """Return files under ``directory`` whose extension is in ``extensions``.

    Hidden entries are skipped and the excluded dependency directories are not entered.
    """
    root = Path(directory).expanduser()
    if not root.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    allowed = frozenset(extensions)
    return [
        path
        for path in _iter_files(root, frozenset(excluded_dirs))
        if path.suffix in allowed
    ]


__all__ = ["find_files_to_document"]
