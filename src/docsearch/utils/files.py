"""Utility helpers for walking a document corpus."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterator, Optional

LOGGER = logging.getLogger(__name__)

ErrorHandler = Callable[[Path, OSError], None]


def _log_walk_error(path: Path, exc: OSError) -> None:
    LOGGER.warning("Skipping directory %s: %s", path, exc)


def _list_dir(path: Path) -> list[Path]:
    with os.scandir(path) as entries:
        return sorted(Path(entry.path) for entry in entries)


def iter_files(root: Path, *, on_error: Optional[ErrorHandler] = None) -> Iterator[Path]:
    """Yield regular files under ``root`` depth-first, in name order.

    Listing ``root`` itself raises ``OSError``. Subdirectories that cannot be
    listed are reported to ``on_error`` and skipped.
    """
    handler = on_error or _log_walk_error
    yield from _walk(Path(root), handler, is_root=True)


def _walk(directory: Path, on_error: ErrorHandler, *, is_root: bool) -> Iterator[Path]:
    try:
        children = _list_dir(directory)
    except OSError as exc:
        if is_root:
            raise
        on_error(directory, exc)
        return

    for child in children:
        if child.is_dir() and not child.is_symlink():
            yield from _walk(child, on_error, is_root=False)
        elif child.is_file():
            yield child
