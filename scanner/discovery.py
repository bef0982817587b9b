"""File discovery utilities for locating source files in a project."""

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

from .errors import ScanIOError

logger = logging.getLogger(__name__)


DEFAULT_TARGETS: Tuple[str, ...] = ("main.c",)


def normalize_targets(targets: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """
    Turn a configured filename collection into a non-empty target set.

    Order is preserved and duplicates are dropped. An empty or missing
    collection falls back to DEFAULT_TARGETS.
    """
    if targets is None:
        return DEFAULT_TARGETS
    names: Tuple[str, ...] = tuple(dict.fromkeys(targets))
    return names or DEFAULT_TARGETS


def is_hidden(path: Path) -> bool:
    """Check if a path's base name follows the hidden-entry convention."""
    return path.name.startswith(".")


def iter_source_files(
    root: Path,
    current_dir: Path,
    targets: Tuple[str, ...],
) -> Iterator[Path]:
    """
    Iterate over source files below a directory.

    Args:
        root: Project root. Not used for matching; carried through the
              recursion so every level sees the same anchor.
        current_dir: Directory to enumerate.
        targets: Base names that mark a file as a source file.

    Yields:
        Paths of regular files whose name is in targets, depth-first with
        entries of each directory sorted by name.

    Raises:
        ScanIOError: If any directory cannot be listed or an entry's type
                     cannot be determined.
    """
    logger.debug("Scanning directory %s", current_dir)

    try:
        with os.scandir(current_dir) as it:
            entries = sorted(_classify(entry) for entry in it)
    except OSError as e:
        raise ScanIOError(current_dir, e.strerror or str(e)) from e

    for path, is_dir, is_file in entries:
        if is_dir:
            if is_hidden(path):
                logger.debug("Skipping hidden directory %s", path)
                continue
            yield from iter_source_files(root, path, targets)
        elif is_file:
            if path.name in targets:
                logger.debug("Matched source file %s", path)
                yield path


def _classify(entry: os.DirEntry) -> Tuple[Path, bool, bool]:
    """Return (path, is_dir, is_file) for a directory entry, following symlinks."""
    path = Path(entry.path)
    try:
        return path, entry.is_dir(), entry.is_file()
    except OSError as e:
        raise ScanIOError(path, e.strerror or str(e)) from e
