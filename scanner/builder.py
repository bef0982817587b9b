"""Scan orchestration: traversal, source reading and dependency resolution."""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from report.model import ScanReport, SourceReport
from .discovery import iter_source_files, normalize_targets
from .errors import RootNotFoundError, ScanIOError
from .parser import read_source
from .resolver import resolve

logger = logging.getLogger(__name__)


def check_root(root: Path) -> None:
    """
    Make sure the project root exists before anything else is read.

    Raises:
        RootNotFoundError: If root does not exist.
        ScanIOError: If the existence of root cannot be determined.
    """
    try:
        exists = root.exists()
    except OSError as e:
        raise ScanIOError(root, e.strerror or str(e)) from e
    if not exists:
        raise RootNotFoundError(root)


def scan(
    root: Path,
    targets: Optional[Iterable[str]] = None,
    current_dir: Optional[Path] = None,
) -> Iterator[SourceReport]:
    """
    Scan a project and yield one report per source file.

    Args:
        root: Project root, the anchor for global resolution.
        targets: Filenames that count as source files. Empty or None
                 means the built-in default.
        current_dir: Directory to start from (default: root).

    Yields:
        SourceReport for each source file, in traversal order.

    Raises:
        RootNotFoundError: If root does not exist. Raised on the first
                           iteration, before any directory is listed.
        ScanIOError: If a directory or source file cannot be read.
    """
    check_root(root)

    target_set = normalize_targets(targets)
    if current_dir is None:
        current_dir = root

    for source_file in iter_source_files(root, current_dir, target_set):
        source_dir = source_file.parent
        content = read_source(source_file)
        yield SourceReport(
            source_file=source_file,
            current_dir=source_dir,
            dependencies=resolve(source_file, content, source_dir, root),
        )


def build_report(
    root: Path,
    targets: Optional[Iterable[str]] = None,
) -> ScanReport:
    """
    Scan a project and collect every source report.

    The whole scan either completes or raises; no partial report is
    returned.

    Args:
        root: Project root directory.
        targets: Filenames that count as source files.

    Returns:
        ScanReport for the project.
    """
    report = ScanReport(root, normalize_targets(targets))

    for source_report in scan(root, report.targets):
        report.add(source_report)

    logger.debug("Scan complete: %r", report)
    return report
