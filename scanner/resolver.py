"""Path resolution utilities for classifying dependency references."""

import logging
from pathlib import Path
from typing import List

from report.model import Resolution, ResolvedDependency
from .parser import extract_dependencies

logger = logging.getLogger(__name__)


def resolve_dependency(
    reference: str,
    current_dir: Path,
    project_root: Path,
) -> ResolvedDependency:
    """
    Classify a dependency reference by where it exists on disk.

    Tries, in order:
    1. Relative to the directory containing the source file.
    2. Relative to the project root.

    The reference is joined as-is; `..` segments are left to the
    filesystem. Candidates are only checked for existence, never opened.

    Args:
        reference: The reference string extracted from the source file.
        current_dir: Directory containing the source file.
        project_root: The project root directory.

    Returns:
        ResolvedDependency with the matching candidate path, or MISSING.
    """
    local_candidate = current_dir / reference
    if _exists(local_candidate):
        return ResolvedDependency(reference, Resolution.LOCAL, local_candidate)

    global_candidate = project_root / reference
    if _exists(global_candidate):
        return ResolvedDependency(reference, Resolution.GLOBAL, global_candidate)

    return ResolvedDependency(reference, Resolution.MISSING)


def resolve(
    source_file: Path,
    source_content: str,
    current_dir: Path,
    project_root: Path,
) -> List[ResolvedDependency]:
    """
    Extract and classify every dependency declared in a source file.

    Args:
        source_file: The file the content was read from.
        source_content: Text of the source file.
        current_dir: Directory containing the source file.
        project_root: The project root directory.

    Returns:
        One ResolvedDependency per include line, in declaration order.
    """
    results = []
    for reference in extract_dependencies(source_content):
        dep = resolve_dependency(reference, current_dir, project_root)
        logger.debug("%s: %s -> %s", source_file, reference, dep.resolution.value)
        results.append(dep)
    return results


def _exists(path: Path) -> bool:
    """Check existence, treating an unreachable candidate as absent."""
    try:
        return path.exists()
    except OSError:
        return False
