"""Report data model for dependency scan results."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Tuple


class Resolution(Enum):
    """Where a dependency reference was found, if anywhere."""

    LOCAL = "local"
    GLOBAL = "global"
    MISSING = "missing"

    @property
    def is_resolved(self) -> bool:
        return self is not Resolution.MISSING


@dataclass(frozen=True)
class ResolvedDependency:
    """A single dependency reference and its classification."""

    reference: str
    resolution: Resolution
    path: Optional[Path] = None


@dataclass
class SourceReport:
    """Dependencies declared by one source file, in declaration order."""

    source_file: Path
    current_dir: Path
    dependencies: List[ResolvedDependency] = field(default_factory=list)

    @property
    def references(self) -> List[str]:
        """Extracted reference strings, duplicates included."""
        return [dep.reference for dep in self.dependencies]

    @property
    def missing(self) -> List[str]:
        return [dep.reference for dep in self.dependencies if not dep.resolution.is_resolved]

    def count(self, resolution: Resolution) -> int:
        return sum(1 for dep in self.dependencies if dep.resolution is resolution)


class ScanReport:
    """
    Results of scanning a whole project.

    Source reports are kept in traversal order. Counts are computed on
    demand so the report can be built incrementally while scanning.
    """

    def __init__(self, root: Path, targets: Tuple[str, ...]):
        self.root = root
        self.targets = targets
        self._sources: List[SourceReport] = []

    @property
    def sources(self) -> List[SourceReport]:
        """Return all source reports."""
        return list(self._sources)

    @property
    def resolved_local(self) -> int:
        return self._count(Resolution.LOCAL)

    @property
    def resolved_global(self) -> int:
        return self._count(Resolution.GLOBAL)

    @property
    def missing(self) -> int:
        return self._count(Resolution.MISSING)

    def add(self, source_report: SourceReport) -> None:
        """Append the report for one source file."""
        self._sources.append(source_report)

    def has_missing(self) -> bool:
        """Check if any dependency in the project is missing."""
        return self.missing > 0

    def _count(self, resolution: Resolution) -> int:
        return sum(source.count(resolution) for source in self._sources)

    def __iter__(self) -> Iterator[SourceReport]:
        return iter(self._sources)

    def __len__(self) -> int:
        """Return the number of source files scanned."""
        return len(self._sources)

    def __repr__(self) -> str:
        return (
            f"ScanReport(sources={len(self._sources)}, local={self.resolved_local}, "
            f"global={self.resolved_global}, missing={self.missing})"
        )
