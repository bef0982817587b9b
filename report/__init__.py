"""Report types produced by a dependency scan."""

from .model import Resolution, ResolvedDependency, SourceReport, ScanReport

__all__ = ["Resolution", "ResolvedDependency", "SourceReport", "ScanReport"]
