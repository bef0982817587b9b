"""Scanner module for source discovery and dependency resolution."""

from .discovery import iter_source_files, normalize_targets, DEFAULT_TARGETS
from .parser import extract_dependencies, read_source
from .resolver import resolve, resolve_dependency
from .builder import scan, build_report, check_root
from .errors import DetectiveError, RootNotFoundError, ScanIOError, ConfigParseError

__all__ = [
    "iter_source_files",
    "normalize_targets",
    "DEFAULT_TARGETS",
    "extract_dependencies",
    "read_source",
    "resolve",
    "resolve_dependency",
    "scan",
    "build_report",
    "check_root",
    "DetectiveError",
    "RootNotFoundError",
    "ScanIOError",
    "ConfigParseError",
]
