"""Exceptions raised while loading configuration or scanning a project."""

from pathlib import Path
from typing import Optional


class DetectiveError(Exception):
    """Base class for all errors that abort a scan."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class RootNotFoundError(DetectiveError):
    """The project root does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Project root not found at: {path}", path)


class ScanIOError(DetectiveError):
    """A directory or source file could not be read during a scan."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read '{path}': {reason}", path)


class ConfigParseError(DetectiveError):
    """The project configuration file is malformed or invalid."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid configuration in '{path}': {reason}", path)
