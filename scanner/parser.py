"""Parsers for extracting dependency references from source files."""

import logging
from pathlib import Path
from typing import List

from .errors import ScanIOError

logger = logging.getLogger(__name__)


INCLUDE_MARKER = "#include"


def read_source(file_path: Path) -> str:
    """
    Read a source file's content.

    Undecodable bytes are replaced rather than rejected; only a failure to
    read the file at all is an error.

    Raises:
        ScanIOError: If the file cannot be read.
    """
    try:
        with open(file_path, encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as e:
        raise ScanIOError(file_path, e.strerror or str(e)) from e


def is_include_line(line: str) -> bool:
    """Check if a line declares a dependency."""
    return line.lstrip().startswith(INCLUDE_MARKER)


def extract_dependencies(content: str) -> List[str]:
    """
    Extract dependency references from source content.

    Every line starting with the include marker yields exactly one
    reference, in line order, duplicates included.

    Args:
        content: Full text of a source file.

    Returns:
        List of reference strings.
    """
    return [
        _clean_reference(line)
        for line in content.splitlines()
        if is_include_line(line)
    ]


def _clean_reference(line: str) -> str:
    """
    Turn an include line into the reference it names.

    Only one layer of double quotes is removed. Angle brackets are left in
    place, so `#include <stdio.h>` yields `<stdio.h>`.
    """
    reference = line.lstrip()[len(INCLUDE_MARKER):].strip()

    if reference.startswith('"'):
        reference = reference[1:]
    if reference.endswith('"'):
        reference = reference[:-1]

    return reference
