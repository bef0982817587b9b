"""JSON exporter for scan reports (machine-friendly format)."""

import json
from pathlib import Path
from typing import Dict, List, Any

from report.model import ScanReport


def to_json(
    report: ScanReport,
    indent: int = 2,
) -> str:
    """
    Convert a scan report to JSON format.

    Args:
        report: The scan report to export.
        indent: JSON indentation level.

    Returns:
        JSON string with a "sources" list and a "summary" object.
    """
    sources: List[Dict[str, Any]] = []
    for source in report:
        dependencies: List[Dict[str, Any]] = []
        for dep in source.dependencies:
            entry: Dict[str, Any] = {
                "reference": dep.reference,
                "status": dep.resolution.value,
            }
            if dep.path is not None:
                entry["path"] = _get_path_str(dep.path, report.root)
            dependencies.append(entry)

        sources.append({
            "file": _get_path_str(source.source_file, report.root),
            "dependencies": dependencies,
        })

    data: Dict[str, Any] = {
        "root": str(report.root),
        "targets": list(report.targets),
        "sources": sources,
        "summary": {
            "files": len(report),
            "local": report.resolved_local,
            "global": report.resolved_global,
            "missing": report.missing,
        },
    }

    return json.dumps(data, indent=indent)


def _get_path_str(path: Path, root: Path) -> str:
    """Get the string representation of a path."""
    try:
        rel_path = path.resolve().relative_to(root.resolve())
        return str(rel_path).replace("\\", "/")
    except ValueError:
        return str(path).replace("\\", "/")
