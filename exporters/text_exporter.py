"""Console exporter for scan reports."""

from pathlib import Path
from typing import List

from report.model import Resolution, ScanReport, SourceReport


# ANSI styles
GREEN = "\033[32m"
RED_BOLD = "\033[1;31m"
RESET = "\033[0m"

STATUS_LABELS = {
    Resolution.LOCAL: "Exists (local)",
    Resolution.GLOBAL: "Exists (global)",
    Resolution.MISSING: "Missing dependency",
}


def to_text(
    report: ScanReport,
    color: bool = True,
) -> str:
    """
    Convert a scan report to human-readable console text.

    Args:
        report: The scan report to export.
        color: If True, style resolved references green and missing ones bold red.

    Returns:
        Text with one block per source file followed by a summary line.
    """
    lines: List[str] = []

    for source in report:
        _render_source(source, report.root, color, lines)
        lines.append("")

    lines.append(_summary(report))

    return "\n".join(lines)


def _render_source(
    source: SourceReport,
    root: Path,
    color: bool,
    lines: List[str],
) -> None:
    """Append the block for one source file to lines."""
    lines.append(_get_display_path(source.source_file, root))

    if not source.dependencies:
        lines.append("No dependencies found.")
        return

    lines.append("Found the following dependencies to check:")
    for reference in source.references:
        lines.append(f"  - {reference}")

    for dep in source.dependencies:
        label = STATUS_LABELS[dep.resolution]
        lines.append(f"{label}: {_style(dep.reference, dep.resolution, color)}")


def _style(text: str, resolution: Resolution, color: bool) -> str:
    if not color:
        return text
    style = GREEN if resolution.is_resolved else RED_BOLD
    return f"{style}{text}{RESET}"


def _summary(report: ScanReport) -> str:
    total = report.resolved_local + report.resolved_global + report.missing
    files = "file" if len(report) == 1 else "files"
    return (
        f"Checked {total} dependencies in {len(report)} source {files}: "
        f"{report.resolved_local} local, {report.resolved_global} global, "
        f"{report.missing} missing"
    )


def _get_display_path(node: Path, root: Path) -> str:
    """Get the display path for a source file, relative to root when possible."""
    try:
        rel_path = node.resolve().relative_to(root.resolve())
        return str(rel_path).replace("\\", "/")
    except ValueError:
        return str(node).replace("\\", "/")
