"""Tests for report data model."""

import pytest
from pathlib import Path

from report.model import Resolution, ResolvedDependency, SourceReport, ScanReport


def _source(name: str, *deps) -> SourceReport:
    path = Path("/repo") / name
    return SourceReport(
        source_file=path,
        current_dir=path.parent,
        dependencies=[ResolvedDependency(ref, res) for ref, res in deps],
    )


class TestResolution:
    """Tests for the Resolution enum."""

    def test_is_resolved(self):
        """Test which classifications count as found."""
        assert Resolution.LOCAL.is_resolved
        assert Resolution.GLOBAL.is_resolved
        assert not Resolution.MISSING.is_resolved


class TestSourceReport:
    """Tests for SourceReport class."""

    def test_references_keep_duplicates(self):
        """Test that references are reported in order with duplicates."""
        source = _source(
            "main.c",
            ("a.h", Resolution.LOCAL),
            ("b.h", Resolution.MISSING),
            ("a.h", Resolution.LOCAL),
        )

        assert source.references == ["a.h", "b.h", "a.h"]
        assert source.missing == ["b.h"]
        assert source.count(Resolution.LOCAL) == 2

    def test_empty(self):
        """Test a source file with no includes."""
        source = _source("main.c")

        assert source.references == []
        assert source.missing == []


class TestScanReport:
    """Tests for ScanReport class."""

    def test_empty_report(self):
        """Test empty report initialization."""
        report = ScanReport(Path("/repo"), ("main.c",))

        assert len(report) == 0
        assert report.sources == []
        assert report.missing == 0
        assert not report.has_missing()

    def test_counts(self):
        """Test aggregated counts across source files."""
        report = ScanReport(Path("/repo"), ("main.c",))
        report.add(_source("main.c", ("a.h", Resolution.LOCAL), ("b.h", Resolution.GLOBAL)))
        report.add(_source("lib/main.c", ("c.h", Resolution.MISSING), ("d.h", Resolution.LOCAL)))

        assert len(report) == 2
        assert report.resolved_local == 2
        assert report.resolved_global == 1
        assert report.missing == 1
        assert report.has_missing()

    def test_iteration_order(self):
        """Test that iterating yields source reports in the order added."""
        report = ScanReport(Path("/repo"), ("main.c",))
        report.add(_source("main.c", ("a.h", Resolution.LOCAL)))
        report.add(_source("lib/main.c", ("b.h", Resolution.MISSING)))

        assert [source.source_file for source in report] == [
            Path("/repo/main.c"),
            Path("/repo/lib/main.c"),
        ]

    def test_sources_property_returns_copy(self):
        """Test that the sources property returns a copy."""
        report = ScanReport(Path("/repo"), ("main.c",))
        report.add(_source("main.c"))

        sources = report.sources
        sources.append(_source("other.c"))

        assert len(report) == 1

    def test_repr(self):
        """Test string representation."""
        report = ScanReport(Path("/repo"), ("main.c",))
        report.add(_source("main.c", ("a.h", Resolution.MISSING)))

        assert "sources=1" in repr(report)
        assert "missing=1" in repr(report)

    def test_dependency_is_immutable(self):
        """Test that resolved dependencies cannot be modified."""
        dep = ResolvedDependency("a.h", Resolution.LOCAL, Path("/repo/a.h"))

        with pytest.raises(AttributeError):
            dep.reference = "b.h"
