"""Tests for the shared diagnostics report."""

from __future__ import annotations

from shapemap.renderer import SpecBuildReport, format_spec_lines
from shapemap.reports import Report, format_limited_list
from shapemap.validate import ValidationReport, format_report_lines


def test_report_lines_order_and_ok_marker():
    report = Report()
    report.add_warning("two aliases")
    report.add_info("loaded")
    assert report.ok
    assert report.lines("done") == ["[INFO] loaded", "[WARN] two aliases", "[OK] done"]

    report.add_error("broken")
    assert not report.ok
    assert report.lines("done")[-1] == "[ERROR] broken"


def test_spec_and_validation_reports_share_the_base():
    spec_report = SpecBuildReport()
    spec_report.add_error("Shape map rendering failed")
    assert isinstance(spec_report, Report)
    assert spec_report.spec is None and spec_report.summary == {}
    assert format_spec_lines(spec_report) == ["[ERROR] Shape map rendering failed"]

    validation = ValidationReport()
    validation.add_info("Loaded 2 country names")
    assert list(format_report_lines(validation)) == [
        "[INFO] Loaded 2 country names",
        "[OK] Validation completed with no errors.",
    ]


def test_format_limited_list_truncates():
    values = [str(i) for i in range(15)]
    assert format_limited_list(values[:3]) == "0, 1, 2"
    assert format_limited_list(values, limit=2) == "0, 1, ... (+13 more)"
