"""Tests for validation report types."""

from __future__ import annotations

from olocus_site.seo.report import FileOutcome, RunSummary, ValidationReport


class TestValidationReport:
    """Tests for ValidationReport."""

    def test_empty_report_passes(self) -> None:
        report = ValidationReport(file_name="index.html")

        assert report.passed
        assert report.summary == ""

    def test_warnings_never_fail(self) -> None:
        report = ValidationReport(file_name="index.html")
        report.add_warning("Missing skip links for accessibility")
        report.add_warning("Missing WebPage schema")

        assert report.passed

    def test_any_error_fails(self) -> None:
        report = ValidationReport(file_name="index.html")
        report.add_pass("Meta tag: author")
        report.add_error("Missing required meta tag: viewport")

        assert not report.passed

    def test_outcomes_land_in_one_list_in_order(self) -> None:
        report = ValidationReport(file_name="index.html")
        report.add_pass("a")
        report.add_error("b")
        report.add_pass("c")
        report.add_warning("d")

        assert report.passes == ["a", "c"]
        assert report.errors == ["b"]
        assert report.warnings == ["d"]

    def test_summary(self) -> None:
        report = ValidationReport(
            file_name="index.html",
            passes=["p1", "p2"],
            warnings=["w"],
            errors=["e1", "e2", "e3"],
        )

        assert report.summary == "3 errors, 1 warnings, 2 passed"


class TestRunSummary:
    """Tests for RunSummary."""

    def test_empty_run_exits_zero(self) -> None:
        summary = RunSummary()

        assert summary.all_passed
        assert summary.exit_code == 0

    def test_counts_and_exit_code(self) -> None:
        summary = RunSummary()
        summary.add(FileOutcome("index.html", passed=True))
        summary.add(FileOutcome("about.html", passed=False))
        summary.add(FileOutcome("docs.html", passed=True))

        assert summary.passed_count == 2
        assert summary.failed_count == 1
        assert not summary.all_passed
        assert summary.exit_code == 1
        assert [o.file_name for o in summary.outcomes] == ["index.html", "about.html", "docs.html"]
