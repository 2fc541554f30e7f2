"""Console rendering for validation reports.

``decorate`` and ``glyph`` are pure functions from an outcome kind to rich
markup, so styling can be tested without a terminal. The ``render_*``
functions print to whichever ``Console`` they are given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from olocus_site.seo.report import RunSummary, ValidationReport
    from olocus_site.seo.rules import RuleSet

OutcomeKind = Literal["pass", "warning", "error", "info", "heading"]

STYLES: dict[str, str] = {
    "pass": "green",
    "warning": "yellow",
    "error": "red",
    "info": "blue",
    "heading": "cyan",
}

GLYPHS: dict[str, str] = {
    "pass": "✓",
    "warning": "⚠",
    "error": "✗",
}


def glyph(kind: OutcomeKind) -> str:
    """Return the marker glyph for an outcome kind (empty for info/heading)."""
    return GLYPHS.get(kind, "")


def decorate(kind: OutcomeKind, text: str, *, bold: bool = False) -> str:
    """Wrap ``text`` in the rich markup for ``kind``.

    The text is escaped, so messages containing ``[...]`` selectors render
    literally.
    """
    style = STYLES[kind]
    if bold:
        style = f"bold {style}"
    return f"[{style}]{escape(text)}[/{style}]"


def status_label(passed: bool) -> str:
    return decorate("pass", "PASSED", bold=True) if passed else decorate("error", "FAILED", bold=True)


def render_banner(file_count: int, console: Console) -> None:
    console.print(decorate("info", "SEO & AI Bot Optimization Validator", bold=True))
    console.print(decorate("info", f"Found {file_count} HTML files to validate"))


def render_file_header(file_name: str, console: Console) -> None:
    console.print()
    console.print(f"{decorate('heading', 'Validating:')} [bold]{escape(file_name)}[/bold]")


def render_report(report: ValidationReport, console: Console) -> None:
    """Print one file's outcomes: pass count, warnings, errors, status."""
    console.rule(style="dim")

    if report.passes:
        console.print(decorate("pass", f"{glyph('pass')} {len(report.passes)} checks passed"))

    if report.warnings:
        console.print()
        console.print(decorate("warning", f"{glyph('warning')} Warnings ({len(report.warnings)}):"))
        for warning in report.warnings:
            console.print(f"  {decorate('warning', glyph('warning'))} {escape(warning)}")

    if report.errors:
        console.print()
        console.print(decorate("error", f"{glyph('error')} Errors ({len(report.errors)}):"))
        for error in report.errors:
            console.print(f"  {decorate('error', glyph('error'))} {escape(error)}")

    console.print()
    console.print(f"[bold]Status:[/bold] {status_label(report.passed)}")


def render_summary(summary: RunSummary, console: Console, rules: RuleSet) -> None:
    """Print the aggregate table, totals and the final verdict."""
    console.print()
    console.rule("[bold]VALIDATION SUMMARY[/bold]", characters="=")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Status", justify="center")
    table.add_column("File", style="cyan")
    for outcome in summary.outcomes:
        kind: OutcomeKind = "pass" if outcome.passed else "error"
        table.add_row(decorate(kind, glyph(kind)), escape(outcome.file_name))
    console.print(table)

    console.rule(style="dim")
    console.print(f"Total: {summary.passed_count} passed, {summary.failed_count} failed")

    console.print()
    if summary.all_passed:
        console.print(decorate("pass", "🎉 All pages meet SEO standards!", bold=True))
    else:
        console.print(decorate("error", "❌ Some pages need attention", bold=True))
        if rules.checklist_path:
            console.print()
            console.print(f"📚 See {escape(rules.checklist_path)} for detailed requirements")
