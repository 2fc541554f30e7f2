"""File discovery and per-file validation.

Files are processed one at a time: read, parse, check, print. A file that
cannot be read is recorded as failed and the run moves on to the next one.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from olocus_site.observability.logging import get_logger
from olocus_site.seo.checks import run_all_checks
from olocus_site.seo.document import PageDocument
from olocus_site.seo.errors import FileReadError
from olocus_site.seo.formatting import (
    decorate,
    render_banner,
    render_file_header,
    render_report,
)
from olocus_site.seo.report import FileOutcome, RunSummary, ValidationReport
from olocus_site.seo.rules import RuleSet

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rich.console import Console

log = get_logger(__name__)


def discover_html_files(root: Path, rules: RuleSet | None = None) -> list[Path]:
    """List the pages to validate under ``root``.

    Takes ``*.html`` directly under ``root`` and under its templates
    subdirectory when present. Neither directory is searched recursively,
    and names starting with ``_`` (partials) are skipped.

    Args:
        root: Site root directory.
        rules: Rule set supplying the templates directory name.

    Returns:
        Paths sorted by name within each directory, root files first.
    """
    rules = rules if rules is not None else RuleSet()
    directories = [root]
    templates = root / rules.templates_dir
    if rules.templates_dir and templates.is_dir():
        directories.append(templates)

    found: list[Path] = []
    for directory in directories:
        found.extend(
            path
            for path in sorted(directory.glob("*.html"))
            if path.is_file() and not path.name.startswith("_")
        )
    return found


def read_page(path: Path) -> str:
    """Read an HTML file as UTF-8.

    Raises:
        FileReadError: If the file is missing, unreadable or not UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, str(e)) from e


def validate_file(
    path: Path,
    *,
    rules: RuleSet | None = None,
    console: Console | None = None,
) -> ValidationReport:
    """Validate one HTML file.

    The file is only read. When ``console`` is given, the formatted report
    is printed to it before returning.

    Args:
        path: HTML file to check.
        rules: Rule set; defaults to ``RuleSet()``.
        console: Optional console for the human-readable report.

    Returns:
        The populated report.

    Raises:
        FileReadError: If the file cannot be read.
    """
    rules = rules if rules is not None else RuleSet()
    if console is not None:
        render_file_header(path.name, console)

    page = PageDocument.parse(read_page(path))
    report = run_all_checks(page, path.name, rules)

    log.debug(
        "validated_file",
        file=path.name,
        errors=len(report.errors),
        warnings=len(report.warnings),
        passes=len(report.passes),
    )
    if console is not None:
        render_report(report, console)
    return report


def _validate_each(
    files: Iterable[Path],
    rules: RuleSet,
    console: Console | None,
) -> RunSummary:
    summary = RunSummary()
    for path in files:
        try:
            report = validate_file(path, rules=rules, console=console)
        except FileReadError as e:
            log.error("file_read_failed", file=path.name, reason=e.reason)
            if console is not None:
                console.print(decorate("error", str(e)))
            summary.add(FileOutcome(file_name=path.name, passed=False))
            continue
        summary.add(FileOutcome(file_name=path.name, passed=report.passed, report=report))
    return summary


def validate_directory(
    root: Path,
    *,
    rules: RuleSet | None = None,
    console: Console | None = None,
) -> RunSummary:
    """Validate every page discovered under ``root``.

    Never raises for file-level problems; unreadable files are counted as
    failed.
    """
    rules = rules if rules is not None else RuleSet()
    files = discover_html_files(root, rules)
    log.info("discovered_html_files", root=str(root), count=len(files))
    if console is not None:
        render_banner(len(files), console)
    return _validate_each(files, rules, console)


def validate_paths(
    paths: Iterable[Path],
    *,
    rules: RuleSet | None = None,
    console: Console | None = None,
) -> RunSummary:
    """Validate an explicit list of files and directories.

    Directories are expanded with ``discover_html_files``; files are taken
    as given, in order.
    """
    rules = rules if rules is not None else RuleSet()
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(discover_html_files(path, rules))
        else:
            files.append(path)
    if console is not None:
        render_banner(len(files), console)
    return _validate_each(files, rules, console)
