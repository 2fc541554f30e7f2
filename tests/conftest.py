"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from olocus_site.seo import PageDocument, RuleSet, ValidationReport, run_all_checks
from tests.fixtures.pages import make_page


@pytest.fixture
def rules() -> RuleSet:
    """Return the default rule set."""
    return RuleSet()


@pytest.fixture
def check_page(rules: RuleSet) -> Callable[[str], ValidationReport]:
    """Return a function that runs every check on raw markup."""

    def _check(markup: str) -> ValidationReport:
        return run_all_checks(PageDocument.parse(markup), "page.html", rules)

    return _check


@pytest.fixture
def write_page(tmp_path: Path) -> Callable[..., Path]:
    """Return a function that writes a page under tmp_path and returns its path."""

    def _write(name: str, markup: str | None = None, **page_kwargs: object) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(markup if markup is not None else make_page(**page_kwargs), encoding="utf-8")
        return path

    return _write
