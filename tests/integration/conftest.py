"""Integration test fixtures: small sites written to disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixtures.pages import make_page


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A site root with three compliant pages and one that fails."""
    for name in ("index.html", "about.html"):
        (tmp_path / name).write_text(make_page(), encoding="utf-8")
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "docs.html").write_text(make_page(), encoding="utf-8")
    (templates / "_partial.html").write_text("<div>partial</div>", encoding="utf-8")
    (tmp_path / "broken.html").write_text(
        make_page(drop=("canonical", "meta:viewport")), encoding="utf-8"
    )
    return tmp_path
