"""Test CLI commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from unittest.mock import patch

from typer.testing import CliRunner

from olocus_site import __version__
from olocus_site.cli import app
from olocus_site.docs_sync import CloneError, SyncResult
from tests.fixtures.pages import make_page

if TYPE_CHECKING:
    from pathlib import Path

    import pytest

runner = CliRunner()


def test_version_command() -> None:
    """Test olocus-site version command."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert f"v{__version__}" in result.stdout


def test_no_args_shows_help() -> None:
    """Test that no arguments shows help."""
    result = runner.invoke(app, [])
    assert result.exit_code == 2
    assert "validate" in result.stdout


# --- Validate Command Tests ---


def test_validate_cwd_all_pass(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without paths, validate the working directory like the node script."""
    (tmp_path / "index.html").write_text(make_page(), encoding="utf-8")
    (tmp_path / "templates").mkdir()
    (tmp_path / "templates" / "post.html").write_text(make_page(), encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["validate"])

    assert result.exit_code == 0
    assert "Found 2 HTML files to validate" in result.stdout
    assert "Validating: index.html" in result.stdout
    assert "Validating: post.html" in result.stdout
    assert "Total: 2 passed, 0 failed" in result.stdout
    assert "All pages meet SEO standards!" in result.stdout


def test_validate_failure_exit_code(tmp_path: Path) -> None:
    page = tmp_path / "index.html"
    page.write_text(make_page(drop=("meta:viewport",)), encoding="utf-8")

    result = runner.invoke(app, ["validate", str(page)])

    assert result.exit_code == 1
    assert "Missing required meta tag: viewport" in result.stdout
    assert "Status: FAILED" in result.stdout
    assert "SEO-CHECKLIST.md" in result.stdout


def test_validate_warnings_only_passes(tmp_path: Path) -> None:
    page = tmp_path / "index.html"
    page.write_text(make_page(description="d" * 200), encoding="utf-8")

    result = runner.invoke(app, ["validate", str(page)])

    assert result.exit_code == 0
    assert "Warnings (1):" in result.stdout


def test_validate_with_rules_file(tmp_path: Path) -> None:
    page = tmp_path / "index.html"
    page.write_text(make_page(drop=("canonical",)), encoding="utf-8")
    rules = tmp_path / "rules.yaml"
    rules.write_text("missing_canonical_severity: error\n", encoding="utf-8")

    default_run = runner.invoke(app, ["validate", str(page)])
    strict_run = runner.invoke(app, ["validate", str(page), "--rules", str(rules)])

    assert default_run.exit_code == 0
    assert strict_run.exit_code == 1


def test_validate_bad_rules_file(tmp_path: Path) -> None:
    rules = tmp_path / "rules.yaml"
    rules.write_text(json.dumps({"nonsense": True}), encoding="utf-8")

    result = runner.invoke(app, ["validate", str(tmp_path), "--rules", str(rules)])

    assert result.exit_code == 1
    assert "Error:" in result.stdout
    assert "Validating" not in result.stdout


def test_validate_writes_log_file(tmp_path: Path) -> None:
    page = tmp_path / "index.html"
    page.write_text(make_page(), encoding="utf-8")
    log_file = tmp_path / "logs" / "debug.jsonl"

    result = runner.invoke(app, ["--log", str(log_file), "validate", str(page)])

    assert result.exit_code == 0
    events = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert any(e["message"] == "validated_file" and e["file"] == "index.html" for e in events)


# --- Sync Docs Command Tests ---


def test_sync_docs_from_checkout(tmp_path: Path) -> None:
    checkout = tmp_path / "protocol"
    checkout.mkdir()
    (checkout / "README.md").write_text("# Olocus\nIntro\n", encoding="utf-8")
    docs_dir = tmp_path / "docs"

    result = runner.invoke(
        app, ["sync-docs", "--docs-dir", str(docs_dir), "--checkout", str(checkout)]
    )

    assert result.exit_code == 0
    assert (docs_dir / "intro.md").is_file()
    assert "Source file not found: docs/API.md" in result.stdout
    assert "Documentation sync completed: 1 synced, 3 generated" in result.stdout


def test_sync_docs_uses_repo_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OLOCUS_PROTOCOL_REPO", "https://example.org/fork.git")

    with patch("olocus_site.cli.sync_docs", return_value=SyncResult()) as sync:
        result = runner.invoke(app, ["sync-docs", "--docs-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert sync.call_args.kwargs["repo_url"] == "https://example.org/fork.git"


def test_sync_docs_clone_failure(tmp_path: Path) -> None:
    error = CloneError("https://example.org/x.git", "fatal: not found")

    with patch("olocus_site.cli.sync_docs", side_effect=error):
        result = runner.invoke(app, ["sync-docs", "--docs-dir", str(tmp_path)])

    assert result.exit_code == 1
    assert "Failed to clone" in result.stdout


def test_sync_docs_unreadable_source(tmp_path: Path) -> None:
    checkout = tmp_path / "protocol"
    checkout.mkdir()
    (checkout / "README.md").write_bytes(b"# Olocus\n\xff\n")

    result = runner.invoke(
        app, ["sync-docs", "--docs-dir", str(tmp_path / "docs"), "--checkout", str(checkout)]
    )

    assert result.exit_code == 1
    assert "Failed to read" in result.stdout
