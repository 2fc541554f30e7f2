"""olocus-site CLI - typer application entry point."""

from __future__ import annotations

import atexit
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from olocus_site.docs_sync import DEFAULT_DOCS_DIR, DEFAULT_PROTOCOL_REPO, DocsSyncError, sync_docs
from olocus_site.observability import close_file_logging, configure_logging, get_logger
from olocus_site.seo import (
    RuleSet,
    RulesConfigError,
    load_rules,
    validate_directory,
    validate_paths,
)
from olocus_site.seo.formatting import render_summary

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="olocus-site",
    help="Olocus website tooling: SEO validation and protocol docs sync.",
    no_args_is_help=True,
)
console = Console()
log = get_logger(__name__)


@app.callback()
def main(
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity: -v for INFO, -vv for DEBUG.",
        ),
    ] = 0,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log",
            help="Also write every log event to this JSONL file.",
        ),
    ] = None,
) -> None:
    """Olocus website tooling: SEO validation and protocol docs sync."""
    configure_logging(verbosity=verbose, log_file=log_file)
    if log_file is not None:
        atexit.register(close_file_logging)


@app.command()
def version() -> None:
    """Show version information."""
    from olocus_site import __version__

    console.print(f"olocus-site v{__version__}")


@app.command()
def validate(
    paths: Annotated[
        list[Path] | None,
        typer.Argument(
            help="HTML files or site directories (default: current directory and templates/).",
        ),
    ] = None,
    rules_file: Annotated[
        Path | None,
        typer.Option(
            "--rules",
            "-r",
            help="YAML file overriding the default rule set.",
        ),
    ] = None,
) -> None:
    """Check HTML pages for SEO, accessibility and structured-data requirements.

    Exits with status 0 when every page passes and 1 when any page has
    errors. Warnings never fail a page.
    """
    rules = RuleSet()
    if rules_file is not None:
        try:
            rules = load_rules(rules_file)
        except RulesConfigError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
            raise typer.Exit(1) from None

    if paths:
        summary = validate_paths(paths, rules=rules, console=console)
    else:
        summary = validate_directory(Path.cwd(), rules=rules, console=console)

    render_summary(summary, console, rules)
    log.info(
        "validation_finished",
        passed=summary.passed_count,
        failed=summary.failed_count,
    )
    raise typer.Exit(summary.exit_code)


@app.command("sync-docs")
def sync_docs_command(
    docs_dir: Annotated[
        Path,
        typer.Option(
            "--docs-dir",
            "-o",
            help="Docusaurus docs directory to write into.",
        ),
    ] = DEFAULT_DOCS_DIR,
    repo: Annotated[
        str,
        typer.Option(
            "--repo",
            help="Protocol repository to clone.",
            envvar="OLOCUS_PROTOCOL_REPO",
        ),
    ] = DEFAULT_PROTOCOL_REPO,
    checkout: Annotated[
        Path | None,
        typer.Option(
            "--checkout",
            help="Use an existing local checkout instead of cloning.",
        ),
    ] = None,
) -> None:
    """Sync protocol documentation into the Docusaurus docs tree."""
    console.print("🔄 Starting documentation sync...")
    try:
        result = sync_docs(docs_dir, repo_url=repo, checkout=checkout)
    except DocsSyncError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1) from None

    for target in result.written:
        console.print(f"  [green]✓[/green] {target}")
    for source in result.missing:
        console.print(f"  [yellow]⚠[/yellow] Source file not found: {source}")
    console.print(
        f"[green]✓[/green] Documentation sync completed: "
        f"{len(result.written)} synced, {len(result.generated)} generated"
    )


if __name__ == "__main__":
    app()
