"""Sync protocol documentation into the Docusaurus docs tree.

The protocol repository is shallow-cloned into a temporary directory (or an
existing checkout is used), each mapped Markdown file is transformed and
written under the docs directory, and the generated pages are added.
"""

from __future__ import annotations

import subprocess
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from olocus_site.docs_sync.mappings import FILE_MAPPINGS, DocMapping
from olocus_site.docs_sync.pages import GENERATED_PAGES
from olocus_site.observability.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

log = get_logger(__name__)

DEFAULT_PROTOCOL_REPO = "https://codeberg.org/olocus/protocol.git"
DEFAULT_DOCS_DIR = Path("docs-setup/docs")


class DocsSyncError(Exception):
    """Base error for a documentation sync that cannot complete."""


class CloneError(DocsSyncError):
    """Raised when the protocol repository cannot be fetched."""

    def __init__(self, repo_url: str, reason: str) -> None:
        self.repo_url = repo_url
        self.reason = reason
        super().__init__(f"Failed to clone {repo_url}: {reason}")


class SourceReadError(DocsSyncError):
    """Raised when a mapped source file exists but cannot be read as UTF-8."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to read {source}: {reason}")


@dataclass
class SyncResult:
    """What a sync run wrote.

    Attributes:
        written: Target paths written from protocol sources.
        missing: Source paths that did not exist in the checkout.
        generated: Target paths of generated pages.
    """

    written: list[Path] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    generated: list[Path] = field(default_factory=list)


def sync_file(source: Path, target: Path, transform: Callable[[str], str]) -> Path:
    """Transform one Markdown file and write it, creating parent directories.

    Args:
        source: Markdown file to read.
        target: Destination path.
        transform: Content transform (front matter and decoration).

    Returns:
        The target path.

    Raises:
        SourceReadError: If the source cannot be read or is not UTF-8.
    """
    try:
        content = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.error("source_read_failed", source=str(source), reason=str(e))
        raise SourceReadError(str(source), str(e)) from e
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(transform(content), encoding="utf-8")
    return target


def write_generated_pages(docs_dir: Path) -> list[Path]:
    written: list[Path] = []
    for relative, content in GENERATED_PAGES.items():
        target = docs_dir / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        written.append(target)
    return written


def clone_repository(repo_url: str, destination: Path) -> None:
    """Shallow-clone ``repo_url`` into ``destination``.

    Raises:
        CloneError: If git is unavailable or the clone fails.
    """
    log.info("cloning_protocol_repo", repo=repo_url, destination=str(destination))
    try:
        subprocess.run(
            ["git", "clone", "--depth=1", repo_url, str(destination)],
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise CloneError(repo_url, "git executable not found") from e
    except subprocess.CalledProcessError as e:
        reason = (e.stderr or "").strip() or f"git exited with status {e.returncode}"
        raise CloneError(repo_url, reason) from e


def apply_mappings(
    checkout: Path,
    docs_dir: Path,
    mappings: Iterable[DocMapping] = FILE_MAPPINGS,
) -> SyncResult:
    """Copy every mapped file present in ``checkout`` into ``docs_dir``.

    Raises:
        SourceReadError: If a mapped source cannot be read or is not UTF-8.
    """
    result = SyncResult()
    docs_dir.mkdir(parents=True, exist_ok=True)
    for mapping in mappings:
        source = checkout / mapping.source
        if not source.is_file():
            log.warning("source_file_not_found", source=mapping.source)
            result.missing.append(mapping.source)
            continue
        log.info("processing_doc", source=mapping.source, target=mapping.target)
        result.written.append(sync_file(source, docs_dir / mapping.target, mapping.apply))
    return result


def sync_docs(
    docs_dir: Path = DEFAULT_DOCS_DIR,
    *,
    repo_url: str = DEFAULT_PROTOCOL_REPO,
    checkout: Path | None = None,
) -> SyncResult:
    """Sync protocol documentation into ``docs_dir``.

    Args:
        docs_dir: Docusaurus docs directory to write into.
        repo_url: Repository to clone when no checkout is given.
        checkout: Existing local checkout to read from instead of cloning.

    Returns:
        SyncResult listing written, missing and generated files.

    Raises:
        CloneError: If the repository cannot be cloned.
        SourceReadError: If a mapped source file cannot be read.
    """
    if checkout is not None:
        result = apply_mappings(checkout, docs_dir)
    else:
        with tempfile.TemporaryDirectory(prefix="olocus-protocol-sync-") as tmp:
            clone_dir = Path(tmp) / "protocol"
            clone_repository(repo_url, clone_dir)
            result = apply_mappings(clone_dir, docs_dir)

    result.generated = write_generated_pages(docs_dir)
    log.info(
        "docs_sync_completed",
        written=len(result.written),
        missing=len(result.missing),
        generated=len(result.generated),
    )
    return result
