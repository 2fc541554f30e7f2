"""Protocol documentation sync for the Docusaurus site."""

from olocus_site.docs_sync.mappings import FILE_MAPPINGS, DocMapping, front_matter
from olocus_site.docs_sync.sync import (
    DEFAULT_DOCS_DIR,
    DEFAULT_PROTOCOL_REPO,
    CloneError,
    DocsSyncError,
    SourceReadError,
    SyncResult,
    sync_docs,
    sync_file,
)

__all__ = [
    "DEFAULT_DOCS_DIR",
    "DEFAULT_PROTOCOL_REPO",
    "FILE_MAPPINGS",
    "CloneError",
    "DocMapping",
    "DocsSyncError",
    "SourceReadError",
    "SyncResult",
    "front_matter",
    "sync_docs",
    "sync_file",
]
