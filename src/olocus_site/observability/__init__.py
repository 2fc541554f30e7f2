"""Observability module for olocus-site.

Provides structured logging on top of structlog and rich.
"""

from olocus_site.observability.logging import (
    close_file_logging,
    configure_logging,
    get_logger,
)

__all__ = [
    "close_file_logging",
    "configure_logging",
    "get_logger",
]
