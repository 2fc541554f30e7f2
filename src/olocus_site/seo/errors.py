"""Exceptions raised by the SEO validator.

Validation findings are never exceptions; they are recorded on a
``ValidationReport``. These types cover the cases where validation cannot
start at all.
"""

from __future__ import annotations

from pathlib import Path  # noqa: TC003 - used at runtime


class FileReadError(Exception):
    """Raised when an HTML file cannot be read as UTF-8 text.

    Attributes:
        path: The file that could not be read.
        reason: The underlying error message.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading file {path.name}: {reason}")


class RulesConfigError(Exception):
    """Raised when a rules override file cannot be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load rules at {path}: {reason}")
