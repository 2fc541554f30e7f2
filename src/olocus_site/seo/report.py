"""Report types produced by the SEO validator."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ValidationReport:
    """Outcomes of every check run against one HTML file.

    Each check outcome is appended to exactly one of the three lists, in
    the order the checks ran.

    Attributes:
        file_name: Basename of the validated file.
        passes: Descriptions of satisfied checks.
        warnings: Advisory findings. These never fail a file.
        errors: Findings that fail the file.
    """

    file_name: str
    passes: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def add_pass(self, message: str) -> None:
        self.passes.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def passed(self) -> bool:
        """True if no check recorded an error."""
        return not self.errors

    @property
    def summary(self) -> str:
        """Human-readable summary of all outcomes."""
        parts: list[str] = []
        if self.errors:
            parts.append(f"{len(self.errors)} errors")
        if self.warnings:
            parts.append(f"{len(self.warnings)} warnings")
        if self.passes:
            parts.append(f"{len(self.passes)} passed")
        return ", ".join(parts)


@dataclass(frozen=True)
class FileOutcome:
    """Pass/fail result for one file in a validation run.

    ``report`` is None when the file could not be read.
    """

    file_name: str
    passed: bool
    report: ValidationReport | None = None


@dataclass
class RunSummary:
    """Aggregate result of validating several files."""

    outcomes: list[FileOutcome] = field(default_factory=list)

    def add(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def passed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.passed)

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if not o.passed)

    @property
    def all_passed(self) -> bool:
        return all(o.passed for o in self.outcomes)

    @property
    def exit_code(self) -> int:
        """Process exit code: 0 when every file passed, 1 otherwise."""
        return 0 if self.all_passed else 1
