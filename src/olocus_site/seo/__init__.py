"""SEO, accessibility and structured-data validation for static HTML pages.

Public entry points:
- validate_file: check one page and return its ValidationReport
- validate_directory: discover pages under a site root and check each one
- validate_paths: check an explicit list of files and directories
"""

from olocus_site.seo.checks import CHECKS, collect_schema_types, run_all_checks
from olocus_site.seo.document import PageDocument
from olocus_site.seo.errors import FileReadError, RulesConfigError
from olocus_site.seo.report import FileOutcome, RunSummary, ValidationReport
from olocus_site.seo.rules import RuleSet, load_rules
from olocus_site.seo.validator import (
    discover_html_files,
    validate_directory,
    validate_file,
    validate_paths,
)

__all__ = [
    "CHECKS",
    "FileOutcome",
    "FileReadError",
    "PageDocument",
    "RuleSet",
    "RulesConfigError",
    "RunSummary",
    "ValidationReport",
    "collect_schema_types",
    "discover_html_files",
    "load_rules",
    "run_all_checks",
    "validate_directory",
    "validate_file",
    "validate_paths",
]
