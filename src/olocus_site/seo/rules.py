"""Validation rule set and rules-file loading.

The defaults reproduce the site's SEO checklist. A YAML file can override
any field, for example::

    site_origin: https://staging.olocus.com/
    meta_max_lengths:
      description: 160
"""

from __future__ import annotations

from pathlib import Path  # noqa: TC003 - used at runtime
from typing import Annotated, Literal

from pydantic import BaseModel, Field, StringConstraints, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from olocus_site.seo.errors import RulesConfigError

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

DEFAULT_META_TAGS = ["description", "keywords", "author", "robots", "viewport"]
DEFAULT_DESCRIPTION_MAX_LENGTH = 155
DEFAULT_OG_TAGS = [
    "og:type",
    "og:url",
    "og:title",
    "og:description",
    "og:image",
    "og:site_name",
]
DEFAULT_TWITTER_TAGS = [
    "twitter:card",
    "twitter:url",
    "twitter:title",
    "twitter:description",
    "twitter:image",
]
DEFAULT_SCHEMA_TYPES = ["Organization", "WebSite", "WebPage"]
DEFAULT_SITE_ORIGIN = "https://olocus.com/"
DEFAULT_CHECKLIST_PATH = "docs/SEO-CHECKLIST.md"


class RuleSet(BaseModel):
    """Thresholds and required-tag sets used by the checks."""

    required_meta_tags: list[NonEmptyStr] = Field(
        default_factory=lambda: list(DEFAULT_META_TAGS),
        description="<meta name> values that must be present with content",
    )
    meta_max_lengths: dict[str, int] = Field(
        default_factory=lambda: {"description": DEFAULT_DESCRIPTION_MAX_LENGTH},
        description="Recommended maximum content length per meta name",
    )
    required_og_tags: list[NonEmptyStr] = Field(default_factory=lambda: list(DEFAULT_OG_TAGS))
    required_twitter_tags: list[NonEmptyStr] = Field(
        default_factory=lambda: list(DEFAULT_TWITTER_TAGS)
    )
    required_schema_types: list[NonEmptyStr] = Field(
        default_factory=lambda: list(DEFAULT_SCHEMA_TYPES),
        description="schema.org @type values expected in each JSON-LD block",
    )
    site_origin: NonEmptyStr = Field(
        default=DEFAULT_SITE_ORIGIN, description="Prefix every canonical URL must start with"
    )
    skip_link_class: NonEmptyStr = "skip-link"
    missing_canonical_severity: Literal["error", "warning"] = "warning"
    checklist_path: str = DEFAULT_CHECKLIST_PATH
    templates_dir: str = "templates"

    model_config = {"extra": "forbid"}


def load_rules(path: Path) -> RuleSet:
    """Load a rule set from a YAML file, falling back to defaults per field.

    Args:
        path: Path to the YAML rules file.

    Returns:
        RuleSet with the file's overrides applied.

    Raises:
        RulesConfigError: If the file is missing, unparsable or invalid.
    """
    if not path.exists():
        raise RulesConfigError(path, "File not found")

    yaml = YAML(typ="safe")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.load(f)
    except (OSError, YAMLError) as e:
        raise RulesConfigError(path, str(e)) from e

    if data is None:
        return RuleSet()
    if not isinstance(data, dict):
        raise RulesConfigError(path, "Top level must be a mapping")

    try:
        return RuleSet.model_validate(data)
    except ValidationError as e:
        raise RulesConfigError(path, str(e)) from e
