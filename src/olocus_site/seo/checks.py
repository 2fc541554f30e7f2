"""SEO, accessibility and structured-data checks.

Each check is a pure function that inspects a ``PageDocument`` and appends
its outcomes to a ``ValidationReport``. Checks do not read each other's
outcomes, so removing one tag from a page only changes the outcomes that
concern that tag.

Check order (fixed, see ``CHECKS``):
1. Required meta tags
2. Open Graph tags
3. Twitter Card tags
4. Structural elements
5. Accessibility
6. Structured data validity
7. Heading hierarchy
8. Canonical URL format
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from olocus_site.seo.document import PageDocument
from olocus_site.seo.report import ValidationReport
from olocus_site.seo.rules import RuleSet

Check = Callable[[PageDocument, ValidationReport, RuleSet], None]

__all__ = [
    "CHECKS",
    "Check",
    "check_accessibility",
    "check_canonical_url",
    "check_heading_hierarchy",
    "check_meta_tags",
    "check_open_graph_tags",
    "check_structural_elements",
    "check_structured_data",
    "check_twitter_tags",
    "collect_schema_types",
    "parse_json_ld",
    "run_all_checks",
]


def check_meta_tags(page: PageDocument, report: ValidationReport, rules: RuleSet) -> None:
    """Require ``<meta name=X content=...>`` for every configured name."""
    for name in rules.required_meta_tags:
        content = page.meta_content(name=name)
        if content is None:
            report.add_error(f"Missing required meta tag: {name}")
            continue
        max_length = rules.meta_max_lengths.get(name)
        if max_length is not None and len(content) > max_length:
            report.add_warning(f"Meta {name} exceeds {max_length} characters ({len(content)})")
        else:
            report.add_pass(f"Meta tag: {name}")


def check_open_graph_tags(page: PageDocument, report: ValidationReport, rules: RuleSet) -> None:
    for tag in rules.required_og_tags:
        if page.meta_content(prop=tag) is None:
            report.add_error(f"Missing Open Graph tag: {tag}")
        else:
            report.add_pass(f"OG tag: {tag}")


def check_twitter_tags(page: PageDocument, report: ValidationReport, rules: RuleSet) -> None:
    for tag in rules.required_twitter_tags:
        if page.meta_content(name=tag) is None:
            report.add_error(f"Missing Twitter Card tag: {tag}")
        else:
            report.add_pass(f"Twitter tag: {tag}")


def check_structural_elements(page: PageDocument, report: ValidationReport, rules: RuleSet) -> None:
    """Presence checks for the landmarks every page needs.

    Only presence is checked here. H1 multiplicity belongs to
    ``check_heading_hierarchy`` and canonical format to
    ``check_canonical_url``.
    """
    if page.html_lang() is None:
        report.add_error("Missing lang attribute on html tag")
    else:
        report.add_pass("html[lang] present")

    if page.canonical_link() is None:
        if rules.missing_canonical_severity == "error":
            report.add_error("Missing canonical URL")
        else:
            report.add_warning("Missing canonical URL")
    else:
        report.add_pass('link[rel="canonical"] present')

    if page.has_element("title"):
        report.add_pass("title present")
    else:
        report.add_error("Missing title tag")

    if page.has_element("main"):
        report.add_pass("main present")
    else:
        report.add_error("Missing main element")

    if page.count("h1") == 0:
        report.add_error("Missing H1 tag")
    else:
        report.add_pass("h1 present")

    if page.json_ld_blocks():
        report.add_pass('script[type="application/ld+json"] present')
    else:
        report.add_error("Missing structured data (JSON-LD)")


def check_accessibility(page: PageDocument, report: ValidationReport, rules: RuleSet) -> None:
    if page.has_class(rules.skip_link_class):
        report.add_pass("Skip link present")
    else:
        report.add_warning("Missing skip links for accessibility")

    if page.has_aria_label():
        report.add_pass("ARIA labels present")
    else:
        report.add_warning("Consider adding ARIA labels to sections")

    missing_alt = page.images_without_alt()
    if missing_alt:
        report.add_error(f"Images without alt text found ({len(missing_alt)} instances)")
    else:
        report.add_pass("All images have alt text")


def collect_schema_types(data: Any) -> set[str]:
    """Collect the ``@type`` values of a parsed JSON-LD document.

    Looks at the top-level object, the items of a top-level array, and the
    items of a top-level ``@graph`` array. ``@type`` may be a string or a
    list of strings.
    """
    nodes: list[Any] = []
    if isinstance(data, list):
        nodes.extend(data)
    elif isinstance(data, dict):
        nodes.append(data)
        graph = data.get("@graph")
        if isinstance(graph, list):
            nodes.extend(graph)

    types: set[str] = set()
    for node in nodes:
        if not isinstance(node, dict):
            continue
        node_type = node.get("@type")
        if isinstance(node_type, str):
            types.add(node_type)
        elif isinstance(node_type, list):
            types.update(t for t in node_type if isinstance(t, str))
    return types


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name}")


def parse_json_ld(block: str) -> Any:
    """Parse one JSON-LD block as strict JSON.

    ``NaN`` and ``Infinity`` are rejected. Raises ``ValueError`` on invalid
    input and ``RecursionError`` on nesting too deep to decode.
    """
    return json.loads(block, parse_constant=_reject_constant)


def check_structured_data(page: PageDocument, report: ValidationReport, rules: RuleSet) -> None:
    """Parse every JSON-LD block and look for the required schema types.

    A page without JSON-LD records nothing here; its single error comes from
    ``check_structural_elements``. Blocks are checked independently, and a
    block that fails to parse gets no schema-type outcomes.
    """
    blocks = page.json_ld_blocks()
    for index, block in enumerate(blocks, start=1):
        suffix = f" (block {index})" if len(blocks) > 1 else ""
        try:
            data = parse_json_ld(block)
        except (ValueError, RecursionError) as e:
            report.add_error(f"Invalid JSON-LD structured data{suffix}: {e}")
            continue

        report.add_pass(f"Valid JSON-LD structured data{suffix}")
        found = collect_schema_types(data)
        for schema_type in rules.required_schema_types:
            if schema_type in found:
                report.add_pass(f"{schema_type} schema present{suffix}")
            else:
                report.add_warning(f"Missing {schema_type} schema{suffix}")


def check_heading_hierarchy(page: PageDocument, report: ValidationReport, rules: RuleSet) -> None:
    h1_count = page.count("h1")
    if h1_count == 0:
        report.add_error("No H1 tag found")
    elif h1_count > 1:
        report.add_warning(f"Multiple H1 tags found ({h1_count}). Should have only 1.")
    else:
        report.add_pass("Single H1 tag")

    levels = page.heading_levels()
    skipped = False
    for previous, current in zip(levels, levels[1:]):
        if current - previous > 1:
            report.add_warning(f"Skipped heading level: H{previous} to H{current}")
            skipped = True
    if not skipped:
        report.add_pass("Heading levels are sequential")


def check_canonical_url(page: PageDocument, report: ValidationReport, rules: RuleSet) -> None:
    href = page.canonical_href()
    if href is None:
        return
    if href.startswith(rules.site_origin):
        report.add_pass("Canonical URL present")
    else:
        report.add_warning(
            f"Canonical URL should use absolute URL starting with {rules.site_origin}"
        )


CHECKS: tuple[Check, ...] = (
    check_meta_tags,
    check_open_graph_tags,
    check_twitter_tags,
    check_structural_elements,
    check_accessibility,
    check_structured_data,
    check_heading_hierarchy,
    check_canonical_url,
)


def run_all_checks(page: PageDocument, file_name: str, rules: RuleSet) -> ValidationReport:
    """Run every check in order and return the populated report."""
    report = ValidationReport(file_name=file_name)
    for check in CHECKS:
        check(page, report, rules)
    return report
