"""Source-to-target mapping for protocol documentation.

Each mapping names a Markdown file in the protocol repository, where it
lands in the Docusaurus ``docs/`` tree, and the transform that adds front
matter and site-specific decoration.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

Transform = Callable[[str, str | None], str]

_LEADING_TITLE = re.compile(r"^# .*\n")
_PUB_RUST_FENCE = re.compile(r"```rust\n(pub .*?)\n```", re.DOTALL)
_EXTENSION_NAME = re.compile(r"extensions/olocus-(.+?)/")


def front_matter(**fields: object) -> str:
    """Render a Docusaurus front-matter block followed by a blank line.

    Fields are emitted in the order given; None values are skipped.
    """
    lines = ["---"]
    lines.extend(f"{key}: {value}" for key, value in fields.items() if value is not None)
    lines.append("---")
    return "\n".join(lines) + "\n\n"


def strip_leading_title(content: str) -> str:
    """Drop a leading ``# Title`` line; Docusaurus renders the front-matter title."""
    return _LEADING_TITLE.sub("", content, count=1)


def transform_readme(content: str, _extension: str | None = None) -> str:
    header = front_matter(id="intro", title="Introduction", sidebar_position=1)
    description = (
        ":::info Protocol Overview\n"
        "**Distributed trust infrastructure where humans, AI agents and machines "
        "collaborate securely.**\n"
        "\n"
        "Zero External Dependencies • Pure Rust • Minimal Core (~500 lines) • Extensible\n"
        ":::\n"
        "\n"
    )
    return header + description + strip_leading_title(content)


def transform_protocol_spec(content: str, _extension: str | None = None) -> str:
    header = front_matter(id="overview", title="Protocol Specification", sidebar_label="Overview")
    return header + strip_leading_title(content)


def transform_api(content: str, _extension: str | None = None) -> str:
    header = front_matter(id="core", title="Core API Reference", sidebar_label="Core API")
    content = _PUB_RUST_FENCE.sub(
        lambda m: f'```rust title="API Definition"\n{m.group(1)}\n```',
        content,
    )
    return header + content


def transform_implementation(content: str, _extension: str | None = None) -> str:
    return front_matter(id="rust-guide", title="Rust Implementation Guide") + content


def transform_design_rationale(content: str, _extension: str | None = None) -> str:
    header = front_matter(id="philosophy", title="Design Philosophy", sidebar_position=1)
    return header + content


def transform_extension_doc(content: str, extension: str | None = None) -> str:
    if not extension:
        raise ValueError("extension docs need an extension name")
    header = front_matter(id=extension, title=f"{extension.capitalize()} Extension")
    badge = ":::tip Extension Type\n**Stable** ✅ - Production Ready\n:::\n\n"
    return header + badge + content


def extension_name(source: str) -> str | None:
    """Return ``location`` for ``extensions/olocus-location/README.md``."""
    match = _EXTENSION_NAME.search(source)
    return match.group(1) if match else None


@dataclass(frozen=True)
class DocMapping:
    """One protocol file and where it goes in the docs tree."""

    source: str
    target: str
    transform: Transform

    def apply(self, content: str) -> str:
        return self.transform(content, extension_name(self.source))


FILE_MAPPINGS: tuple[DocMapping, ...] = (
    DocMapping("README.md", "intro.md", transform_readme),
    DocMapping("docs/PROTOCOL-SPECIFICATION.md", "core/overview.md", transform_protocol_spec),
    DocMapping("docs/API.md", "api/core.md", transform_api),
    DocMapping(
        "docs/IMPLEMENTATION-GUIDE.md", "implementation/rust-guide.md", transform_implementation
    ),
    DocMapping("docs/DESIGN-RATIONALE.md", "concepts/philosophy.md", transform_design_rationale),
    DocMapping(
        "extensions/olocus-location/README.md", "extensions/location.md", transform_extension_doc
    ),
    DocMapping("extensions/olocus-trust/README.md", "extensions/trust.md", transform_extension_doc),
    DocMapping("extensions/olocus-ml/README.md", "extensions/ml.md", transform_extension_doc),
)
