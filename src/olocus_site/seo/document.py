"""Parsed view of an HTML page used by the checks.

Pages are parsed once into a BeautifulSoup tree; the checks only go through
the query methods below, so attribute order, quoting style and line breaks
inside tags do not affect the results.
"""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

PARSER = "html.parser"
JSON_LD_TYPE = "application/ld+json"


@dataclass
class PageDocument:
    """An HTML page parsed into a tag tree."""

    soup: BeautifulSoup

    @classmethod
    def parse(cls, markup: str) -> PageDocument:
        return cls(soup=BeautifulSoup(markup, PARSER))

    def meta_content(self, *, name: str | None = None, prop: str | None = None) -> str | None:
        """Return the content of the first matching ``<meta>`` with non-empty content.

        Attribute values are compared case-sensitively.

        Args:
            name: Match ``<meta name="...">``.
            prop: Match ``<meta property="...">``.

        Returns:
            The ``content`` value, or None if no matching tag carries content.
        """
        attr, value = ("name", name) if name is not None else ("property", prop)
        for meta in self.soup.find_all("meta"):
            if meta.get(attr) != value:
                continue
            content = meta.get("content")
            if content:
                return str(content)
        return None

    def html_lang(self) -> str | None:
        html = self.soup.find("html")
        if not isinstance(html, Tag):
            return None
        lang = str(html.get("lang") or "").strip()
        return lang or None

    def canonical_link(self) -> Tag | None:
        for link in self.soup.find_all("link"):
            rel = link.get("rel") or []
            if isinstance(rel, str):
                rel = rel.split()
            if "canonical" in rel:
                return link
        return None

    def canonical_href(self) -> str | None:
        link = self.canonical_link()
        if link is None:
            return None
        return str(link.get("href") or "")

    def has_element(self, name: str) -> bool:
        return self.soup.find(name) is not None

    def count(self, name: str) -> int:
        return len(self.soup.find_all(name))

    def heading_levels(self) -> list[int]:
        """Return the heading levels (1-6) that occur at least once, ascending."""
        return [level for level in range(1, 7) if self.soup.find(f"h{level}") is not None]

    def json_ld_blocks(self) -> list[str]:
        """Return the raw text of every ``<script type="application/ld+json">``."""
        return [
            (script.string or "").strip()
            for script in self.soup.find_all("script")
            if script.get("type") == JSON_LD_TYPE
        ]

    def has_class(self, class_name: str) -> bool:
        return self.soup.find(class_=class_name) is not None

    def has_aria_label(self) -> bool:
        return (
            self.soup.find(attrs={"aria-label": True}) is not None
            or self.soup.find(attrs={"aria-labelledby": True}) is not None
        )

    def images_without_alt(self) -> list[Tag]:
        return [img for img in self.soup.find_all("img") if not img.has_attr("alt")]
