"""Tests for PageDocument queries."""

from __future__ import annotations

from olocus_site.seo.document import PageDocument


def test_meta_content_by_name_and_property() -> None:
    page = PageDocument.parse(
        '<head><meta name="author" content="Olocus">'
        '<meta property="og:type" content="website"></head>'
    )

    assert page.meta_content(name="author") == "Olocus"
    assert page.meta_content(prop="og:type") == "website"
    assert page.meta_content(name="og:type") is None


def test_meta_content_skips_empty_duplicates() -> None:
    page = PageDocument.parse(
        '<meta name="robots" content=""><meta name="robots" content="noindex">'
    )

    assert page.meta_content(name="robots") == "noindex"


def test_canonical_with_multiple_rel_values() -> None:
    page = PageDocument.parse('<link rel="alternate canonical" href="https://olocus.com/x">')

    assert page.canonical_href() == "https://olocus.com/x"


def test_canonical_without_href() -> None:
    page = PageDocument.parse('<link rel="canonical">')

    assert page.canonical_link() is not None
    assert page.canonical_href() == ""


def test_heading_levels_are_distinct_and_sorted() -> None:
    page = PageDocument.parse("<h3>a</h3><h1>b</h1><h3>c</h3><h2>d</h2>")

    assert page.heading_levels() == [1, 2, 3]
    assert page.count("h3") == 2


def test_json_ld_blocks_ignore_other_scripts() -> None:
    page = PageDocument.parse(
        '<script src="/js/app.js"></script>'
        '<script type="application/ld+json">  {"@type": "WebPage"}  </script>'
        '<script type="application/json">{"a": 1}</script>'
        '<script type="application/ld+json"></script>'
    )

    assert page.json_ld_blocks() == ['{"@type": "WebPage"}', ""]


def test_html_lang() -> None:
    assert PageDocument.parse('<html lang="en"><body></body></html>').html_lang() == "en"
    assert PageDocument.parse("<html><body></body></html>").html_lang() is None
    assert PageDocument.parse("<p>fragment</p>").html_lang() is None


def test_images_without_alt() -> None:
    page = PageDocument.parse('<img src="a"><img src="b" alt="B"><img alt src="c">')

    assert [img["src"] for img in page.images_without_alt()] == ["a"]
