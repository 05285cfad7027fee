"""Tests for hyperlink classification and rewriting."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from wikidocumentaries.wikipedia.links import (
    LINK_RULES,
    LinkContext,
    LinkKind,
    classify_link,
    internal_page_url,
    rewrite_link,
    rewrite_links,
)

_CTX = LinkContext(topic="Foo", language="en")


def _anchor(html: str):
    return BeautifulSoup(html, "html.parser").a


# ---------------------------------------------------------------------------
# classify_link
# ---------------------------------------------------------------------------

class TestClassifyLink:
    @pytest.mark.parametrize(
        ("href", "classes", "kind"),
        [
            ("/wiki/Special:Random", [], LinkKind.SPECIAL_OR_FILE),
            ("/wiki/File:Tuomiokirkko.jpg", ["mw-file-description"], LinkKind.SPECIAL_OR_FILE),
            ("/wiki/File:Tuomiokirkko.jpg", [], LinkKind.WIKI_PAGE),
            ("/wiki/Helsinki", ["mw-redirect"], LinkKind.WIKI_PAGE),
            ("#cite_note-1", [], LinkKind.CITATION),
            ("#cite_ref-2", [], LinkKind.CITATION),
            ("#Historia", [], LinkKind.EXTERNAL),
            ("https://example.com/", [], LinkKind.EXTERNAL),
            ("mailto:someone@example.com", [], LinkKind.EXTERNAL),
        ],
    )
    def test_kinds(self, href: str, classes: list[str], kind: LinkKind) -> None:
        assert classify_link(href, classes).kind is kind

    def test_file_class_outside_wiki_path_is_external(self) -> None:
        rule = classify_link("https://upload.wikimedia.org/x.jpg", ["mw-file-description"])
        assert rule.kind is LinkKind.EXTERNAL

    def test_wiki_prefix_requires_trailing_slash(self) -> None:
        assert classify_link("/wiki").kind is LinkKind.EXTERNAL
        assert classify_link("/wikipedia/fi/Helsinki?language=fi").kind is LinkKind.EXTERNAL
        assert classify_link("/wiki/Helsinki").kind is LinkKind.WIKI_PAGE

    def test_special_rule_precedes_page_rule(self) -> None:
        kinds = [rule.kind for rule in LINK_RULES]
        assert kinds.index(LinkKind.SPECIAL_OR_FILE) < kinds.index(LinkKind.WIKI_PAGE)
        assert kinds[-1] is LinkKind.EXTERNAL


# ---------------------------------------------------------------------------
# rewrite_link
# ---------------------------------------------------------------------------

class TestRewriteLink:
    def test_special_page_points_to_wikipedia(self) -> None:
        a = _anchor('<a href="/wiki/Special:Foo" class="mw-magiclink other">x</a>')
        assert rewrite_link(a, _CTX) is LinkKind.SPECIAL_OR_FILE
        assert a["href"] == "https://en.wikipedia.org/wiki/Special:Foo"
        assert a["target"] == "_blank"
        assert a["class"] == "extlink"

    def test_file_link_points_to_wikipedia(self) -> None:
        a = _anchor('<a href="/wiki/File:Kirkko.jpg" class="mw-file-description"><img src="k.jpg"/></a>')
        rewrite_link(a, LinkContext(topic="Kirkko", language="fi"))
        assert a["href"] == "https://fi.wikipedia.org/wiki/File:Kirkko.jpg"
        assert a["target"] == "_blank"

    def test_article_link_stays_in_viewer(self) -> None:
        a = _anchor('<a href="/wiki/Topic#Section" title="Topic">t</a>')
        assert rewrite_link(a, _CTX) is LinkKind.WIKI_PAGE
        assert a["href"] == "/wikipedia/en/Topic?language=en"
        assert a.get("target") is None
        assert a["title"] == "Topic"

    def test_citation_points_to_reference_on_wikipedia(self) -> None:
        a = _anchor('<a href="#cite_note-1">[1]</a>')
        assert rewrite_link(a, _CTX) is LinkKind.CITATION
        assert a["href"] == "https://en.wikipedia.org/wiki/Foo#cite_note-1"
        assert a["target"] == "_blank"
        assert a["class"] == "extlink"

    def test_external_link_keeps_address(self) -> None:
        a = _anchor('<a rel="nofollow" class="external text" href="https://example.com/a?b=c">e</a>')
        assert rewrite_link(a, _CTX) is LinkKind.EXTERNAL
        assert a["href"] == "https://example.com/a?b=c"
        assert a["target"] == "_blank"
        assert a["class"] == "extlink"

    def test_missing_href_left_untouched(self) -> None:
        a = _anchor('<a name="anchor" class="keep">n</a>')
        assert rewrite_link(a, _CTX) is None
        assert a.get("target") is None
        assert a["class"] == ["keep"]

    def test_empty_href_left_untouched(self) -> None:
        a = _anchor('<a href="">n</a>')
        assert rewrite_link(a, _CTX) is None
        assert a["href"] == ""


class TestInternalPageUrl:
    def test_drops_fragment(self) -> None:
        assert internal_page_url("/wiki/Helsinki#Historia", "fi") == "/wikipedia/fi/Helsinki?language=fi"

    def test_existing_query_joined_with_ampersand(self) -> None:
        assert internal_page_url("/wiki/Foo?oldid=1", "en") == "/wikipedia/en/Foo?oldid=1&language=en"

    def test_only_leading_prefix_replaced(self) -> None:
        assert internal_page_url("/wiki/A/wiki/B", "sv") == "/wikipedia/sv/A/wiki/B?language=sv"


class TestRewriteLinks:
    def test_rewrites_every_anchor(self) -> None:
        soup = BeautifulSoup(
            '<p><a href="/wiki/A">a</a> <a href="https://x.org">x</a> <a>none</a></p>',
            "html.parser",
        )
        rewrite_links(soup, _CTX)
        anchors = soup.find_all("a")
        assert anchors[0]["href"] == "/wikipedia/en/A?language=en"
        assert anchors[1]["target"] == "_blank"
        assert anchors[2].attrs == {}
