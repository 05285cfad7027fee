"""Adapt Wikipedia article HTML for embedding in the documentary viewer.

``adapt_article`` is the entry point:

    isolate <body> → split at first <h2> → per segment: rewrite links → strip noise

Each segment is parsed into its own BeautifulSoup tree, transformed and
serialised back to a string.  Nothing here performs network I/O or raises on
odd markup: missing attributes are skipped and absent matches leave the
content alone.
"""

from __future__ import annotations

import re
from typing import Callable

from bs4 import BeautifulSoup, Tag

from wikidocumentaries.wikipedia.links import LinkContext, rewrite_links
from wikidocumentaries.wikipedia.models import SplitArticle

_BODY_RE = re.compile(r"<body[^>]*>([\s\S]*?)</body>", re.IGNORECASE)
_H2_RE = re.compile(r"<h2[\s>]", re.IGNORECASE)

# Alternate infobox layout used by some editions (French Wikipedia).
KEPT_DIV_CLASS = "infobox_v3"


# ---------------------------------------------------------------------------
# Body isolation & splitting
# ---------------------------------------------------------------------------

def extract_body(html: str) -> str:
    """Return the inner content of ``<body>`` if present, else *html* as-is."""
    match = _BODY_RE.search(html)
    if match:
        return match.group(1)
    return html


def split_article(html: str) -> SplitArticle:
    """Cut *html* at the first ``<h2>`` tag.

    The heading starts the remainder.  With no ``<h2>`` the whole input is the
    lead and ``remainder`` is ``None``.
    """
    match = _H2_RE.search(html)
    if match is None:
        return SplitArticle(lead=html)
    return SplitArticle(lead=html[: match.start()], remainder=html[match.start():])


# ---------------------------------------------------------------------------
# Noise removal
# ---------------------------------------------------------------------------

def _class_string(tag: Tag) -> str | None:
    value = tag.get("class")
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return " ".join(value)


def _class_contains(needle: str) -> Callable[[str | None], bool]:
    return lambda cls: cls is not None and needle in cls


def _class_is_not(expected: str) -> Callable[[str | None], bool]:
    return lambda cls: cls != expected


def _remove_where(soup: BeautifulSoup, name: str, predicate: Callable[[str | None], bool]) -> None:
    """Decompose every *name* element whose class attribute satisfies *predicate*."""
    for tag in soup.find_all(name):
        # Already gone with a removed ancestor.
        if tag.decomposed:
            continue
        if predicate(_class_string(tag)):
            tag.decompose()


# The div rule drops every div except infobox_v3, including image captions
# and layout wrappers.
NOISE_RULES: tuple[tuple[str, Callable[[str | None], bool]], ...] = (
    ("table", _class_contains("infobox")),
    ("table", _class_contains("ambox")),
    ("div", _class_is_not(KEPT_DIV_CLASS)),
    ("ul", _class_contains("gallery")),
)


def strip_noise(soup: BeautifulSoup) -> None:
    """Remove infoboxes, warning boxes, non-infobox divs and galleries."""
    for name, predicate in NOISE_RULES:
        _remove_where(soup, name, predicate)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def convert_html(html: str, topic: str, language: str) -> str:
    """Rewrite links and strip noise in one HTML segment; return the new HTML."""
    # Keep class attributes as raw strings so the infobox_v3 match is exact.
    soup = BeautifulSoup(html, "html.parser", multi_valued_attributes=None)
    rewrite_links(soup, LinkContext(topic=topic, language=language))
    strip_noise(soup)
    return str(soup)


def adapt_article(raw_html: str, topic: str, language: str) -> tuple[str, str | None]:
    """Turn a full Wikipedia article into ``(excerpt_html, remaining_html)``.

    Args:
        raw_html: Article HTML as returned by the REST API (a full document or
            a bare fragment).
        topic: Article title, used to build citation links back to Wikipedia.
        language: Wikipedia language code, e.g. ``"fi"``.

    Returns:
        The converted lead section and the converted rest of the article, or
        ``None`` for the latter when the article has no second-level heading.
    """
    parts = split_article(extract_body(raw_html))
    excerpt_html = convert_html(parts.lead, topic, language)
    remaining_html = None
    if parts.remainder is not None:
        remaining_html = convert_html(parts.remainder, topic, language)
    return excerpt_html, remaining_html
