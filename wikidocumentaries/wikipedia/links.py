"""Hyperlink rewriting for Wikipedia HTML embedded in the viewer.

Each ``<a href>`` is matched against :data:`LINK_RULES` in order and the first
rule whose predicate holds rewrites it.  File and special pages share the
``/wiki/`` prefix with ordinary articles, so their rule has to come first.

    1. file / special page  → absolute link to Wikipedia, new tab
    2. article              → ``/wikipedia/<lang>/<title>?language=<lang>``
    3. ``#cite_`` anchor    → absolute link to the reference on Wikipedia, new tab
    4. anything else        → unchanged address, new tab
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from bs4 import Tag

from wikidocumentaries.wikipedia.client import site_url

WIKI_PREFIX = "/wiki/"
SPECIAL_PREFIX = "/wiki/Special:"
CITE_PREFIX = "#cite_"
FILE_CLASS = "mw-file-description"
EXTERNAL_CLASS = "extlink"


class LinkKind(str, Enum):
    SPECIAL_OR_FILE = "internal-special-or-file"
    WIKI_PAGE = "internal-wiki-page"
    CITATION = "citation-reference"
    EXTERNAL = "external"


@dataclass(frozen=True)
class LinkContext:
    """Per-document values the rewrite actions need."""

    topic: str
    language: str


# ---------------------------------------------------------------------------
# Predicates: pure functions of (href, classes)
# ---------------------------------------------------------------------------

def _is_special_or_file(href: str, classes: list[str]) -> bool:
    return href.startswith(WIKI_PREFIX) and (
        FILE_CLASS in classes or href.startswith(SPECIAL_PREFIX)
    )


def _is_wiki_page(href: str, classes: list[str]) -> bool:
    return href.startswith(WIKI_PREFIX)


def _is_citation(href: str, classes: list[str]) -> bool:
    return href.startswith(CITE_PREFIX)


def _always(href: str, classes: list[str]) -> bool:
    return True


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

def _open_externally(a: Tag, href: str) -> None:
    a["href"] = href
    a["target"] = "_blank"
    a["class"] = EXTERNAL_CLASS


def _to_wikipedia(a: Tag, href: str, ctx: LinkContext) -> None:
    _open_externally(a, site_url(ctx.language) + href)


def _to_viewer_page(a: Tag, href: str, ctx: LinkContext) -> None:
    a["href"] = internal_page_url(href, ctx.language)


def _to_citation(a: Tag, href: str, ctx: LinkContext) -> None:
    _open_externally(a, f"{site_url(ctx.language)}/wiki/{ctx.topic}{href}")


def _keep_address(a: Tag, href: str, ctx: LinkContext) -> None:
    _open_externally(a, href)


def internal_page_url(href: str, language: str) -> str:
    """Map a ``/wiki/<title>#frag`` address to the viewer's own page for it."""
    path = href.split("#", 1)[0]
    internal = f"/wikipedia/{language}/" + path[len(WIKI_PREFIX):]
    separator = "&" if "?" in internal else "?"
    return f"{internal}{separator}language={language}"


Predicate = Callable[[str, list[str]], bool]
Action = Callable[[Tag, str, LinkContext], None]


@dataclass(frozen=True)
class LinkRule:
    kind: LinkKind
    matches: Predicate
    apply: Action


LINK_RULES: tuple[LinkRule, ...] = (
    LinkRule(LinkKind.SPECIAL_OR_FILE, _is_special_or_file, _to_wikipedia),
    LinkRule(LinkKind.WIKI_PAGE, _is_wiki_page, _to_viewer_page),
    LinkRule(LinkKind.CITATION, _is_citation, _to_citation),
    LinkRule(LinkKind.EXTERNAL, _always, _keep_address),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def classify_link(href: str, classes: list[str] | None = None) -> LinkRule:
    """Return the first rule in :data:`LINK_RULES` that matches *href*."""
    classes = classes or []
    # The last rule matches everything, so next() always finds one.
    return next(rule for rule in LINK_RULES if rule.matches(href, classes))


def rewrite_link(a: Tag, ctx: LinkContext) -> LinkKind | None:
    """Rewrite one anchor in place.

    Returns the kind it was classified as, or ``None`` when the anchor has no
    ``href`` and was left untouched.
    """
    href = a.get("href")
    if not href:
        return None
    classes = a.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    rule = classify_link(href, list(classes))
    rule.apply(a, href, ctx)
    return rule.kind


def rewrite_links(root: Tag, ctx: LinkContext) -> None:
    """Rewrite every ``<a>`` under *root*."""
    for a in root.find_all("a"):
        rewrite_link(a, ctx)
