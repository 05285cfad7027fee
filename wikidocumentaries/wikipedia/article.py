"""Fetch a Wikipedia topic for the viewer: summary plus adapted article HTML.

The summary and the article HTML are requested concurrently and joined with
"all settled" semantics: each retrieval ends as :class:`Ok` or
:class:`Failed` on its own, and a failure only blanks the field it feeds.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import httpx

from wikidocumentaries.wikipedia.client import (
    article_html_url,
    get_json,
    get_text,
    new_client,
    summary_url,
)
from wikidocumentaries.wikipedia.converter import adapt_article
from wikidocumentaries.wikipedia.models import ArticleContent, Failed, Ok, Outcome, TopicRef


async def _settle(name: str, ref: TopicRef, fetch: Callable[[], Awaitable[Any]]) -> Outcome:
    """Run *fetch* unless *ref* is incomplete; capture any error as ``Failed``."""
    if not ref.is_complete:
        return Ok(None)
    try:
        return Ok(await fetch())
    except Exception as exc:
        print(f"[Wikipedia] {name} for {ref.language}:{ref.title!r} failed: {exc!r:.120}")
        return Failed(exc)


def _value_or_none(outcome: Outcome) -> Any:
    return outcome.value if isinstance(outcome, Ok) else None


async def _fetch_both(client: httpx.AsyncClient, ref: TopicRef) -> tuple[Outcome, Outcome]:
    summary, html = await asyncio.gather(
        _settle("summary", ref, lambda: get_json(client, summary_url(ref.language, ref.title))),
        _settle("article HTML", ref, lambda: get_text(client, article_html_url(ref.language, ref.title))),
    )
    return summary, html


async def get_wikipedia_data(
    language: str,
    topic: str,
    client: httpx.AsyncClient | None = None,
) -> ArticleContent:
    """Return the summary, lead excerpt and remaining HTML for *topic*.

    Never raises for network problems: a failed summary gives
    ``summary=None``; a failed or non-text article gives ``excerpt_html=""``
    and ``remaining_html=None``.  With an empty *language* or *topic* nothing
    is requested at all.

    Args:
        language: Wikipedia language code.
        topic: Article title (unencoded).
        client: Optional client to reuse; one is opened and closed otherwise.
    """
    ref = TopicRef(language=language, title=topic)

    if client is None:
        async with new_client() as own_client:
            summary_outcome, html_outcome = await _fetch_both(own_client, ref)
    else:
        summary_outcome, html_outcome = await _fetch_both(client, ref)

    content = ArticleContent(summary=_value_or_none(summary_outcome))

    raw_html = _value_or_none(html_outcome)
    if isinstance(raw_html, str):
        content.excerpt_html, content.remaining_html = adapt_article(raw_html, topic, language)

    return content
