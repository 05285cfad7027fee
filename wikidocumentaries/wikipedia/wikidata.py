"""Resolve a Wikipedia article to its Wikidata item id."""

from __future__ import annotations

from typing import Any

import httpx

from wikidocumentaries.wikipedia.client import api_url, get_json, new_client
from wikidocumentaries.wikipedia.models import TopicRef


def _pageprops_params(topic: str) -> dict[str, str]:
    return {
        "action": "query",
        "prop": "pageprops",
        "ppprop": "wikibase_item",
        "redirects": "resolve",
        "titles": topic,
        "format": "json",
    }


def _wikibase_item(data: Any) -> str | None:
    """Pull ``query.pages[<first>].pageprops.wikibase_item`` out of *data*."""
    if not isinstance(data, dict):
        return None
    pages = (data.get("query") or {}).get("pages")
    if not pages:
        return None
    # Keyed by page id (or "-1" for a missing page); only one title is asked for.
    page = next(iter(pages.values()))
    pageprops = page.get("pageprops") or {}
    return pageprops.get("wikibase_item") or None


async def find_wikidata_item(
    language: str,
    topic: str,
    client: httpx.AsyncClient | None = None,
) -> str | None:
    """Return the Wikidata item id (e.g. ``"Q1757"``) for *topic*, or ``None``.

    Redirects are resolved by the API, so a redirect title yields the item of
    its target.  ``None`` means the page does not exist or has no item, or
    that *language* or *topic* is empty, in which case nothing is requested.

    Args:
        language: Wikipedia language code.
        topic: Article title.
        client: Optional client to reuse; one is opened and closed otherwise.

    Raises:
        httpx.HTTPError: If the request fails after retries.  Unlike
            :func:`~wikidocumentaries.wikipedia.article.get_wikipedia_data`
            this is not swallowed.
    """
    if not TopicRef(language=language, title=topic).is_complete:
        return None
    if client is None:
        async with new_client() as own_client:
            data = await get_json(own_client, api_url(language), _pageprops_params(topic))
    else:
        data = await get_json(client, api_url(language), _pageprops_params(topic))
    return _wikibase_item(data)
