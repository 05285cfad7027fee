"""HTTP access to the Wikipedia APIs with a bounded timeout and retry.

Three endpoints are used, all on the language edition's own host:

    /w/api.php                               : page props (Wikidata item)
    /api/rest_v1/page/summary/<topic>        : structured summary (JSON)
    /w/rest.php/v1/page/<topic>/html         : full article (Parsoid HTML)

Every request carries the ``Api-User-Agent`` header from
:data:`~wikidocumentaries.config.settings`.  Transient failures (transport
errors and 429/5xx responses) are retried with exponential backoff; any other
non-2xx status raises :class:`httpx.HTTPStatusError` straight away.
"""

from __future__ import annotations

import asyncio
from typing import Any
from urllib.parse import quote

import httpx

from wikidocumentaries.config import settings

_RETRY_STATUSES = frozenset({429, 500, 502, 503, 504})

# Characters encodeURIComponent leaves alone.
_COMPONENT_SAFE = "!~*'()"


# ---------------------------------------------------------------------------
# URL builders
# ---------------------------------------------------------------------------

def site_url(language: str) -> str:
    """Return the origin of the *language* Wikipedia, e.g. ``https://fi.wikipedia.org``."""
    return f"https://{language}.wikipedia.org"


def api_url(language: str) -> str:
    return f"{site_url(language)}/w/api.php"


def summary_url(language: str, topic: str) -> str:
    return f"{site_url(language)}/api/rest_v1/page/summary/{quote(topic, safe=_COMPONENT_SAFE)}"


def article_html_url(language: str, topic: str) -> str:
    return f"{site_url(language)}/w/rest.php/v1/page/{quote(topic, safe=_COMPONENT_SAFE)}/html"


def new_client() -> httpx.AsyncClient:
    """Return an ``AsyncClient`` preconfigured with headers and timeout."""
    return httpx.AsyncClient(
        headers=settings.request_headers,
        timeout=settings.request_timeout,
        follow_redirects=True,
    )


# ---------------------------------------------------------------------------
# Request with retry
# ---------------------------------------------------------------------------

def _is_transient(exc: Exception) -> bool:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in _RETRY_STATUSES
    return isinstance(exc, httpx.TransportError)


async def _get(
    client: httpx.AsyncClient,
    url: str,
    params: dict[str, str] | None = None,
) -> httpx.Response:
    """GET *url*, retrying transient failures up to ``settings.retry_max`` times.

    Raises:
        httpx.HTTPStatusError: On a non-2xx response that is not retried, or
            once retries are exhausted.
        httpx.TransportError: On network failure once retries are exhausted.
    """
    max_retries = settings.retry_max
    base_delay = settings.retry_base_delay

    attempt = 0
    while True:
        try:
            response = await client.get(url, params=params)
            response.raise_for_status()
            return response
        except (httpx.HTTPStatusError, httpx.TransportError) as exc:
            if not _is_transient(exc) or attempt >= max_retries:
                raise
            delay = base_delay * (2 ** attempt)
            print(
                f"[Wikipedia] {url} failed ({exc!r:.120}); "
                f"retrying in {delay:.1f}s (attempt {attempt + 1}/{max_retries}) …"
            )
            await asyncio.sleep(delay)
            attempt += 1


async def get_json(
    client: httpx.AsyncClient,
    url: str,
    params: dict[str, str] | None = None,
) -> Any:
    """Fetch *url* and decode the body as JSON."""
    response = await _get(client, url, params=params)
    return response.json()


async def get_text(client: httpx.AsyncClient, url: str) -> str:
    """Fetch *url* and return the body as text."""
    response = await _get(client, url)
    return response.text
