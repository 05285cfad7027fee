"""Data models for the Wikipedia pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class TopicRef:
    """A Wikipedia article identified by language edition and title."""

    language: str
    title: str

    @property
    def is_complete(self) -> bool:
        """``True`` when both fields are non-empty and a request can be built."""
        return bool(self.language) and bool(self.title)


# ---------------------------------------------------------------------------
# Retrieval outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Ok(Generic[T]):
    """A retrieval that completed.  ``value`` is ``None`` when it was skipped."""

    value: T


@dataclass(frozen=True)
class Failed:
    """A retrieval that raised; the exception is kept for the caller."""

    error: BaseException


Outcome = Union[Ok[T], Failed]


# ---------------------------------------------------------------------------
# Adapter / fetcher results
# ---------------------------------------------------------------------------

@dataclass
class SplitArticle:
    """Article body cut at the first second-level heading.

    ``remainder`` is ``None`` when the body has no ``<h2>``, which is not the
    same as an empty trailing section.
    """

    lead: str
    remainder: str | None = None


@dataclass
class ArticleContent:
    """Everything the viewer needs to show a Wikipedia topic."""

    summary: Any = None
    excerpt_html: str = ""
    remaining_html: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON shape consumed by the documentary viewer."""
        return {
            "summary": self.summary,
            "excerptHTML": self.excerpt_html,
            "remainingHTML": self.remaining_html,
        }
