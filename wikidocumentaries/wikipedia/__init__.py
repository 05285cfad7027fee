"""Wikipedia package — Wikidata lookup, article fetch & HTML adaptation."""

from wikidocumentaries.wikipedia.article import get_wikipedia_data
from wikidocumentaries.wikipedia.converter import adapt_article, convert_html
from wikidocumentaries.wikipedia.models import ArticleContent, TopicRef
from wikidocumentaries.wikipedia.wikidata import find_wikidata_item

__all__ = [
    "find_wikidata_item",
    "get_wikipedia_data",
    "adapt_article",
    "convert_html",
    "ArticleContent",
    "TopicRef",
]
