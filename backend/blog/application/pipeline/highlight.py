from collections.abc import Sequence
from dataclasses import replace

from .shaping import ArticleView

HIGHLIGHT_OPEN = "<b>"
HIGHLIGHT_CLOSE = "</b>"


def highlight_first(text: str, query: str) -> str:
    """Wrap the first case-insensitive occurrence of ``query`` in ``text``.

    Original casing is kept. An empty query matches at index 0.
    """
    index = text.lower().find(query.lower())
    if index == -1:
        return text
    end = index + len(query)
    return f"{text[:index]}{HIGHLIGHT_OPEN}{text[index:end]}{HIGHLIGHT_CLOSE}{text[end:]}"


class SearchHighlighter:
    """Marks the searched text in article titles of a result list."""

    def highlight(self, articles: Sequence[ArticleView], query: str) -> list[ArticleView]:
        return [
            replace(article, title=highlight_first(article.title, query))
            for article in articles
        ]
