"""Display projections of articles and comments.

The shaper builds new view objects field by field instead of mutating the
entities handed over by repositories, so callers can keep using those
entities after a response has been shaped.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import overload

from blog.domain.entities import Article, Category, Comment

from .dates import DateNormalizer


@dataclass
class CommentView:
    id: int | None
    article_id: int
    user_id: int | None
    text: str
    created_date: str


@dataclass
class ArticleView:
    id: int | None
    title: str
    announce: str
    full_text: str
    picture: str | None
    author_id: int | None
    created_date: str
    categories: list[Category] = field(default_factory=list)
    comments: list[CommentView] | None = None
    comments_count: int = 0


class ResponseShaper:
    """Projects entities into their client-facing form."""

    def __init__(self, dates: DateNormalizer):
        self._dates = dates

    @overload
    def project(self, data: Article) -> ArticleView: ...

    @overload
    def project(self, data: Sequence[Article]) -> list[ArticleView]: ...

    def project(self, data):
        """Shape one article or a sequence of them.

        A single article always gets a ``comments`` list (empty when the
        collection was not loaded); list elements keep an absent collection
        absent.
        """
        if isinstance(data, Article):
            view = self._article_view(data)
            if view.comments is None:
                view.comments = []
            return view
        return [self._article_view(article) for article in data]

    def project_comment(self, comment: Comment) -> CommentView:
        return CommentView(
            id=comment.id,
            article_id=comment.article_id,
            user_id=comment.user_id,
            text=comment.text,
            created_date=self._dates.to_display(comment.created_date),
        )

    def project_comments(self, comments: Sequence[Comment]) -> list[CommentView]:
        return [self.project_comment(comment) for comment in comments]

    def _article_view(self, article: Article) -> ArticleView:
        comments = None
        if article.comments is not None:
            comments = self.project_comments(article.comments)
        return ArticleView(
            id=article.id,
            title=article.title,
            announce=article.announce,
            full_text=article.full_text,
            picture=article.picture,
            author_id=article.author_id,
            created_date=self._dates.to_display(article.created_date),
            categories=[Category(id=c.id, name=c.name) for c in article.categories],
            comments=comments,
            comments_count=article.comments_count,
        )
