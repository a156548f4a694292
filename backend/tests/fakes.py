"""In-memory fakes of the repository and credential ports, shared by the test suites."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from blog.application.interfaces import (
    ArticleRepository,
    CategoryRepository,
    CommentRepository,
    CredentialService,
    TokenPair,
    UserRepository,
)
from blog.application.pipeline import DateNormalizer
from blog.domain.entities import Article, Category, Comment, User
from blog.infrastructure import dependencies

FIXED_NOW = datetime(2024, 3, 21, 12, 30, tzinfo=timezone.utc)


def fixed_dates(now: datetime = FIXED_NOW) -> DateNormalizer:
    return DateNormalizer(presentation_tz=timezone.utc, clock=lambda: now)


class FakeArticleRepository(ArticleRepository):
    """Dict-backed article store that records every call it receives."""

    def __init__(self, articles: list[Article] | None = None):
        self._articles: dict[int, Article] = {}
        self._next_id = 1
        self.calls: list[str] = []
        for article in articles or []:
            self._store(article)

    def _store(self, article: Article) -> Article:
        if article.id is None:
            article.id = self._next_id
        self._next_id = max(self._next_id, article.id + 1)
        self._articles[article.id] = article
        return article

    def _newest_first(self, articles) -> list[Article]:
        return sorted(articles, key=lambda a: (a.created_date, a.id), reverse=True)

    async def get_by_id(self, article_id: int) -> Article | None:
        self.calls.append("get_by_id")
        return self._articles.get(article_id)

    async def get_page(self, offset: int, limit: int) -> tuple[list[Article], int]:
        self.calls.append("get_page")
        articles = self._newest_first(self._articles.values())
        return articles[offset : offset + limit], len(articles)

    async def get_page_by_category(
        self, category_id: int, offset: int, limit: int
    ) -> tuple[list[Article], int]:
        self.calls.append("get_page_by_category")
        articles = self._newest_first(
            a for a in self._articles.values() if any(c.id == category_id for c in a.categories)
        )
        return articles[offset : offset + limit], len(articles)

    async def get_most_discussed(self, limit: int) -> list[Article]:
        self.calls.append("get_most_discussed")
        discussed = [
            replace(a, comments_count=len(a.comments)) for a in self._articles.values() if a.comments
        ]
        discussed.sort(key=lambda a: a.comments_count, reverse=True)
        return discussed[:limit]

    async def get_by_author(self, user_id: int) -> list[Article]:
        self.calls.append("get_by_author")
        return self._newest_first(a for a in self._articles.values() if a.author_id == user_id)

    async def search_by_title(self, query: str) -> list[Article]:
        self.calls.append("search_by_title")
        return self._newest_first(
            a for a in self._articles.values() if query.lower() in a.title.lower()
        )

    async def create(self, article: Article) -> Article:
        self.calls.append("create")
        return self._store(article)

    async def update(self, article: Article) -> Article:
        self.calls.append("update")
        if article.id not in self._articles:
            raise ValueError(f"Article {article.id} not found")
        self._articles[article.id] = article
        return article

    async def delete(self, article_id: int) -> bool:
        self.calls.append("delete")
        return self._articles.pop(article_id, None) is not None


class FakeCommentRepository(CommentRepository):

    def __init__(self, comments: list[Comment] | None = None):
        self._comments: dict[int, Comment] = {}
        self._next_id = 1
        self.calls: list[str] = []
        for comment in comments or []:
            self._store(comment)

    def _store(self, comment: Comment) -> Comment:
        if comment.id is None:
            comment.id = self._next_id
        self._next_id = max(self._next_id, comment.id + 1)
        self._comments[comment.id] = comment
        return comment

    async def get_by_id(self, comment_id: int) -> Comment | None:
        self.calls.append("get_by_id")
        return self._comments.get(comment_id)

    async def get_latest(self, limit: int) -> list[Comment]:
        self.calls.append("get_latest")
        ordered = sorted(self._comments.values(), key=lambda c: (c.created_date, c.id), reverse=True)
        return ordered[:limit]

    async def create(self, comment: Comment) -> Comment:
        self.calls.append("create")
        return self._store(comment)

    async def delete(self, comment_id: int) -> bool:
        self.calls.append("delete")
        return self._comments.pop(comment_id, None) is not None


class FakeCategoryRepository(CategoryRepository):

    def __init__(self, categories: list[Category] | None = None):
        self._categories: dict[int, Category] = {}
        self._next_id = 1
        for category in categories or []:
            self._store(category)

    def _store(self, category: Category) -> Category:
        if category.id is None:
            category.id = self._next_id
        self._next_id = max(self._next_id, category.id + 1)
        self._categories[category.id] = category
        return category

    async def get_by_id(self, category_id: int) -> Category | None:
        return self._categories.get(category_id)

    async def get_by_ids(self, category_ids: list[int]) -> list[Category]:
        return [self._categories[i] for i in category_ids if i in self._categories]

    async def get_all(self) -> list[Category]:
        return list(self._categories.values())

    async def create(self, category: Category) -> Category:
        return self._store(category)


class FakeUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None):
        self._users: dict[int, User] = {}
        self._next_id = 1
        self.lookups: list[str] = []
        for user in users or []:
            self._store(user)

    def _store(self, user: User) -> User:
        if user.id is None:
            user.id = self._next_id
        self._next_id = max(self._next_id, user.id + 1)
        self._users[user.id] = user
        return user

    async def get_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        self.lookups.append(email)
        return next((u for u in self._users.values() if u.email.lower() == email.lower()), None)

    async def get_all(self) -> list[User]:
        return list(self._users.values())

    async def create(self, user: User) -> User:
        return self._store(user)


class FakeCredentialService(CredentialService):
    """Reversible "hashing" so tests can assert on stored values."""

    def hash_password(self, password: str) -> str:
        return f"hashed:{password}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        return password_hash == f"hashed:{password}"

    def issue_tokens(self, user_id: int) -> TokenPair:
        return TokenPair(access_token=f"access-{user_id}", refresh_token=f"refresh-{user_id}")


@dataclass
class FakeBlog:
    """Bundle of fakes that can replace the database-backed dependencies of the app."""

    articles: FakeArticleRepository = field(default_factory=FakeArticleRepository)
    comments: FakeCommentRepository = field(default_factory=FakeCommentRepository)
    categories: FakeCategoryRepository = field(default_factory=FakeCategoryRepository)
    users: FakeUserRepository = field(default_factory=FakeUserRepository)
    credentials: FakeCredentialService = field(default_factory=FakeCredentialService)
    dates: DateNormalizer = field(default_factory=fixed_dates)

    def install(self, app: FastAPI) -> None:
        app.dependency_overrides[dependencies.get_article_repository] = lambda: self.articles
        app.dependency_overrides[dependencies.get_comment_repository] = lambda: self.comments
        app.dependency_overrides[dependencies.get_category_repository] = lambda: self.categories
        app.dependency_overrides[dependencies.get_user_repository] = lambda: self.users
        app.dependency_overrides[dependencies.get_credential_service] = lambda: self.credentials
        app.dependency_overrides[dependencies.get_date_normalizer] = lambda: self.dates


def make_article(
    title: str = "A perfectly ordinary article title for tests",
    *,
    article_id: int | None = None,
    created_date: datetime = FIXED_NOW,
    comments: list[Comment] | None = None,
    categories: list[Category] | None = None,
    author_id: int | None = None,
) -> Article:
    return Article(
        id=article_id,
        title=title,
        announce="An announce that is long enough to pass the rules.",
        full_text="Body text.",
        author_id=author_id,
        categories=categories or [],
        comments=comments,
        created_date=created_date,
    )


@asynccontextmanager
async def api_client(app: FastAPI, blog: FakeBlog) -> AsyncIterator[AsyncClient]:
    """HTTP client against ``app`` with its storage swapped for ``blog``."""
    blog.install(app)
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
