"""Application service (use case) for Article operations."""

import logging
from dataclasses import dataclass

from blog.application.interfaces import ArticleRepository, CategoryRepository, UserRepository
from blog.application.pipeline import DateNormalizer, PaginationGate
from blog.application.schemas import ArticleCreate, ArticleUpdate
from blog.domain.entities import Article, Category
from blog.domain.exceptions import EntityNotFoundError, PageNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class ArticlePage:
    """One page of a listing together with its bounds."""

    articles: list[Article]
    articles_count: int
    pages_count: int


class ArticleService:
    """Orchestrates article business logic. Depends on the repository ports (DI)."""

    def __init__(
        self,
        repository: ArticleRepository,
        categories: CategoryRepository,
        users: UserRepository,
        dates: DateNormalizer,
        pagination: PaginationGate | None = None,
    ):
        self._repository = repository
        self._categories = categories
        self._users = users
        self._dates = dates
        self._pagination = pagination or PaginationGate()

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_page(self, page: int) -> ArticlePage:
        """Fetch one page of the feed.

        Raises:
            PageNotFoundError: If ``page`` lies past the last page.
        """
        self._ensure_addressable(page)
        articles, total = await self._repository.get_page(
            offset=self._pagination.offset(page),
            limit=self._pagination.page_size,
        )
        return self._bounded_page(page, articles, total)

    async def list_category_page(self, category_id: int, page: int) -> tuple[Category, ArticlePage]:
        category = await self._categories.get_by_id(category_id)
        if category is None:
            raise EntityNotFoundError("Category", category_id)

        self._ensure_addressable(page)
        articles, total = await self._repository.get_page_by_category(
            category_id,
            offset=self._pagination.offset(page),
            limit=self._pagination.page_size,
        )
        return category, self._bounded_page(page, articles, total)

    async def list_most_discussed(self, limit: int) -> list[Article]:
        return await self._repository.get_most_discussed(limit)

    async def list_by_author(self, user_id: int) -> list[Article]:
        await self._ensure_user_exists(user_id)
        return await self._repository.get_by_author(user_id)

    async def list_commented_by_author(self, user_id: int) -> list[Article]:
        """A user's articles that have at least one comment."""
        articles = await self.list_by_author(user_id)
        return [article for article in articles if article.comments]

    async def create_article(self, data: ArticleCreate) -> Article:
        categories = await self._resolve_categories(data.categories)
        article = Article(
            title=data.title.strip(),
            announce=data.announce.strip(),
            full_text=(data.full_text or "").strip(),
            picture=data.picture or None,
            author_id=data.author_id,
            categories=categories,
            comments=[],
            created_date=self._dates.canonical_instant(data.created_date),
        )
        created = await self._repository.create(article)
        logger.info("Created article %s: %s", created.id, created.title)
        return created

    async def update_article(self, article: Article, data: ArticleUpdate) -> Article:
        """Apply an edit form to an article the caller already fetched."""
        categories = await self._resolve_categories(data.categories)
        article.update(
            title=data.title.strip(),
            announce=data.announce.strip(),
            full_text=(data.full_text or "").strip(),
            picture=data.picture or None,
            created_date=self._dates.canonical_instant(data.created_date),
            categories=categories,
        )
        updated = await self._repository.update(article)
        logger.info("Updated article %s", updated.id)
        return updated

    async def delete_article(self, article_id: int) -> Article:
        """Delete an article and return it as it was before deletion."""
        article = await self.get_article(article_id)
        await self._repository.delete(article_id)
        logger.info("Deleted article %s", article_id)
        return article

    def _ensure_addressable(self, page: int) -> None:
        if not self._pagination.is_addressable(page):
            raise PageNotFoundError(page)

    def _bounded_page(self, page: int, articles: list[Article], total: int) -> ArticlePage:
        pages_count = self._pagination.pages_for(total)
        if not self._pagination.is_page_in_range(page, pages_count):
            logger.debug("Rejected page %s of %s", page, pages_count)
            raise PageNotFoundError(page)
        return ArticlePage(articles=articles, articles_count=total, pages_count=pages_count)

    async def _resolve_categories(self, category_ids: list[int]) -> list[Category]:
        wanted = list(dict.fromkeys(category_ids))
        found = {c.id: c for c in await self._categories.get_by_ids(wanted)}
        for category_id in wanted:
            if category_id not in found:
                raise EntityNotFoundError("Category", category_id)
        return [found[category_id] for category_id in wanted]

    async def _ensure_user_exists(self, user_id: int) -> None:
        if await self._users.get_by_id(user_id) is None:
            raise EntityNotFoundError("User", user_id)
