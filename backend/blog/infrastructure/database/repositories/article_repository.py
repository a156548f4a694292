"""Concrete repository implementation backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import ArticleRepository
from blog.domain.entities import Article, Category, Comment
from blog.infrastructure.database.models import (
    ArticleModel,
    CategoryModel,
    CommentModel,
    article_categories,
)


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on read; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def comment_to_entity(model: CommentModel) -> Comment:
    return Comment(
        id=model.id,
        article_id=model.article_id,
        user_id=model.user_id,
        text=model.text,
        created_date=as_utc(model.created_date),
    )


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel, comments_count: int | None = None) -> Article:
        """Map ORM model → domain entity."""
        comments = [comment_to_entity(c) for c in model.comments]
        return Article(
            id=model.id,
            title=model.title,
            announce=model.announce,
            full_text=model.full_text,
            picture=model.picture,
            author_id=model.author_id,
            categories=[Category(id=c.id, name=c.name) for c in model.categories],
            comments=comments,
            comments_count=len(comments) if comments_count is None else comments_count,
            created_date=as_utc(model.created_date),
        )

    async def _category_models(self, categories: list[Category]) -> list[CategoryModel]:
        ids = [c.id for c in categories]
        if not ids:
            return []
        result = await self._session.execute(select(CategoryModel).where(CategoryModel.id.in_(ids)))
        by_id = {model.id: model for model in result.scalars().all()}
        return [by_id[i] for i in ids if i in by_id]

    async def get_by_id(self, article_id: int) -> Article | None:
        result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def get_page(self, offset: int, limit: int) -> tuple[list[Article], int]:
        total = await self._session.scalar(select(func.count()).select_from(ArticleModel))
        stmt = (
            select(ArticleModel)
            .order_by(ArticleModel.created_date.desc(), ArticleModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()], total or 0

    async def get_page_by_category(
        self, category_id: int, offset: int, limit: int
    ) -> tuple[list[Article], int]:
        in_category = article_categories.c.category_id == category_id
        total = await self._session.scalar(
            select(func.count()).select_from(article_categories).where(in_category)
        )
        stmt = (
            select(ArticleModel)
            .join(article_categories, article_categories.c.article_id == ArticleModel.id)
            .where(in_category)
            .order_by(ArticleModel.created_date.desc(), ArticleModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()], total or 0

    async def get_most_discussed(self, limit: int) -> list[Article]:
        comments_count = func.count(CommentModel.id).label("comments_count")
        stmt = (
            select(ArticleModel, comments_count)
            .join(CommentModel, CommentModel.article_id == ArticleModel.id)
            .group_by(ArticleModel.id)
            .order_by(desc(comments_count), ArticleModel.id.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model, count) for model, count in result.all()]

    async def get_by_author(self, user_id: int) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.author_id == user_id)
            .order_by(ArticleModel.created_date.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def search_by_title(self, query: str) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.title.icontains(query, autoescape=True))
            .order_by(ArticleModel.created_date.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = ArticleModel(
            title=article.title,
            announce=article.announce,
            full_text=article.full_text,
            picture=article.picture,
            author_id=article.author_id,
            created_date=article.created_date,
            categories=await self._category_models(article.categories),
            comments=[],
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, article: Article) -> Article:
        model = await self._session.get(ArticleModel, article.id)
        if model is None:
            raise ValueError(f"Article {article.id} not found in database")
        model.title = article.title
        model.announce = article.announce
        model.full_text = article.full_text
        model.picture = article.picture
        model.created_date = article.created_date
        model.categories = await self._category_models(article.categories)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, article_id: int) -> bool:
        model = await self._session.get(ArticleModel, article_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
