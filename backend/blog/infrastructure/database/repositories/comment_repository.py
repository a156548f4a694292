"""Concrete repository implementation for Comment backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import CommentRepository
from blog.domain.entities import Comment
from blog.infrastructure.database.models import CommentModel

from .article_repository import comment_to_entity


class SQLAlchemyCommentRepository(CommentRepository):
    """Implements the CommentRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, comment_id: int) -> Comment | None:
        result = await self._session.get(CommentModel, comment_id)
        return comment_to_entity(result) if result else None

    async def get_latest(self, limit: int) -> list[Comment]:
        stmt = (
            select(CommentModel)
            .order_by(CommentModel.created_date.desc(), CommentModel.id.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [comment_to_entity(row) for row in result.scalars().all()]

    async def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            article_id=comment.article_id,
            user_id=comment.user_id,
            text=comment.text,
            created_date=comment.created_date,
        )
        self._session.add(model)
        await self._session.flush()
        return comment_to_entity(model)

    async def delete(self, comment_id: int) -> bool:
        model = await self._session.get(CommentModel, comment_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
