"""Application service (use case) for Comment operations."""

import logging

from blog.application.interfaces import CommentRepository
from blog.application.pipeline import DateNormalizer
from blog.application.schemas import CommentCreate
from blog.domain.entities import Article, Comment
from blog.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class CommentService:
    """Orchestrates comment logic. Depends on the repository port (DI)."""

    def __init__(self, repository: CommentRepository, dates: DateNormalizer):
        self._repository = repository
        self._dates = dates

    async def get_comment(self, comment_id: int) -> Comment:
        comment = await self._repository.get_by_id(comment_id)
        if comment is None:
            raise EntityNotFoundError("Comment", comment_id)
        return comment

    async def list_latest(self, limit: int) -> list[Comment]:
        return await self._repository.get_latest(limit)

    async def create_comment(self, article: Article, data: CommentCreate) -> Comment:
        """Add a comment to an article the caller already fetched."""
        comment = Comment(
            article_id=article.id,
            user_id=data.user_id,
            text=data.text.strip(),
            created_date=self._dates.canonical_instant(self._dates.now()),
        )
        created = await self._repository.create(comment)
        logger.info("Created comment %s on article %s", created.id, article.id)
        return created

    async def delete_comment(self, comment_id: int) -> Comment:
        comment = await self.get_comment(comment_id)
        await self._repository.delete(comment_id)
        logger.info("Deleted comment %s", comment_id)
        return comment
