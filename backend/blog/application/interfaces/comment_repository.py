"""Abstract repository interface (port) for Comment persistence."""

from abc import ABC, abstractmethod

from blog.domain.entities import Comment


class CommentRepository(ABC):
    """Port for comment persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, comment_id: int) -> Comment | None:
        ...

    @abstractmethod
    async def get_latest(self, limit: int) -> list[Comment]:
        """Most recent comments across all articles."""
        ...

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        ...

    @abstractmethod
    async def delete(self, comment_id: int) -> bool:
        """Delete a comment. Returns True if deleted, False if not found."""
        ...
