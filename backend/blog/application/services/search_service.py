"""Title search over published articles."""

from blog.application.interfaces import ArticleRepository
from blog.domain.entities import Article


class SearchService:

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def find_all(self, query: str) -> list[Article]:
        """Articles whose title contains ``query``; an empty query matches every title."""
        return await self._repository.search_by_title(query)
