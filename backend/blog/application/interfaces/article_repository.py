"""Abstract repository interfaces (ports): define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence: implemented in the infrastructure layer.

    Articles returned by ``get_by_id`` carry their comments and categories;
    listing methods load categories and comments as well, newest first.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_page(self, offset: int, limit: int) -> tuple[list[Article], int]:
        """Retrieve one page of articles and the total article count."""
        ...

    @abstractmethod
    async def get_page_by_category(
        self, category_id: int, offset: int, limit: int
    ) -> tuple[list[Article], int]:
        """Retrieve one page of a category's articles and the category's article count."""
        ...

    @abstractmethod
    async def get_most_discussed(self, limit: int) -> list[Article]:
        """Articles with the most comments, ``comments_count`` populated."""
        ...

    @abstractmethod
    async def get_by_author(self, user_id: int) -> list[Article]:
        """All articles written by a user."""
        ...

    @abstractmethod
    async def search_by_title(self, query: str) -> list[Article]:
        """Articles whose title contains ``query``, case-insensitively."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> Article:
        """Update an existing article."""
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article and its comments. Returns True if deleted."""
        ...
