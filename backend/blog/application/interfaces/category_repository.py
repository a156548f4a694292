"""Abstract repository interface (port) for Category persistence."""

from abc import ABC, abstractmethod

from blog.domain.entities import Category


class CategoryRepository(ABC):

    @abstractmethod
    async def get_by_id(self, category_id: int) -> Category | None:
        ...

    @abstractmethod
    async def get_by_ids(self, category_ids: list[int]) -> list[Category]:
        """Existing categories among ``category_ids``; unknown ids are skipped."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Category]:
        ...

    @abstractmethod
    async def create(self, category: Category) -> Category:
        ...
