"""Application service (use case) for Category operations."""

from blog.application.interfaces import CategoryRepository
from blog.application.schemas import CategoryCreate
from blog.domain.entities import Category


class CategoryService:

    def __init__(self, repository: CategoryRepository):
        self._repository = repository

    async def list_categories(self) -> list[Category]:
        return await self._repository.get_all()

    async def create_category(self, data: CategoryCreate) -> Category:
        return await self._repository.create(Category(name=data.name.strip()))
