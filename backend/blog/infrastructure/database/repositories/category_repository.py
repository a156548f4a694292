"""Concrete repository implementation for Category backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import CategoryRepository
from blog.domain.entities import Category
from blog.infrastructure.database.models import CategoryModel


class SQLAlchemyCategoryRepository(CategoryRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: CategoryModel) -> Category:
        return Category(id=model.id, name=model.name)

    async def get_by_id(self, category_id: int) -> Category | None:
        result = await self._session.get(CategoryModel, category_id)
        return self._to_entity(result) if result else None

    async def get_by_ids(self, category_ids: list[int]) -> list[Category]:
        if not category_ids:
            return []
        stmt = select(CategoryModel).where(CategoryModel.id.in_(category_ids))
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_all(self) -> list[Category]:
        result = await self._session.execute(select(CategoryModel).order_by(CategoryModel.id))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, category: Category) -> Category:
        model = CategoryModel(name=category.name)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
