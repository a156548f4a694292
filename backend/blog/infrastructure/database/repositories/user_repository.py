"""Concrete repository implementation for User backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import UserRepository
from blog.domain.entities import User
from blog.infrastructure.database.models import UserModel

from .article_repository import as_utc


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        """Map ORM model → domain entity."""
        return User(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            password_hash=model.password_hash,
            avatar=model.avatar,
            created_at=as_utc(model.created_at),
        )

    async def get_by_id(self, user_id: int) -> User | None:
        result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[User]:
        result = await self._session.execute(select(UserModel).order_by(UserModel.id))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, user: User) -> User:
        model = UserModel(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            password_hash=user.password_hash,
            avatar=user.avatar,
            created_at=user.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
