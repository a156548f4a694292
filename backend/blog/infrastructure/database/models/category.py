from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from blog.infrastructure.database.base import Base


class CategoryModel(Base):
    """ORM model: maps to the 'categories' table."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name='{self.name}')>"
