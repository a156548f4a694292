"""SQLAlchemy ORM models for articles and their category links."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog.infrastructure.database.base import Base

article_categories = Table(
    "article_categories",
    Base.metadata,
    Column("article_id", ForeignKey("articles.id", ondelete="CASCADE"), primary_key=True),
    Column("category_id", ForeignKey("categories.id", ondelete="CASCADE"), primary_key=True),
)


class ArticleModel(Base):
    """ORM model: maps to the 'articles' table."""

    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(250), nullable=False, index=True)
    announce: Mapped[str] = mapped_column(String(250), nullable=False)
    full_text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    picture: Mapped[str | None] = mapped_column(String(255), nullable=True)
    author_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )

    categories: Mapped[list["CategoryModel"]] = relationship(  # noqa: F821
        secondary=article_categories,
        lazy="selectin",
        order_by="CategoryModel.id",
    )
    comments: Mapped[list["CommentModel"]] = relationship(  # noqa: F821
        back_populates="article",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="CommentModel.created_date.desc()",
    )

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, title='{self.title}')>"
