"""SQLAlchemy ORM model for the Comment entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog.infrastructure.database.base import Base


class CommentModel(Base):
    """ORM model: maps to the 'comments' table."""

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    article_id: Mapped[int] = mapped_column(
        ForeignKey("articles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )

    article: Mapped["ArticleModel"] = relationship(back_populates="comments")  # noqa: F821

    def __repr__(self) -> str:
        return f"<CommentModel(id={self.id}, article_id={self.article_id})>"
