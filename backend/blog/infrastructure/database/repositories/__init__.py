from .article_repository import SQLAlchemyArticleRepository
from .category_repository import SQLAlchemyCategoryRepository
from .comment_repository import SQLAlchemyCommentRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyArticleRepository",
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyCommentRepository",
    "SQLAlchemyUserRepository",
]
