from .article_repository import ArticleRepository
from .category_repository import CategoryRepository
from .comment_repository import CommentRepository
from .credential_service import CredentialService, TokenPair
from .user_repository import UserRepository

__all__ = [
    "ArticleRepository",
    "CategoryRepository",
    "CommentRepository",
    "CredentialService",
    "TokenPair",
    "UserRepository",
]
