from .article_service import ArticlePage, ArticleService
from .category_service import CategoryService
from .comment_service import CommentService
from .search_service import SearchService
from .user_service import UserService

__all__ = [
    "ArticlePage",
    "ArticleService",
    "CategoryService",
    "CommentService",
    "SearchService",
    "UserService",
]
