from .article import ArticleModel, article_categories
from .category import CategoryModel
from .comment import CommentModel
from .user import UserModel

__all__ = [
    "ArticleModel",
    "article_categories",
    "CategoryModel",
    "CommentModel",
    "UserModel",
]
