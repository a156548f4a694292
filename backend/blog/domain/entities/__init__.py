from .article import Article
from .category import Category
from .comment import Comment
from .user import User

# Largest key a BIGINT / SQLite INTEGER primary key can hold
MAX_ID = 2**63 - 1

__all__ = [
    "Article",
    "Category",
    "Comment",
    "User",
    "MAX_ID",
]
