from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ArticlePageResponse,
    CategoryArticlesResponse,
)
from .category import CategoryCreate, CategoryResponse
from .comment import CommentCreate, CommentResponse
from .error import ErrorResponse, FormErrorResponse, FormErrors
from .user import LoginRequest, LoginResponse, UserCreate, UserResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticlePageResponse",
    "CategoryArticlesResponse",
    "CategoryCreate",
    "CategoryResponse",
    "CommentCreate",
    "CommentResponse",
    "ErrorResponse",
    "FormErrorResponse",
    "FormErrors",
    "LoginRequest",
    "LoginResponse",
    "UserCreate",
    "UserResponse",
]
