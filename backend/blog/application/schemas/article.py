"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from pydantic import BaseModel, Field

from blog.domain.entities import MAX_ID

from .category import CategoryResponse
from .comment import CommentResponse


class ArticleCreate(BaseModel):
    """Typed form of a new-article payload that already passed the rule table."""

    title: str = Field(..., examples=["How I learned to stop worrying and love asyncio"])
    announce: str = Field(..., examples=["A short lead that appears in article listings."])
    full_text: str | None = None
    picture: str | None = None
    categories: list[int] = Field(..., min_length=1, examples=[[1, 3]])
    created_date: str = Field(..., examples=["21.03.2024"])
    author_id: int | None = Field(None, ge=1, le=MAX_ID)


class ArticleUpdate(ArticleCreate):
    """Schema for editing an article: the edit form resubmits every field."""


class ArticleResponse(BaseModel):
    """Shaped article returned to the client; dates are display strings."""

    id: int
    title: str
    announce: str
    full_text: str
    picture: str | None
    author_id: int | None
    created_date: str
    categories: list[CategoryResponse]
    comments: list[CommentResponse] | None
    comments_count: int = 0

    model_config = {"from_attributes": True}


class ArticlePageResponse(BaseModel):
    """One page of the article feed."""

    articles: list[ArticleResponse]
    most_discussed_articles: list[ArticleResponse]
    articles_count: int
    pages_count: int


class CategoryArticlesResponse(BaseModel):
    """One page of a category's articles."""

    active_category: CategoryResponse
    articles: list[ArticleResponse]
    articles_count: int
    pages_count: int
