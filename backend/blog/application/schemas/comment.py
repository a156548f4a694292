"""Pydantic DTOs for comments."""

from pydantic import BaseModel, Field

from blog.domain.entities import MAX_ID


class CommentCreate(BaseModel):
    """Typed form of a new-comment payload that already passed the rule table."""

    text: str
    user_id: int | None = Field(None, ge=1, le=MAX_ID)


class CommentResponse(BaseModel):
    id: int
    article_id: int
    user_id: int | None
    text: str
    created_date: str

    model_config = {"from_attributes": True}
