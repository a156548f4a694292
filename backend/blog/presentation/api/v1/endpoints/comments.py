"""Comment endpoints: latest comments feed and moderation."""

from fastapi import APIRouter, Depends

from blog.application.pipeline import ResponseShaper
from blog.application.schemas import CommentResponse
from blog.application.services import CommentService
from blog.config import get_settings
from blog.infrastructure.dependencies import get_comment_service, get_response_shaper
from blog.presentation.api.v1.params import CommentId

router = APIRouter(prefix="/comments", tags=["Comments"])


@router.get("", response_model=list[CommentResponse])
async def list_latest_comments(
    service: CommentService = Depends(get_comment_service),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> list[CommentResponse]:
    """Most recent comments across the blog."""
    comments = await service.list_latest(get_settings().latest_comments_limit)
    return [
        CommentResponse.model_validate(view, from_attributes=True)
        for view in shaper.project_comments(comments)
    ]


@router.delete("/{comment_id}", response_model=CommentResponse)
async def delete_comment(
    comment_id: CommentId,
    service: CommentService = Depends(get_comment_service),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> CommentResponse:
    """Delete a comment and return it as it was."""
    comment = await service.delete_comment(comment_id)
    return CommentResponse.model_validate(shaper.project_comment(comment), from_attributes=True)
