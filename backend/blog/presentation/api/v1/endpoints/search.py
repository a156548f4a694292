"""Article title search."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from blog.application.pipeline import ResponseShaper, SearchHighlighter
from blog.application.schemas import ArticleResponse
from blog.application.services import SearchService
from blog.infrastructure.dependencies import (
    get_response_shaper,
    get_search_highlighter,
    get_search_service,
)
from blog.presentation.api.errors import INVALID_DATA_MESSAGE

router = APIRouter(prefix="/search", tags=["Search"])


@router.get("", response_model=list[ArticleResponse])
async def search_articles(
    query: str | None = Query(None, description="Text to look for in article titles"),
    service: SearchService = Depends(get_search_service),
    shaper: ResponseShaper = Depends(get_response_shaper),
    highlighter: SearchHighlighter = Depends(get_search_highlighter),
) -> list[ArticleResponse]:
    """Articles whose title contains ``query``, with the match wrapped in ``<b>``."""
    if query is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_DATA_MESSAGE)

    articles = await service.find_all(query)
    views = highlighter.highlight(shaper.project(articles), query)
    return [ArticleResponse.model_validate(v, from_attributes=True) for v in views]
