"""Request parameter parsing shared by v1 endpoints.

Id-like path parameters are declared as plain strings and converted here,
so a non-numeric value is rejected with a 400 before any service runs.
"""

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends, Query, Request

from blog.domain.entities import MAX_ID
from blog.domain.exceptions import EntityNotFoundError, MalformedParameterError


def numeric_path_param(name: str, entity_type: str) -> Callable[[Request], int]:
    """Dependency that parses the ``name`` path parameter as a positive integer.

    Ids past the column range cannot exist, so they are reported as not
    found without a lookup.
    """

    def dependency(request: Request) -> int:
        raw = request.path_params.get(name, "")
        if not (raw.isascii() and raw.isdigit()):
            raise MalformedParameterError(name, raw)
        value = int(raw)
        if value > MAX_ID:
            raise EntityNotFoundError(entity_type, value)
        return value

    return dependency


def page_param(page: Annotated[str | None, Query()] = None) -> int:
    """The requested listing page; defaults to 1."""
    if page is None or not page.strip():
        return 1
    try:
        return int(page.strip())
    except ValueError:
        raise MalformedParameterError("page", page) from None


ArticleId = Annotated[int, Depends(numeric_path_param("article_id", "Article"))]
CommentId = Annotated[int, Depends(numeric_path_param("comment_id", "Comment"))]
CategoryId = Annotated[int, Depends(numeric_path_param("category_id", "Category"))]
UserId = Annotated[int, Depends(numeric_path_param("user_id", "User"))]
Page = Annotated[int, Depends(page_param)]
