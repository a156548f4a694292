"""Article endpoints: feed, category pages, CRUD and commenting."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from blog.application.pipeline import FormKind, FormValidator, ResponseShaper
from blog.application.schemas import (
    ArticleCreate,
    ArticlePageResponse,
    ArticleResponse,
    ArticleUpdate,
    CategoryArticlesResponse,
    CategoryResponse,
    CommentCreate,
    CommentResponse,
    FormErrorResponse,
)
from blog.application.services import ArticleService, CategoryService, CommentService
from blog.config import get_settings
from blog.domain.entities import Article
from blog.infrastructure.dependencies import (
    get_article_service,
    get_category_service,
    get_comment_service,
    get_form_validator,
    get_response_shaper,
)
from blog.presentation.api.v1.forms import check_form, rejected
from blog.presentation.api.v1.params import ArticleId, CategoryId, Page

router = APIRouter(prefix="/articles", tags=["Articles"])

FORM_ERRORS = {400: {"model": FormErrorResponse}}

FormPayload = Annotated[dict[str, Any] | None, Body()]


def _shape(shaper: ResponseShaper, article: Article) -> ArticleResponse:
    return ArticleResponse.model_validate(shaper.project(article), from_attributes=True)


def _shape_all(shaper: ResponseShaper, articles: list[Article]) -> list[ArticleResponse]:
    return [ArticleResponse.model_validate(v, from_attributes=True) for v in shaper.project(articles)]


async def _categories_context(categories: CategoryService) -> list[dict]:
    return [
        CategoryResponse.model_validate(c, from_attributes=True).model_dump()
        for c in await categories.list_categories()
    ]


@router.get("", response_model=ArticlePageResponse)
async def list_articles(
    page: Page,
    service: ArticleService = Depends(get_article_service),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> ArticlePageResponse:
    """One page of the feed plus the most discussed articles."""
    result = await service.list_page(page)
    most_discussed = await service.list_most_discussed(get_settings().most_discussed_limit)
    return ArticlePageResponse(
        articles=_shape_all(shaper, result.articles),
        most_discussed_articles=_shape_all(shaper, most_discussed),
        articles_count=result.articles_count,
        pages_count=result.pages_count,
    )


@router.get("/most-discussed", response_model=list[ArticleResponse])
async def list_most_discussed(
    service: ArticleService = Depends(get_article_service),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> list[ArticleResponse]:
    articles = await service.list_most_discussed(get_settings().most_discussed_limit)
    return _shape_all(shaper, articles)


@router.get("/category/{category_id}", response_model=CategoryArticlesResponse)
async def list_category_articles(
    category_id: CategoryId,
    page: Page,
    service: ArticleService = Depends(get_article_service),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> CategoryArticlesResponse:
    """One page of a category's articles."""
    category, result = await service.list_category_page(category_id, page)
    return CategoryArticlesResponse(
        active_category=CategoryResponse.model_validate(category, from_attributes=True),
        articles=_shape_all(shaper, result.articles),
        articles_count=result.articles_count,
        pages_count=result.pages_count,
    )


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: ArticleId,
    service: ArticleService = Depends(get_article_service),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> ArticleResponse:
    """Retrieve a single article with its comments."""
    return _shape(shaper, await service.get_article(article_id))


@router.post(
    "",
    response_model=ArticleResponse,
    status_code=status.HTTP_201_CREATED,
    responses=FORM_ERRORS,
)
async def create_article(
    payload: FormPayload = None,
    service: ArticleService = Depends(get_article_service),
    categories: CategoryService = Depends(get_category_service),
    validator: FormValidator = Depends(get_form_validator),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> ArticleResponse:
    """Create a new article from the article form."""
    form = payload or {}
    report, data = await check_form(validator, FormKind.NEW_ARTICLE, form, ArticleCreate)
    if not report.is_valid:
        raise rejected(report, categories=await _categories_context(categories))

    article = await service.create_article(data)
    return _shape(shaper, article)


@router.put("/{article_id}", response_model=ArticleResponse, responses=FORM_ERRORS)
async def update_article(
    article_id: ArticleId,
    payload: FormPayload = None,
    service: ArticleService = Depends(get_article_service),
    categories: CategoryService = Depends(get_category_service),
    validator: FormValidator = Depends(get_form_validator),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> ArticleResponse:
    """Resubmit the article form for an existing article."""
    form = payload or {}
    article = await service.get_article(article_id)

    report, data = await check_form(validator, FormKind.NEW_ARTICLE, form, ArticleUpdate)
    if not report.is_valid:
        raise rejected(
            report,
            article=_shape(shaper, article).model_dump(),
            categories=await _categories_context(categories),
        )

    updated = await service.update_article(article, data)
    return _shape(shaper, updated)


@router.delete("/{article_id}", response_model=ArticleResponse)
async def delete_article(
    article_id: ArticleId,
    service: ArticleService = Depends(get_article_service),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> ArticleResponse:
    """Delete an article and return it as it was."""
    return _shape(shaper, await service.delete_article(article_id))


@router.post(
    "/{article_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    responses=FORM_ERRORS,
)
async def create_comment(
    article_id: ArticleId,
    payload: FormPayload = None,
    articles: ArticleService = Depends(get_article_service),
    comments: CommentService = Depends(get_comment_service),
    validator: FormValidator = Depends(get_form_validator),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> CommentResponse:
    """Post a comment under an article."""
    form = payload or {}
    article = await articles.get_article(article_id)

    report, data = await check_form(validator, FormKind.NEW_COMMENT, form, CommentCreate)
    if not report.is_valid:
        raise rejected(report, article=_shape(shaper, article).model_dump())

    comment = await comments.create_comment(article, data)
    return CommentResponse.model_validate(shaper.project_comment(comment), from_attributes=True)
