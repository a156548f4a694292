"""User endpoints: registration, login and per-author article views."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from blog.application.pipeline import USER_EMAIL_LOOKUP, FormKind, FormValidator, ResponseShaper
from blog.application.schemas import (
    ArticleResponse,
    FormErrorResponse,
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserResponse,
)
from blog.application.services import ArticleService, UserService
from blog.infrastructure.dependencies import (
    get_article_service,
    get_form_validator,
    get_response_shaper,
    get_user_service,
)
from blog.presentation.api.v1.forms import check_form, rejected
from blog.presentation.api.v1.params import UserId

router = APIRouter(prefix="/users", tags=["Users"])

FORM_ERRORS = {400: {"model": FormErrorResponse}}

FormPayload = Annotated[dict[str, Any] | None, Body()]


@router.get("", response_model=list[UserResponse])
async def list_users(
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    return [UserResponse.model_validate(u, from_attributes=True) for u in await service.list_users()]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=FORM_ERRORS,
)
async def register_user(
    payload: FormPayload = None,
    service: UserService = Depends(get_user_service),
    validator: FormValidator = Depends(get_form_validator),
) -> UserResponse:
    """Register a new user; the email must not be taken."""
    form = payload or {}
    report, data = await check_form(
        validator,
        FormKind.NEW_USER,
        form,
        UserCreate,
        lookups={USER_EMAIL_LOOKUP: service.email_taken},
    )
    if not report.is_valid:
        raise rejected(report)

    user = await service.register(data)
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("/login", response_model=LoginResponse, responses=FORM_ERRORS)
async def login(
    payload: FormPayload = None,
    service: UserService = Depends(get_user_service),
    validator: FormValidator = Depends(get_form_validator),
) -> LoginResponse:
    """Exchange email and password for an access/refresh token pair."""
    form = payload or {}
    report, data = await check_form(validator, FormKind.LOGIN, form, LoginRequest)
    if not report.is_valid:
        raise rejected(report)

    user, tokens = await service.authenticate(data)
    return LoginResponse(
        user=UserResponse.model_validate(user, from_attributes=True),
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
    )


@router.get("/{user_id}/articles", response_model=list[ArticleResponse])
async def list_user_articles(
    user_id: UserId,
    service: ArticleService = Depends(get_article_service),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> list[ArticleResponse]:
    """Articles written by a user."""
    articles = await service.list_by_author(user_id)
    return [ArticleResponse.model_validate(v, from_attributes=True) for v in shaper.project(articles)]


@router.get("/{user_id}/comments", response_model=list[ArticleResponse])
async def list_user_commented_articles(
    user_id: UserId,
    service: ArticleService = Depends(get_article_service),
    shaper: ResponseShaper = Depends(get_response_shaper),
) -> list[ArticleResponse]:
    """A user's articles that received comments, with those comments."""
    articles = await service.list_commented_by_author(user_id)
    return [ArticleResponse.model_validate(v, from_attributes=True) for v in shaper.project(articles)]
