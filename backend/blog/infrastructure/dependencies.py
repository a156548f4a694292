"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from datetime import timedelta

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog.config import get_settings
from blog.application.interfaces import (
    ArticleRepository,
    CategoryRepository,
    CommentRepository,
    CredentialService,
    UserRepository,
)
from blog.application.pipeline import (
    FORM_RULES,
    DateNormalizer,
    FormValidator,
    PaginationGate,
    ResponseShaper,
    SearchHighlighter,
)
from blog.application.services import (
    ArticleService,
    CategoryService,
    CommentService,
    SearchService,
    UserService,
)
from blog.infrastructure.database.session import get_db_session
from blog.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyCommentRepository,
    SQLAlchemyUserRepository,
)
from blog.infrastructure.security.bcrypt_jwt_credentials import BcryptJWTCredentialService


# ── Pipeline components (stateless) ──────────────────────────────────


def get_date_normalizer() -> DateNormalizer:
    return DateNormalizer(presentation_tz=get_settings().presentation_tz)


def get_pagination_gate() -> PaginationGate:
    return PaginationGate(page_size=get_settings().articles_per_page)


def get_form_validator() -> FormValidator:
    return FormValidator(FORM_RULES)


def get_response_shaper(
    dates: DateNormalizer = Depends(get_date_normalizer),
) -> ResponseShaper:
    return ResponseShaper(dates)


def get_search_highlighter() -> SearchHighlighter:
    return SearchHighlighter()


def get_credential_service() -> CredentialService:
    settings = get_settings()
    return BcryptJWTCredentialService(
        access_secret=settings.jwt_access_secret,
        refresh_secret=settings.jwt_refresh_secret,
        algorithm=settings.jwt_algorithm,
        access_ttl=timedelta(minutes=settings.access_token_expire_minutes),
        refresh_ttl=timedelta(days=settings.refresh_token_expire_days),
    )


# ── Repositories ─────────────────────────────────────────────────────


async def get_article_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ArticleRepository:
    return SQLAlchemyArticleRepository(session)


async def get_comment_repository(
    session: AsyncSession = Depends(get_db_session),
) -> CommentRepository:
    return SQLAlchemyCommentRepository(session)


async def get_category_repository(
    session: AsyncSession = Depends(get_db_session),
) -> CategoryRepository:
    return SQLAlchemyCategoryRepository(session)


async def get_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> UserRepository:
    return SQLAlchemyUserRepository(session)


# ── Services ─────────────────────────────────────────────────────────


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
    categories: CategoryRepository = Depends(get_category_repository),
    users: UserRepository = Depends(get_user_repository),
    dates: DateNormalizer = Depends(get_date_normalizer),
    pagination: PaginationGate = Depends(get_pagination_gate),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repositories wired up."""
    yield ArticleService(repository, categories, users, dates, pagination)


async def get_comment_service(
    repository: CommentRepository = Depends(get_comment_repository),
    dates: DateNormalizer = Depends(get_date_normalizer),
) -> AsyncGenerator[CommentService, None]:
    yield CommentService(repository, dates)


async def get_category_service(
    repository: CategoryRepository = Depends(get_category_repository),
) -> AsyncGenerator[CategoryService, None]:
    yield CategoryService(repository)


async def get_search_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[SearchService, None]:
    yield SearchService(repository)


async def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
    credentials: CredentialService = Depends(get_credential_service),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService with bcrypt/JWT credentials."""
    yield UserService(repository, credentials)
