"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from blog.application.schemas import ErrorResponse
from blog.presentation.api.v1.endpoints.health import router as health_router
from blog.presentation.api.v1.endpoints.articles import router as articles_router
from blog.presentation.api.v1.endpoints.comments import router as comments_router
from blog.presentation.api.v1.endpoints.categories import router as categories_router
from blog.presentation.api.v1.endpoints.search import router as search_router
from blog.presentation.api.v1.endpoints.users import router as users_router

router = APIRouter(
    prefix="/v1",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
router.include_router(health_router)
router.include_router(articles_router)
router.include_router(comments_router)
router.include_router(categories_router)
router.include_router(search_router)
router.include_router(users_router)
