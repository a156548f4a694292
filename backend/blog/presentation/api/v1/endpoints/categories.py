"""Category endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from blog.application.pipeline import FormKind, FormValidator
from blog.application.schemas import CategoryCreate, CategoryResponse, FormErrorResponse
from blog.application.services import CategoryService
from blog.infrastructure.dependencies import get_category_service, get_form_validator
from blog.presentation.api.v1.forms import check_form, rejected

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> list[CategoryResponse]:
    return [
        CategoryResponse.model_validate(c, from_attributes=True)
        for c in await service.list_categories()
    ]


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": FormErrorResponse}},
)
async def create_category(
    payload: Annotated[dict[str, Any] | None, Body()] = None,
    service: CategoryService = Depends(get_category_service),
    validator: FormValidator = Depends(get_form_validator),
) -> CategoryResponse:
    form = payload or {}
    report, data = await check_form(validator, FormKind.NEW_CATEGORY, form, CategoryCreate)
    if not report.is_valid:
        raise rejected(report)

    category = await service.create_category(data)
    return CategoryResponse.model_validate(category, from_attributes=True)
