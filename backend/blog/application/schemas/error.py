"""Error payloads shared by every endpoint."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: bool = True
    status: int
    message: str


class FormErrors(BaseModel):
    errors_list: list[str]
    error_by_field: dict[str, str]


class FormErrorResponse(ErrorResponse):
    """400 body for rejected forms; endpoints may add redisplay context."""

    errors: FormErrors
