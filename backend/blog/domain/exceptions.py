"""Domain-specific exceptions: framework-independent."""

from typing import Any


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class PageNotFoundError(Exception):
    """Raised when a listing page lies beyond the last available page."""

    def __init__(self, page: int):
        self.page = page
        super().__init__(f"Page {page} not found")


class MalformedParameterError(Exception):
    """Raised when an id-like request parameter is not an integer."""

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value
        super().__init__(f"Parameter '{name}' must be an integer, got '{value}'")


class FormValidationError(Exception):
    """Raised when a submitted form breaks one or more field rules.

    Carries both error views produced by the validation pipeline, plus
    optional ``context`` the client needs to redisplay the form
    (e.g. the list of categories or the article being edited).
    """

    def __init__(
        self,
        errors_list: list[str],
        error_by_field: dict[str, str],
        context: dict[str, Any] | None = None,
    ):
        self.errors_list = errors_list
        self.error_by_field = error_by_field
        self.context = context or {}
        super().__init__("Invalid data sent")


class InvalidCredentialsError(Exception):
    """Raised when a login attempt does not match a registered user."""

    def __init__(self, message: str = "Wrong email or password"):
        self.message = message
        super().__init__(message)
