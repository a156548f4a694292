from .dates import DateNormalizer, DISPLAY_DATE_FORMAT, INVALID_DATE
from .form_rules import FORM_RULES, USER_EMAIL_LOOKUP
from .highlight import SearchHighlighter, highlight_first
from .pagination import ARTICLES_PER_PAGE, PaginationGate
from .shaping import ArticleView, CommentView, ResponseShaper
from .validation import (
    FieldError,
    FieldRule,
    FormKind,
    FormSubmission,
    FormValidator,
    ValidationReport,
)

__all__ = [
    "DateNormalizer",
    "DISPLAY_DATE_FORMAT",
    "INVALID_DATE",
    "FORM_RULES",
    "USER_EMAIL_LOOKUP",
    "SearchHighlighter",
    "highlight_first",
    "ARTICLES_PER_PAGE",
    "PaginationGate",
    "ArticleView",
    "CommentView",
    "ResponseShaper",
    "FieldError",
    "FieldRule",
    "FormKind",
    "FormSubmission",
    "FormValidator",
    "ValidationReport",
]
