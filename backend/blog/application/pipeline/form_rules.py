"""Rule tables for every form the API accepts."""

from .validation import (
    DateFormat,
    Email,
    FieldRule,
    FileExtension,
    FormKind,
    IntegerList,
    Length,
    Matches,
    NonEmptyList,
    Required,
    SameAs,
    Unique,
)

# Lookup names supplied by orchestrators alongside a submission
USER_EMAIL_LOOKUP = "user_email"

_LETTERS_ONLY = r"[^\W\d_]+(?:[ '-][^\W\d_]+)*"
_PICTURE_MESSAGE = "Only jpg and png images are allowed"

NEW_ARTICLE_RULES = (
    FieldRule("title", (
        Required("Title is required"),
        Length("Title must be between 30 and 250 characters", min=30, max=250),
    )),
    FieldRule("announce", (
        Required("Announce is required"),
        Length("Announce must be between 30 and 250 characters", min=30, max=250),
    )),
    FieldRule("full_text", (
        Length("Full text must not exceed 1000 characters", max=1000),
    ), optional=True),
    FieldRule("categories", (
        NonEmptyList("Select at least one category"),
        IntegerList("Categories must be referenced by numeric id"),
    )),
    FieldRule("created_date", (
        Required("Publication date is required"),
        DateFormat("Publication date must be in DD.MM.YYYY format"),
    )),
    FieldRule("picture", (
        FileExtension(_PICTURE_MESSAGE),
    ), optional=True),
)

NEW_COMMENT_RULES = (
    FieldRule("text", (
        Required("Comment text is required"),
        Length("Comment must be between 20 and 1000 characters", min=20, max=1000),
    )),
)

NEW_USER_RULES = (
    FieldRule("first_name", (
        Required("First name is required"),
        Matches("First name must contain letters only", pattern=_LETTERS_ONLY),
    )),
    FieldRule("last_name", (
        Required("Last name is required"),
        Matches("Last name must contain letters only", pattern=_LETTERS_ONLY),
    )),
    FieldRule("email", (
        Required("Email is required"),
        Email("Email is not valid"),
        Unique("User with this email already exists", lookup=USER_EMAIL_LOOKUP),
    )),
    FieldRule("password", (
        Required("Password is required"),
        Length("Password must be at least 6 characters", min=6),
    )),
    FieldRule("confirm_password", (
        Required("Password confirmation is required"),
        SameAs("Passwords do not match", other="password"),
    )),
    FieldRule("avatar", (
        FileExtension(_PICTURE_MESSAGE),
    ), optional=True),
)

LOGIN_RULES = (
    FieldRule("email", (
        Required("Email is required"),
        Email("Email is not valid"),
    )),
    FieldRule("password", (
        Required("Password is required"),
    )),
)

NEW_CATEGORY_RULES = (
    FieldRule("name", (
        Required("Category name is required"),
        Length("Category name must be between 5 and 30 characters", min=5, max=30),
    )),
)

FORM_RULES = {
    FormKind.NEW_ARTICLE: NEW_ARTICLE_RULES,
    FormKind.NEW_COMMENT: NEW_COMMENT_RULES,
    FormKind.NEW_USER: NEW_USER_RULES,
    FormKind.LOGIN: LOGIN_RULES,
    FormKind.NEW_CATEGORY: NEW_CATEGORY_RULES,
}
