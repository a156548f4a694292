"""Unit tests for the declarative form validation pipeline."""

import pytest

from blog.application.pipeline import (
    FORM_RULES,
    USER_EMAIL_LOOKUP,
    FieldRule,
    FormKind,
    FormSubmission,
    FormValidator,
)
from blog.application.pipeline.validation import Check, Length, Required

VALID_ARTICLE = {
    "title": "An article title that is comfortably over thirty characters",
    "announce": "An announce that is also comfortably over thirty characters",
    "full_text": "Body",
    "categories": [1, "2"],
    "created_date": "21.03.2024",
}

VALID_USER = {
    "first_name": "Anna",
    "last_name": "Smith-Jones",
    "email": "anna@example.com",
    "password": "123456",
    "confirm_password": "123456",
    "avatar": "avatar.jpg",
}


@pytest.fixture
def validator() -> FormValidator:
    return FormValidator(FORM_RULES)


@pytest.mark.asyncio
async def test_valid_article_passes(validator: FormValidator):
    report = await validator.run(FormSubmission(FormKind.NEW_ARTICLE, VALID_ARTICLE))
    assert report.is_valid
    assert report.errors_list == []
    assert report.error_by_field == {}


@pytest.mark.asyncio
async def test_missing_required_field_reported_in_both_views(validator: FormValidator):
    payload = {k: v for k, v in VALID_ARTICLE.items() if k != "title"}
    submission = FormSubmission(FormKind.NEW_ARTICLE, payload)

    errors = await validator.validate(submission)
    by_field = await validator.validate_by_field(submission)

    assert errors == ["Title is required"]
    assert by_field == {"title": "Title is required"}


@pytest.mark.asyncio
async def test_flat_list_follows_declaration_order(validator: FormValidator):
    payload = {"created_date": "yesterday", "title": "short"}
    errors = await validator.validate(FormSubmission(FormKind.NEW_ARTICLE, payload))
    assert errors == [
        "Title must be between 30 and 250 characters",
        "Announce is required",
        "Select at least one category",
        "Categories must be referenced by numeric id",
        "Publication date must be in DD.MM.YYYY format",
    ]


@pytest.mark.asyncio
async def test_first_failure_per_field_wins():
    rules = {
        FormKind.NEW_COMMENT: (
            FieldRule("text", (Length("too short", min=10), Length("way too short", min=20))),
        )
    }
    validator = FormValidator(rules)
    submission = FormSubmission(FormKind.NEW_COMMENT, {"text": "tiny"})

    assert await validator.validate(submission) == ["too short", "way too short"]
    assert await validator.validate_by_field(submission) == {"text": "too short"}


@pytest.mark.asyncio
async def test_optional_fields_skip_checks_when_blank(validator: FormValidator):
    payload = dict(VALID_ARTICLE, picture="", full_text=None)
    assert await validator.validate(FormSubmission(FormKind.NEW_ARTICLE, payload)) == []


@pytest.mark.asyncio
async def test_optional_field_checked_when_present(validator: FormValidator):
    payload = dict(VALID_ARTICLE, picture="photo.gif")
    by_field = await validator.validate_by_field(FormSubmission(FormKind.NEW_ARTICLE, payload))
    assert by_field == {"picture": "Only jpg and png images are allowed"}


@pytest.mark.asyncio
async def test_no_rules_yields_empty_results():
    validator = FormValidator({})
    submission = FormSubmission(FormKind.LOGIN, {})
    assert await validator.validate(submission) == []
    assert await validator.validate_by_field(submission) == {}


@pytest.mark.asyncio
async def test_validation_is_idempotent(validator: FormValidator):
    payload = {"text": "short"}
    submission = FormSubmission(FormKind.NEW_COMMENT, payload)
    first = await validator.run(submission)
    second = await validator.run(submission)
    assert first == second
    assert payload == {"text": "short"}


@pytest.mark.asyncio
async def test_password_confirmation_must_match(validator: FormValidator):
    payload = dict(VALID_USER, confirm_password="654321")
    by_field = await validator.validate_by_field(FormSubmission(FormKind.NEW_USER, payload))
    assert by_field == {"confirm_password": "Passwords do not match"}


@pytest.mark.asyncio
async def test_names_must_be_letters(validator: FormValidator):
    payload = dict(VALID_USER, first_name="R2D2")
    by_field = await validator.validate_by_field(FormSubmission(FormKind.NEW_USER, payload))
    assert by_field == {"first_name": "First name must contain letters only"}


@pytest.mark.asyncio
async def test_unique_email_uses_lookup(validator: FormValidator):
    seen: list[str] = []

    async def email_taken(value) -> bool:
        seen.append(value)
        return value == "anna@example.com"

    submission = FormSubmission(
        FormKind.NEW_USER, VALID_USER, lookups={USER_EMAIL_LOOKUP: email_taken}
    )
    errors = await validator.validate(submission)

    assert errors == ["User with this email already exists"]
    assert seen == ["anna@example.com"]


@pytest.mark.asyncio
async def test_unique_passes_without_lookup(validator: FormValidator):
    assert await validator.validate(FormSubmission(FormKind.NEW_USER, VALID_USER)) == []


@pytest.mark.asyncio
async def test_required_failure_skips_remaining_checks():
    rules = {
        FormKind.NEW_CATEGORY: (
            FieldRule("name", (Required("Name is required"), Length("Name too short", min=5))),
        )
    }
    errors = await FormValidator(rules).validate(FormSubmission(FormKind.NEW_CATEGORY, {"name": "  "}))
    assert errors == ["Name is required"]


@pytest.mark.asyncio
async def test_login_requires_valid_email(validator: FormValidator):
    errors = await validator.validate(
        FormSubmission(FormKind.LOGIN, {"email": "not-an-email", "password": "x"})
    )
    assert errors == ["Email is not valid"]


def test_check_is_abstract():
    with pytest.raises(TypeError):
        Check("never reported")


@pytest.mark.asyncio
async def test_category_ids_past_the_key_range_are_rejected(validator: FormValidator):
    payload = dict(VALID_ARTICLE, categories=["100000000000000000000"])
    by_field = await validator.validate_by_field(FormSubmission(FormKind.NEW_ARTICLE, payload))
    assert by_field == {"categories": "Categories must be referenced by numeric id"}
