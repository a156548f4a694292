"""Declarative form validation.

A form kind maps to an ordered tuple of :class:`FieldRule`; each rule binds
one payload field to an ordered tuple of checks. The engine walks the rules
in declaration order and collects every failing check's message.

    validator = FormValidator(FORM_RULES)
    report = await validator.run(FormSubmission(FormKind.NEW_COMMENT, payload))
    if not report.is_valid:
        ...

Checks are async so that uniqueness rules can consult the data store
through a lookup supplied with the submission; pure checks simply never
await.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from blog.domain.entities import MAX_ID

# Returns True when ``value`` is already taken by an existing record.
Lookup = Callable[[Any], Awaitable[bool]]


class FormKind(str, Enum):
    NEW_ARTICLE = "new_article"
    NEW_COMMENT = "new_comment"
    NEW_USER = "new_user"
    LOGIN = "login"
    NEW_CATEGORY = "new_category"


@dataclass(frozen=True)
class FormSubmission:
    """A payload to check against the rules of ``kind``."""

    kind: FormKind
    payload: Mapping[str, Any]
    lookups: Mapping[str, Lookup] = field(default_factory=dict)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationReport:
    """Both views of one validation run."""

    errors: tuple[FieldError, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def errors_list(self) -> list[str]:
        return [error.message for error in self.errors]

    @property
    def error_by_field(self) -> dict[str, str]:
        by_field: dict[str, str] = {}
        for error in self.errors:
            by_field.setdefault(error.field, error.message)
        return by_field


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return not value
    return False


# ── Checks ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Check(ABC):
    """One condition on a field value; ``message`` is reported when it fails."""

    message: str

    @abstractmethod
    async def passes(self, value: Any, submission: FormSubmission) -> bool:
        ...


@dataclass(frozen=True)
class Required(Check):
    """Value must be present and non-blank. Failing stops the field's other checks."""

    async def passes(self, value: Any, submission: FormSubmission) -> bool:
        return not is_blank(value)


@dataclass(frozen=True)
class Length(Check):
    min: int | None = None
    max: int | None = None

    async def passes(self, value: Any, submission: FormSubmission) -> bool:
        if not isinstance(value, str):
            return False
        size = len(value.strip())
        if self.min is not None and size < self.min:
            return False
        if self.max is not None and size > self.max:
            return False
        return True


@dataclass(frozen=True)
class Matches(Check):
    pattern: str = ""

    async def passes(self, value: Any, submission: FormSubmission) -> bool:
        return isinstance(value, str) and re.fullmatch(self.pattern, value.strip()) is not None


_EMAIL_PATTERN = r"[^@\s]+@[^@\s]+\.[^@\s]+"


@dataclass(frozen=True)
class Email(Check):
    async def passes(self, value: Any, submission: FormSubmission) -> bool:
        return isinstance(value, str) and re.fullmatch(_EMAIL_PATTERN, value.strip()) is not None


@dataclass(frozen=True)
class DateFormat(Check):
    format: str = "%d.%m.%Y"

    async def passes(self, value: Any, submission: FormSubmission) -> bool:
        if not isinstance(value, str):
            return False
        try:
            datetime.strptime(value.strip(), self.format)
        except ValueError:
            return False
        return True


@dataclass(frozen=True)
class FileExtension(Check):
    extensions: tuple[str, ...] = ("jpg", "jpeg", "png")

    async def passes(self, value: Any, submission: FormSubmission) -> bool:
        if not isinstance(value, str) or "." not in value:
            return False
        return value.rsplit(".", 1)[1].lower() in self.extensions


@dataclass(frozen=True)
class NonEmptyList(Check):
    async def passes(self, value: Any, submission: FormSubmission) -> bool:
        return isinstance(value, (list, tuple)) and len(value) > 0


@dataclass(frozen=True)
class IntegerList(Check):
    """Every item must be an integer or a string of digits, within the id range."""

    async def passes(self, value: Any, submission: FormSubmission) -> bool:
        if not isinstance(value, (list, tuple)):
            return False
        for item in value:
            if isinstance(item, bool):
                return False
            if isinstance(item, str) and item.strip().isascii() and item.strip().isdigit():
                item = int(item.strip())
            if not isinstance(item, int) or abs(item) > MAX_ID:
                return False
        return True


@dataclass(frozen=True)
class SameAs(Check):
    other: str = ""

    async def passes(self, value: Any, submission: FormSubmission) -> bool:
        return value == submission.payload.get(self.other)


@dataclass(frozen=True)
class Unique(Check):
    """Value must not already exist according to ``submission.lookups[lookup]``.

    Passes when no such lookup was supplied.
    """

    lookup: str = ""

    async def passes(self, value: Any, submission: FormSubmission) -> bool:
        is_taken = submission.lookups.get(self.lookup)
        if is_taken is None:
            return True
        return not await is_taken(value)


@dataclass(frozen=True)
class FieldRule:
    """Ordered checks for one field.

    ``optional`` fields skip all checks when the value is blank.
    """

    field: str
    checks: tuple[Check, ...]
    optional: bool = False


# ── Engine ───────────────────────────────────────────────────────────


class FormValidator:
    """Runs the rule table for a submission's form kind."""

    def __init__(self, rules: Mapping[FormKind, Sequence[FieldRule]]):
        self._rules = rules

    async def run(self, submission: FormSubmission) -> ValidationReport:
        errors: list[FieldError] = []
        for rule in self._rules.get(submission.kind, ()):
            value = submission.payload.get(rule.field)
            if rule.optional and is_blank(value):
                continue
            for check in rule.checks:
                if await check.passes(value, submission):
                    continue
                errors.append(FieldError(rule.field, check.message))
                if isinstance(check, Required):
                    break
        return ValidationReport(tuple(errors))

    async def validate(self, submission: FormSubmission) -> list[str]:
        """Flat list of messages, in rule declaration order."""
        return (await self.run(submission)).errors_list

    async def validate_by_field(self, submission: FormSubmission) -> dict[str, str]:
        """First failing message per field."""
        return (await self.run(submission)).error_by_field
