"""Form gate shared by endpoints that accept user-submitted payloads.

A payload passes the gate only when the rule table accepts it and it also
parses into the endpoint's DTO. Both kinds of failure come back as one
:class:`ValidationReport`, so the caller has a single rejection branch.
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from blog.application.pipeline import (
    FieldError,
    FormKind,
    FormSubmission,
    FormValidator,
    ValidationReport,
)
from blog.application.pipeline.validation import Lookup
from blog.domain.exceptions import FormValidationError

FormT = TypeVar("FormT", bound=BaseModel)


def _field_name(loc: tuple) -> str:
    return str(loc[0]) if loc else "form"


def report_from_validation_error(exc: ValidationError) -> ValidationReport:
    """Field-level report for a payload the DTO could not parse."""
    errors = []
    for error in exc.errors():
        name = _field_name(error["loc"])
        errors.append(FieldError(name, f"{name.replace('_', ' ').capitalize()}: {error['msg']}"))
    return ValidationReport(tuple(errors))


async def check_form(
    validator: FormValidator,
    kind: FormKind,
    payload: Mapping[str, Any],
    schema: type[FormT],
    lookups: Mapping[str, Lookup] | None = None,
) -> tuple[ValidationReport, FormT | None]:
    """Run the rule table, then parse into ``schema``.

    Returns the report and, when it is valid, the parsed DTO.
    """
    report = await validator.run(FormSubmission(kind, payload, lookups or {}))
    if not report.is_valid:
        return report, None
    try:
        return report, schema.model_validate(payload)
    except ValidationError as exc:
        return report_from_validation_error(exc), None


def rejected(report: ValidationReport, **context: Any) -> FormValidationError:
    """Exception for a failed report; ``context`` is echoed in the 400 body."""
    return FormValidationError(report.errors_list, report.error_by_field, context)
