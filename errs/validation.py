"""
errs.validation

Purpose:
    Convert field-validation failures into a BAD_REQUEST Error with one
    info entry per offending field.

Notes:
    - FieldViolation is the library-neutral shape; pydantic / FastAPI
      validation errors are translated into it.
    - Info keys are lowerCamelCase field names.
    - Several violations on one field: the last one wins.
    - Anything not recognized as field violations ends up as {"error": str(exc)}.

Author:
    Kanir Pandya

Created:
    2026-10-18
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Iterable, Sequence

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from pydantic.alias_generators import to_camel, to_snake

from errs.contracts.error_codes import ErrorCode, status_text
from errs.errors import Error, ErrorOptions, new_error


@dataclass(frozen=True)
class FieldViolation:
    field: str
    rule: str
    param: str | None = None


class FieldViolationError(ValueError):
    """Validation failure carrying one or more FieldViolation records."""

    def __init__(self, violations: Iterable[FieldViolation]) -> None:
        self.violations: tuple[FieldViolation, ...] = tuple(violations)
        super().__init__(
            "; ".join(f"{v.field}: {v.rule}" for v in self.violations) or "validation failed"
        )


# pydantic error type -> (rule tag, ctx key holding the rule parameter)
_PYDANTIC_RULES: dict[str, tuple[str, str | None]] = {
    "missing": ("required", None),
    "string_too_long": ("max", "max_length"),
    "too_long": ("max", "max_length"),
    "less_than_equal": ("max", "le"),
    "string_too_short": ("min", "min_length"),
    "too_short": ("min", "min_length"),
    "greater_than_equal": ("min", "ge"),
    "enum": ("oneof", "expected"),
    "literal_error": ("oneof", "expected"),
}


def lower_camel(name: str) -> str:
    """`FirstName`, `first_name` and `firstName` all become `firstName`."""
    return to_camel(to_snake(name))


def _field_from_loc(loc: Sequence[Any]) -> str:
    for part in reversed(tuple(loc)):
        if isinstance(part, str):
            return part
    return str(loc[-1]) if loc else ""


def _format_param(param: Any) -> str | None:
    if param is None:
        return None
    # pydantic widens bounds to the field type (ge=0 on a float is 0.0).
    if isinstance(param, float) and param.is_integer():
        return str(int(param))
    return str(param)


def _violation_from_pydantic(err: dict[str, Any]) -> FieldViolation:
    err_type = str(err.get("type", ""))
    ctx = err.get("ctx") or {}

    rule, param_key = _PYDANTIC_RULES.get(err_type, (err_type, "param"))
    param = ctx.get(param_key) if param_key else None

    return FieldViolation(
        field=_field_from_loc(err.get("loc", ())),
        rule=rule,
        param=_format_param(param),
    )


def field_violations(failure: BaseException) -> list[FieldViolation] | None:
    """
    Extract field violations from a known validation error.

    Returns None when `failure` is not a recognized validation shape.
    """
    if isinstance(failure, FieldViolationError):
        return list(failure.violations)

    if isinstance(failure, (ValidationError, RequestValidationError)):
        return [_violation_from_pydantic(e) for e in failure.errors()]

    return None


def violation_message(violation: FieldViolation) -> str:
    field = lower_camel(violation.field)
    param = violation.param

    if violation.rule == "required":
        return f"{field} is required"
    if violation.rule == "max":
        return f"{field} cannot be longer than {param}"
    if violation.rule == "min":
        return f"{field} must be longer than {param}"
    if violation.rule == "email":
        return "invalid email format"
    if violation.rule == "len":
        return f"{field} must be {param} characters long"
    if violation.rule == "oneof":
        return f"{field} must be {param}"

    return f"{field} is not valid"


def validation_info(failure: BaseException) -> dict[str, Any]:
    violations = field_violations(failure)
    if violations is None:
        return {"error": str(failure)}

    result: dict[str, Any] = {}
    for v in violations:
        result[lower_camel(v.field)] = violation_message(v)
    return result


def from_validation_failure(failure: BaseException) -> Error:
    return new_error(
        ErrorCode.BAD_REQUEST,
        status_text(HTTPStatus.BAD_REQUEST),
        ErrorOptions(info=validation_info(failure)),
    )


invalid_struct_error = from_validation_failure
