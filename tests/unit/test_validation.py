"""
tests.unit.test_validation

Purpose:
    Validation failure -> BAD_REQUEST mapping, per-rule messages and
    pydantic translation.
"""

from __future__ import annotations

from typing import Literal

import pytest
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from errs import ErrorCode, FieldViolation, FieldViolationError, from_validation_failure
from errs.validation import lower_camel, violation_message


class Signup(BaseModel):
    first_name: str
    nickname: str = Field(default="", max_length=5)
    age: int = Field(default=18, ge=18)
    role: Literal["admin", "user"] = "user"
    email: str = "someone@example.com"
    pin: str = "0000"

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if "@" not in v:
            raise PydanticCustomError("email", "value is not an email address")
        return v

    @field_validator("pin")
    @classmethod
    def validate_pin(cls, v: str) -> str:
        if len(v) != 4:
            raise PydanticCustomError("len", "pin must have {param} digits", {"param": 4})
        return v


def _signup_error(**data) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        Signup.model_validate(data)
    return exc_info.value


def test_required_field() -> None:
    err = from_validation_failure(FieldViolationError([FieldViolation("Name", "required")]))

    assert err.code == ErrorCode.BAD_REQUEST
    assert err.message == "Bad Request"
    assert err.http_status_code() == 400
    assert err.info == {"name": "name is required"}


def test_min_rule_with_param() -> None:
    err = from_validation_failure(FieldViolationError([FieldViolation("Age", "min", "18")]))
    assert err.info == {"age": "age must be longer than 18"}


@pytest.mark.parametrize(
    "violation,expected",
    [
        (FieldViolation("Title", "max", "10"), "title cannot be longer than 10"),
        (FieldViolation("Email", "email"), "invalid email format"),
        (FieldViolation("ZipCode", "len", "5"), "zipCode must be 5 characters long"),
        (FieldViolation("Color", "oneof", "red green"), "color must be red green"),
        (FieldViolation("StartDate", "datetime", "2006-01-02"), "startDate is not valid"),
    ],
)
def test_rule_messages(violation: FieldViolation, expected: str) -> None:
    assert violation_message(violation) == expected


@pytest.mark.parametrize(
    "name,expected",
    [("Name", "name"), ("FirstName", "firstName"), ("first_name", "firstName"), ("age", "age")],
)
def test_lower_camel(name: str, expected: str) -> None:
    assert lower_camel(name) == expected


def test_plain_error_goes_under_error_key() -> None:
    err = from_validation_failure(ValueError("boom"))
    assert err.code == ErrorCode.BAD_REQUEST
    assert err.info == {"error": "boom"}


def test_duplicate_field_last_violation_wins() -> None:
    err = from_validation_failure(
        FieldViolationError(
            [
                FieldViolation("Name", "required"),
                FieldViolation("Name", "max", "3"),
            ]
        )
    )
    assert err.info == {"name": "name cannot be longer than 3"}


def test_pydantic_validation_error() -> None:
    exc = _signup_error(nickname="toolong", age=12, role="root")
    err = from_validation_failure(exc)

    assert err.info == {
        "firstName": "firstName is required",
        "nickname": "nickname cannot be longer than 5",
        "age": "age must be longer than 18",
        "role": "role must be 'admin' or 'user'",
    }


def test_pydantic_custom_rule_types() -> None:
    exc = _signup_error(first_name="Ada", email="nope", pin="12")
    err = from_validation_failure(exc)

    assert err.info == {
        "email": "invalid email format",
        "pin": "pin must be 4 characters long",
    }


class Quote(BaseModel):
    discount: float = Field(default=0.0, ge=0)
    ratio: float = Field(default=0.5, le=1)
    price: float = Field(default=1.0, ge=0.5)


def test_float_bounds_keep_declared_form() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Quote.model_validate({"discount": -1.0, "ratio": 2.0, "price": 0.1})

    err = from_validation_failure(exc_info.value)
    assert err.info == {
        "discount": "discount must be longer than 0",
        "ratio": "ratio cannot be longer than 1",
        "price": "price must be longer than 0.5",
    }
