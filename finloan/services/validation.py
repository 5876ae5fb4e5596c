"""
Payload validation for enquiry and registration bodies.

``validate_payload`` checks a raw request body against a named schema and
either returns the validated model or raises ``ValidationError`` with a
single message describing the first violated constraint.
"""

from typing import Any, Dict, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from finloan.core.exceptions import ValidationError
from finloan.schemas import EnquiryPayload, RegistrationPayload

SCHEMAS: Dict[str, Type[BaseModel]] = {
    "enquiry": EnquiryPayload,
    "registration": RegistrationPayload,
}

_NUMBER_ERRORS = {
    "int_type", "int_parsing", "int_from_float",
    "float_type", "float_parsing", "finite_number",
}


def first_error_message(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request payload"
    return describe_error(errors[0])


def describe_error(error: Dict[str, Any]) -> str:
    field = ".".join(str(part) for part in error.get("loc", ())) or "value"
    kind = error.get("type", "")
    msg = error.get("msg", "is invalid")

    if kind == "missing":
        return f'"{field}" is required'
    if kind == "extra_forbidden":
        return f'"{field}" is not allowed'
    if kind in _NUMBER_ERRORS:
        return f'"{field}" must be a number'
    if kind == "string_type":
        return f'"{field}" must be a string'
    if kind == "string_too_short":
        return f'"{field}" is not allowed to be empty'
    if kind == "model_type" or kind == "dict_type":
        return f'"{field}" must be of type object'
    if kind == "value_error" and "email" in msg.lower():
        return f'"{field}" must be a valid email'
    return f'"{field}" {msg}'


def validate_payload(schema_name: str, payload: Any) -> BaseModel:
    schema = SCHEMAS[schema_name]
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(first_error_message(e)) from e
