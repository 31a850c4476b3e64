from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from app.utils.exceptions import AppException

ModelT = TypeVar("ModelT", bound=BaseModel)

_INTEGER_ERRORS = {"int_parsing", "int_parsing_size", "int_type", "int_from_float"}


async def read_payload(request: Request) -> dict:
    """Return the request body as a dict, from either JSON or form encoding."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            raise AppException("Request body must be a JSON object", status_code=400) from None
        if not isinstance(body, dict):
            raise AppException("Request body must be a JSON object", status_code=400)
        return body

    form = await request.form()
    return {key: value for key, value in form.items()}


def _validation_message(exc: ValidationError) -> str:
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else "body"
    error_type = error["type"]

    if error_type == "missing" or error_type == "string_too_short":
        return f"{field} is required"
    if error_type in _INTEGER_ERRORS:
        return f"{field} must be an integer"
    if error_type == "greater_than_equal":
        return f"{field} must be an integer of at least {error['ctx']['ge']}"
    if error_type == "less_than_equal":
        return f"{field} must be an integer of at most {error['ctx']['le']}"
    if error_type == "value_error":
        return str(error["ctx"]["error"])
    return f"{field} is invalid"


def parse_payload(model: type[ModelT], payload: dict) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise AppException(_validation_message(exc), status_code=400) from None
