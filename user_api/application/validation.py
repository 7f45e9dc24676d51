"""
Request validators, one per endpoint.

Each validator turns an already-decoded JSON object into its request DTO or
raises PayloadValidationError with a readable, field-oriented message.
"""
# Standard library imports
from typing import Any, Dict, Type, TypeVar

# External package imports
from bson import ObjectId
from pydantic import BaseModel, ValidationError

# Local application imports
from .dto.auth_dto import LoginRequest, RefreshTokenRequest
from .dto.user_dto import CreateUserRequest


ModelT = TypeVar("ModelT", bound=BaseModel)


class PayloadValidationError(ValueError):
    """Raised when a request payload or path parameter fails validation"""


def format_validation_errors(error: ValidationError) -> str:
    """Collapse a pydantic ValidationError into 'field: message; ...'"""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


def _validate(model: Type[ModelT], payload: Dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise PayloadValidationError(format_validation_errors(e))


def validate_create_user(payload: Dict[str, Any]) -> CreateUserRequest:
    return _validate(CreateUserRequest, payload)


def validate_login_user(payload: Dict[str, Any]) -> LoginRequest:
    return _validate(LoginRequest, payload)


def validate_refresh_token(payload: Dict[str, Any]) -> RefreshTokenRequest:
    return _validate(RefreshTokenRequest, payload)


def validate_get_user_by_id(user_id: str) -> str:
    """
    Validate a user ID taken from the URL path

    Args:
        user_id: Raw path parameter

    Returns:
        The ID unchanged

    Raises:
        PayloadValidationError: If the ID is not a 24-character hex ObjectId
    """
    if not user_id:
        raise PayloadValidationError("id: must not be empty")
    if not ObjectId.is_valid(user_id) or len(user_id) != 24:
        raise PayloadValidationError(f"id: '{user_id}' is not a valid user ID")
    return user_id
