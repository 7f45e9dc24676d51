# Standard library imports
import logging
from typing import Any, Dict

# External package imports
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.auth_dto import LoginResponse
from ...application.dto.error_dto import ErrorResponse
from ...application.dto.user_dto import CreateUserResponse, GetUserResponse, UserResponse
from ...application.validation import (
    PayloadValidationError,
    validate_create_user,
    validate_get_user_by_id,
    validate_login_user,
    validate_refresh_token,
)
from ...core.security import TokenManager, TokenValidationError
from ...di.container import get_container
from ...domain.models.user import CreateUser
from ...domain.services.user_service import UserService
from .errors import respond_with_error

logger = logging.getLogger(__name__)


router = APIRouter(tags=["users"])

_ERROR_RESPONSES: Dict[int | str, Dict[str, Any]] = {
    code: {"model": ErrorResponse}
    for code in (
        status.HTTP_400_BAD_REQUEST,
        status.HTTP_403_FORBIDDEN,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
}


async def _decode_json_object(request: Request) -> Dict[str, Any]:
    """
    Parse the request body as a JSON object

    Raises:
        ValueError: If the body is not valid JSON or not an object
    """
    payload = await request.json()
    if not isinstance(payload, dict):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    return payload


def _referer(request: Request) -> str:
    return request.headers.get("referer", "")


@router.post(
    "/users",
    response_model=CreateUserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
)
async def create_user(request: Request):
    """
    Create a new user

    Returns:
        CreateUserResponse with the stored user under "user"
    """
    try:
        payload = await _decode_json_object(request)
    except ValueError as exception:
        return respond_with_error("unable to decode json request", exception, status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        create_request = validate_create_user(payload)
    except PayloadValidationError as exception:
        return respond_with_error("Validation error", exception, status.HTTP_400_BAD_REQUEST)

    new_user = CreateUser(
        email=create_request.email,
        first_name=create_request.first_name,
        last_name=create_request.last_name,
        password=create_request.password,
        role=create_request.role.value,
        username=create_request.username,
    )

    user_service = get_container().get(UserService)
    try:
        user = await user_service.create(new_user)
    except Exception as exception:
        return respond_with_error("unable to add user", exception, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return CreateUserResponse(user=UserResponse.from_user(user))


@router.get("/users/{user_id}", response_model=GetUserResponse, responses=_ERROR_RESPONSES)
async def get_user_by_id(user_id: str):
    """
    Get a user by ID

    Lookup failures, "not found" included, are reported as 500.
    """
    try:
        validate_get_user_by_id(user_id)
    except PayloadValidationError as exception:
        return respond_with_error("Validation error", exception, status.HTTP_400_BAD_REQUEST)

    user_service = get_container().get(UserService)
    try:
        user = await user_service.get_by_id(user_id)
    except Exception as exception:
        return respond_with_error("unable to get user", exception, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return GetUserResponse(user=UserResponse.from_user(user))


@router.post("/login", response_model=LoginResponse, responses=_ERROR_RESPONSES)
async def login_user(request: Request):
    """
    Authenticate a user and return an access token

    Every service failure maps to 400, whether the credentials were wrong
    or the lookup itself failed.
    """
    try:
        payload = await _decode_json_object(request)
    except ValueError as exception:
        return respond_with_error("unable to decode json request", exception, status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        login_request = validate_login_user(payload)
    except PayloadValidationError as exception:
        return respond_with_error("Validation error", exception, status.HTTP_400_BAD_REQUEST)

    user_service = get_container().get(UserService)
    try:
        token = await user_service.login(login_request.username, login_request.password, _referer(request))
    except Exception as exception:
        return respond_with_error("unable to log in user", exception, status.HTTP_400_BAD_REQUEST)

    return LoginResponse(token=token)


@router.post("/refresh", response_model=LoginResponse, responses=_ERROR_RESPONSES)
async def refresh_token(request: Request):
    """
    Exchange a valid access token for a fresh one

    The token is verified here, before the service is involved: wrong
    algorithm, bad signature, expiry or malformed claims all give 403.
    """
    try:
        payload = await _decode_json_object(request)
    except ValueError as exception:
        return respond_with_error("unable to decode json request", exception, status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        refresh_request = validate_refresh_token(payload)
    except PayloadValidationError as exception:
        return respond_with_error("Validation error", exception, status.HTTP_400_BAD_REQUEST)

    container = get_container()
    token_manager = container.get(TokenManager)
    try:
        claims = token_manager.verify(refresh_request.token)
    except TokenValidationError as exception:
        return respond_with_error("Access not allowed", exception, status.HTTP_403_FORBIDDEN)

    user_service = container.get(UserService)
    try:
        new_token = await user_service.refresh_token(claims.sub, claims.username, claims.role, _referer(request))
    except Exception as exception:
        return respond_with_error("unable to refresh token", exception, status.HTTP_500_INTERNAL_SERVER_ERROR)

    return LoginResponse(token=new_token)
