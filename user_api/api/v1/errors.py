# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.error_dto import ErrorResponse

logger = logging.getLogger(__name__)


def respond_with_error(
    message: str,
    error: BaseException,
    status_code: int,
    exc_info: bool = False,
) -> JSONResponse:
    """
    Build the JSON error envelope

    Args:
        message: Short context for the failure, e.g. "unable to get user"
        error: Underlying exception; its text follows the context
        status_code: HTTP status to return
        exc_info: Attach the traceback of error to the log record

    Returns:
        JSONResponse with body {"message": "<message>: <error>"}
    """
    body = ErrorResponse(message=f"{message}: {error}")
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(body.message, exc_info=error if exc_info else None)
    else:
        logger.warning(body.message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def unhandled_exception_handler(request: Request, exception: Exception) -> JSONResponse:
    return respond_with_error(
        "internal server error",
        exception,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        exc_info=True,
    )


def register_error_handlers(application: FastAPI) -> None:
    """Route any exception that escapes a handler through the JSON envelope"""
    application.add_exception_handler(Exception, unhandled_exception_handler)
