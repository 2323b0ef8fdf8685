import logging

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from logging_config import LoggerService

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Something went wrong. Please contact the Administrator"


def internal_error(log: LoggerService, message: str) -> HTTPException:
    """Log the real cause and hand back a generic 500 for the client."""
    log.log_error(message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR_DETAIL,
    )


def describe(exc: Exception) -> str:
    return f"{exc} - {exc.__cause__}"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Missing or incomplete payloads are a plain bad request here, not a 422
    logger.warning(
        "Rejected %s %s with invalid data: %s",
        request.method,
        request.url.path,
        exc.errors(),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )
