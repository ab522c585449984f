"""Interface layer error handlers.

Domain errors raised by use cases surface as HTTP status codes here, so
routes only translate authentication failures themselves.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from life.domain.error import AuthenticationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Map NotFoundError to 404."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Map domain ValidationError to 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def authentication_handler(
    request: Request, exc: AuthenticationError
) -> JSONResponse:
    """Map credential store rejections to 400 with the store's message."""
    logger.info(f"Authentication rejected on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handlers on an app."""
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_handler)
    app.add_exception_handler(AuthenticationError, authentication_handler)
