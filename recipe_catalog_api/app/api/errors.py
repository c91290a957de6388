"""
Translation of domain errors into HTTP responses.

Services raise subclasses of ``CatalogError``.  A single exception
handler maps each kind to its status code; the message of the error
becomes the ``detail`` of the JSON body.
"""

import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.errors import (
    CatalogError,
    DuplicateError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


logger = logging.getLogger(__name__)

STATUS_CODES: Dict[Type[CatalogError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    InvalidTokenError: status.HTTP_401_UNAUTHORIZED,
    UnauthorizedError: status.HTTP_403_FORBIDDEN,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateError: status.HTTP_409_CONFLICT,
}


def status_code_for(exc: CatalogError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_CODES:
            return STATUS_CODES[error_type]
    return status.HTTP_400_BAD_REQUEST


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    status_code = status_code_for(exc)
    logger.info("%s %s -> %d: %s", request.method, request.url.path, status_code, exc)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=status_code, content={"detail": str(exc)}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
