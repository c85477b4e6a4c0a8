from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    # undecodable or mistyped body -> 400, same shape as HTTPException
    logger.warning("Invalid request payload on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request payload"},
    )
