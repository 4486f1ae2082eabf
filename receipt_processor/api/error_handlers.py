"""
Custom exception handlers for FastAPI.
Every error response carries a single ``error`` message.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from receipt_processor.core.exceptions import IdentifierGenerationError
from receipt_processor.core.observability import sentry_capture

logger = logging.getLogger(__name__)

INVALID_RECEIPT_MESSAGE = "The receipt is invalid"


def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("[api] rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"error": INVALID_RECEIPT_MESSAGE},
    )


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def identifier_generation_exception_handler(request: Request, exc: IdentifierGenerationError):
    logger.error("[api] receipt id generation failed", exc_info=exc)
    sentry_capture(exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Could not generate a receipt ID"},
    )


def generic_exception_handler(request: Request, exc: Exception):
    logger.error("[api] unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    sentry_capture(exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )
