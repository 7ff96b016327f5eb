#!/usr/bin/env python3
"""
Error handlers for the web application.

Service exceptions live in core.exceptions so the CLI shares them. Every
error response has the same body: {"success": false, "error": ..., "type": ...}.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.exceptions import (
    ServiceException,
    MissionNotFoundException,
    MemberNotFoundException,
    RecommendationNotFoundException,
    InvalidFeedbackException,
)

logger = logging.getLogger(__name__)

__all__ = [
    'ServiceException',
    'MissionNotFoundException',
    'MemberNotFoundException',
    'RecommendationNotFoundException',
    'InvalidFeedbackException',
    'service_exception_handler',
    'http_exception_handler',
    'general_exception_handler',
]

SERVICE_STATUS_CODES = {
    MissionNotFoundException: 404,
    MemberNotFoundException: 404,
    RecommendationNotFoundException: 404,
    InvalidFeedbackException: 400,
}


def _error_response(status_code: int, error, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "type": error_type}
    )


async def service_exception_handler(request: Request, exc: ServiceException) -> JSONResponse:
    """Map a service exception to 404/400, anything unmapped to 500."""
    status_code = SERVICE_STATUS_CODES.get(type(exc), 500)

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc}")

    return _error_response(status_code, str(exc), exc.__class__.__name__)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return _error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error in {request.url.path}")
    return _error_response(500, "Internal server error", "InternalError")
