#!/usr/bin/env python3
"""
Rate limiting for endpoints that recompute and persist scores in bulk.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from .config import get_config

limiter = Limiter(key_func=get_remote_address)


def recompute_limit() -> str:
    """Configured limit for bulk recompute endpoints, e.g. "10/minute"."""
    return get_config().recommendations.rate_limit


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"success": False, "error": str(exc), "type": "RateLimitExceeded"}
    )
