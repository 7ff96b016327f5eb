#!/usr/bin/env python3
"""
FastAPI dependencies: request-scoped database sessions and the shared scorer.
"""

from functools import lru_cache
from typing import Generator
from sqlalchemy.orm import Session

from core.matching import MatchScorer
from database.database import session_scope
from .config import get_config


def get_db() -> Generator[Session, None, None]:
    """
    Yield a database session that is closed once the response is sent.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...
    """
    yield from session_scope(get_config().database.url)


@lru_cache()
def get_scorer() -> MatchScorer:
    """Shared MatchScorer built from the configured matching weights."""
    return MatchScorer(get_config().matching)
