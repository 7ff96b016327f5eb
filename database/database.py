"""
Engine and session factories.

The URL defaults to the configured database (config.yaml, overridden by
DATABASE_URL). Engines are cached per URL so the CLI, the API and init_db
share one connection pool per process.
"""

import logging
from functools import lru_cache
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from core.config_loader import load_config

logger = logging.getLogger(__name__)


@lru_cache()
def get_engine(url: Optional[str] = None) -> Engine:
    url = url or load_config().database.url
    options = {"pool_pre_ping": True}
    if not url.startswith("sqlite"):
        options.update(pool_size=10, max_overflow=20)
    logger.debug(f"Creating engine for {url.split('@')[-1]}")
    return create_engine(url, **options)


@lru_cache()
def get_session_factory(url: Optional[str] = None) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine(url))


def session_scope(url: Optional[str] = None) -> Generator[Session, None, None]:
    """Yield a session that is closed afterwards. Committing is up to the caller."""
    session = get_session_factory(url)()
    try:
        yield session
    finally:
        session.close()
