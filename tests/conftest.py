"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For database and API helpers, see tests/__init__.py
"""

import pytest


@pytest.fixture(autouse=True)
def disable_rate_limiter():
    """Rate limiting is exercised explicitly in its own test; keep it off everywhere else."""
    from web.backend.rate_limit import limiter

    limiter.enabled = False
    limiter.reset()
    yield
    limiter.enabled = True
