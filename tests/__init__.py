#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    uv run python -m pytest tests/ -v

    # Using unittest
    uv run python -m unittest discover tests -v

Database tests run against an in-memory SQLite database, so no server is
needed. The models use portable column types (Uuid, JSON with a JSONB
variant on Postgres), which is what makes this possible.
"""

import uuid
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from database.models import Base, EngagementSnapshot, MemberProfile, Mission


def make_test_engine() -> Engine:
    """In-memory SQLite engine shared across threads (TestClient runs handlers in a threadpool)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def add_member(session: Session, **fields: Any) -> MemberProfile:
    """Insert a validated member profile. Keyword arguments override defaults."""
    values = dict(
        id=uuid.uuid4(),
        fullname="Test Member",
        email="member@example.com",
        specialties=[],
        availability_days=[],
        points=0,
        is_validated=True,
    )
    values.update(fields)
    member = MemberProfile(**values)
    session.add(member)
    session.flush()
    return member


def add_mission(session: Session, **fields: Any) -> Mission:
    """Insert an active mission. Keyword arguments override defaults."""
    values = dict(
        id=uuid.uuid4(),
        title="Test Mission",
        required_skills=[],
        personality_fit=[],
        schedule_days=[],
        created_by="ngo-user",
        is_active=True,
    )
    values.update(fields)
    mission = Mission(**values)
    session.add(mission)
    session.flush()
    return mission


def add_engagement(session: Session, member_id, year: int, month: int, score: float) -> EngagementSnapshot:
    snapshot = EngagementSnapshot(member_id=member_id, year=year, month=month, score=score)
    session.add(snapshot)
    session.flush()
    return snapshot


def make_api_client(session_factory: sessionmaker):
    """TestClient on a fresh app whose get_db dependency uses session_factory."""
    from fastapi.testclient import TestClient
    from web.backend.app import create_app
    from web.backend.dependencies import get_db

    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)
