"""
Shared pytest fixtures.

Provides:
- An in-memory SQLite engine per test (foreign keys enforced)
- A session bound to it
- A TestClient whose get_db dependency yields that same session
- Small factories for teams, members and projects
"""
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database.base import Base
from app.database.session import enable_sqlite_foreign_keys, get_db
from app.main import app as fastapi_app
from app.schemas import MemberRequest, ProjectRequest, TeamRequest
from app.utils import member_service, project_service, team_service


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def engine():
    """
    Fresh in-memory database for each test.

    StaticPool keeps a single connection so the TestClient worker thread
    and the test body see the same data.
    """
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(test_engine)
    Base.metadata.create_all(bind=test_engine)

    yield test_engine

    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db(engine) -> Generator[Session, None, None]:
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    yield session
    session.close()


# ============================================================================
# API Client Fixtures
# ============================================================================

@pytest.fixture
def client(db: Session) -> Generator[TestClient, None, None]:
    fastapi_app.dependency_overrides[get_db] = lambda: db
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()


# ============================================================================
# Test Data Factories
# ============================================================================

@pytest.fixture
def make_team(db: Session):
    def _make(name: str, description: str = None):
        return team_service.create_team(db, TeamRequest(name=name, description=description))
    return _make


@pytest.fixture
def make_member(db: Session):
    def _make(name: str, email: str, role: str = None, team_id: int = None):
        return member_service.create_member(
            db, MemberRequest(name=name, email=email, role=role, team_id=team_id)
        )
    return _make


@pytest.fixture
def make_project(db: Session):
    def _make(name: str, description: str = None, team_ids=None):
        return project_service.create_project(
            db, ProjectRequest(name=name, description=description, team_ids=team_ids)
        )
    return _make
