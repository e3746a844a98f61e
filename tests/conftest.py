"""
Pytest configuration and fixtures for test suite.
"""

import datetime as dt
import os

import pytest

# Set test environment variables before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "test"
os.environ["LOG_FORMAT"] = "console"
os.environ["API_PREFIX"] = ""

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.api.dependencies import get_db
from src.main import app
from src.models.base import Base
from src.models.entities.event import Event
from src.repositories.event_repository import EventRepository
from src.services.event_service import EventService


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every connection of one test."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db_session):
    return EventRepository(db_session)


@pytest.fixture
def service(repository):
    return EventService(repository)


@pytest.fixture
def client(db_session):
    """FastAPI test client bound to the in-memory store."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_events(db_session):
    """Insert events; each argument is a dict of Event column overrides."""

    def _make(*overrides_list):
        events = []
        for index, overrides in enumerate(overrides_list, start=1):
            fields = {
                "title": f"Event {index}",
                "description": None,
                "event_date": dt.date(2025, 10, 1) + dt.timedelta(days=index),
                "reminder_time": dt.datetime(2025, 10, 1, 9, 0) + dt.timedelta(days=index),
                "reminder_sent": False,
            }
            fields.update(overrides)
            events.append(Event(**fields))
        db_session.add_all(events)
        db_session.commit()
        for event in events:
            db_session.refresh(event)
        return events

    return _make


@pytest.fixture
def twelve_events(make_events):
    """Twelve events dated 2025-10-12 .. 2025-10-23."""
    return make_events(*[
        {"event_date": dt.date(2025, 10, 11) + dt.timedelta(days=i)} for i in range(1, 13)
    ])
