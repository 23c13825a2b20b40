"""Shared pytest fixtures for session metadata tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from session_metadata.application import Application, MultiClientApplication
from session_metadata.config import clear_settings_cache
from session_metadata.database import create_tables, enable_sqlite_savepoints


def _memory_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    return enable_sqlite_savepoints(engine)


@pytest.fixture
def engine():
    """In-memory SQLite engine with the metadata table created."""
    engine = _memory_engine()
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def bare_engine():
    """In-memory SQLite engine without any table."""
    engine = _memory_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def bare_db(bare_engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=bare_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def single_client_app():
    return Application({"shared_session": False})


@pytest.fixture
def multi_client_app():
    return MultiClientApplication(1, {"shared_session": False})


@pytest.fixture
def shared_session_app():
    return MultiClientApplication(1, {"shared_session": True})


@pytest.fixture(autouse=True)
def reset_settings():
    clear_settings_cache()
    yield
    clear_settings_cache()
