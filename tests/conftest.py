"""
Pytest configuration and shared fixtures for tests
"""

import pytest
from contextlib import contextmanager
from sqlmodel import Session, SQLModel, create_engine
from sqlalchemy.pool import StaticPool

from barbershop.config import reload_config
from barbershop.db_models import KeyValueEntry  # noqa: F401  registers the table
from barbershop.persistence import RecordPersistence
from barbershop.record_store import RecordStore


@pytest.fixture(autouse=True)
def shop_config(monkeypatch):
    """Valid configuration for every test"""
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123456:TEST-TOKEN")
    return reload_config()


@pytest.fixture(name="db_engine")
def db_engine_fixture():
    """Create in-memory SQLite database engine for testing"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # Keep single connection for in-memory DB
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture(name="db_session")
def db_session_fixture(db_engine):
    """Create database session for testing"""
    with Session(db_engine) as session:
        yield session
        session.rollback()  # Rollback any uncommitted changes after test


@pytest.fixture(name="session_factory")
def session_factory_fixture(db_engine):
    """Session factory bound to the in-memory engine, like database.get_session"""

    @contextmanager
    def factory():
        with Session(db_engine) as session:
            yield session
            session.commit()

    return factory


@pytest.fixture(name="persistence")
def persistence_fixture(session_factory):
    return RecordPersistence(session_factory, "barberShopRecords")


@pytest.fixture(name="store")
def store_fixture(persistence):
    return RecordStore.load(persistence)
