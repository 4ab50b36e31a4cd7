"""
SQLite engine and session lifecycle for the record store.
The engine is created lazily from ShopConfig.db_file and shared by
every RecordPersistence until close_database() is called on shutdown.
"""
from pathlib import Path
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine
from contextlib import contextmanager
from typing import Generator, Optional
import logging

from barbershop.config import get_config
from barbershop.db_models import KeyValueEntry  # noqa: F401  registers the table

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None


def sqlite_url(db_file: str) -> str:
    """SQLite URL for a file path, ':memory:' stays in memory"""
    if db_file == ":memory:":
        return "sqlite://"
    return f"sqlite:///{db_file}"


def get_engine() -> Engine:
    """Shared engine for the configured database file"""
    global _engine
    if _engine is None:
        db_file = get_config().db_file
        if db_file != ":memory:":
            Path(db_file).parent.mkdir(parents=True, exist_ok=True)

        # Handlers run on the bot's event loop thread, not the creating one
        _engine = create_engine(
            sqlite_url(db_file),
            connect_args={"check_same_thread": False},
        )
        logger.info(f"Record database opened: {db_file}")

    return _engine


def init_database() -> None:
    """Create the key-value table if missing"""
    SQLModel.metadata.create_all(get_engine())
    logger.info("Key-value table ready")


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """
    Session for one persistence call.

    Commits when the block exits cleanly, rolls back and re-raises otherwise.
    RecordPersistence receives this function as its session factory.
    """
    session = Session(get_engine())
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def close_database() -> None:
    """Dispose the engine; the next get_engine() reopens it"""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None
        logger.info("Record database closed")
