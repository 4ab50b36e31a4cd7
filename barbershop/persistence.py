"""
Persistence adapter for the record list
Stores the whole sequence as one JSON array under a single key.
Every operation fails soft: errors are logged, never raised.
"""

import logging
from typing import Callable, ContextManager, List, Sequence

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from barbershop.errors import PersistenceError
from barbershop.models import ServiceRecord
from barbershop.repositories import KeyValueRepository

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "barberShopRecords"

SessionFactory = Callable[[], ContextManager[Session]]

_records_adapter = TypeAdapter(List[ServiceRecord])


def serialize_records(records: Sequence[ServiceRecord]) -> str:
    """Encode records as a JSON array of {barber, time, service, price}"""
    return _records_adapter.dump_json(list(records)).decode("utf-8")


def deserialize_records(raw: str) -> List[ServiceRecord]:
    """Decode a JSON array of records, raising ValidationError on bad input"""
    return _records_adapter.validate_json(raw)


class RecordPersistence:
    """Load/save/clear the record list in the key-value store"""

    def __init__(
        self, session_factory: SessionFactory, storage_key: str = DEFAULT_STORAGE_KEY
    ):
        self.session_factory = session_factory
        self.storage_key = storage_key

    def load(self) -> List[ServiceRecord]:
        """Read stored records, empty list if absent or unreadable"""
        try:
            with self.session_factory() as session:
                raw = KeyValueRepository(session).get(self.storage_key)
        except (PersistenceError, SQLAlchemyError) as e:
            logger.error(f"Error loading saved records: {e}")
            return []

        if raw is None:
            return []

        try:
            records = deserialize_records(raw)
        except ValidationError as e:
            logger.error(f"Error parsing saved records: {e}")
            return []

        logger.info(f"Loaded {len(records)} records from '{self.storage_key}'")
        return records

    def save(self, records: Sequence[ServiceRecord]) -> None:
        """Replace the stored list with the given sequence"""
        try:
            payload = serialize_records(records)
            with self.session_factory() as session:
                KeyValueRepository(session).set(self.storage_key, payload)
        except (PersistenceError, SQLAlchemyError, ValueError) as e:
            logger.error(f"Error saving records: {e}")
            return

        logger.debug(f"Saved {len(records)} records to '{self.storage_key}'")

    def clear(self) -> None:
        """Remove the stored value entirely"""
        try:
            with self.session_factory() as session:
                KeyValueRepository(session).remove(self.storage_key)
        except (PersistenceError, SQLAlchemyError) as e:
            logger.error(f"Error clearing saved records: {e}")
            return

        logger.info(f"Cleared saved records under '{self.storage_key}'")
