"""
Repository pattern for database access
Provides clean separation between business logic and data access
"""

from sqlmodel import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
from datetime import datetime, timezone

from barbershop.db_models import KeyValueEntry
from barbershop.errors import PersistenceError


class KeyValueRepository:
    """Repository for KeyValueEntry operations"""

    def __init__(self, session: Session):
        self.session = session

    def get(self, key: str) -> Optional[str]:
        """Get stored value, None if the key is absent"""
        try:
            entry = self.session.get(KeyValueEntry, key)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read '{key}': {e}") from e
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        """Create or replace the value under key"""
        try:
            entry = self.session.get(KeyValueEntry, key)
            if entry is None:
                entry = KeyValueEntry(key=key, value=value)
                self.session.add(entry)
            else:
                entry.value = value
                entry.updated_at = datetime.now(timezone.utc)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise PersistenceError(f"Failed to write '{key}': {e}") from e

    def remove(self, key: str) -> bool:
        """Delete the value under key"""
        try:
            entry = self.session.get(KeyValueEntry, key)
            if entry:
                self.session.delete(entry)
                self.session.commit()
                return True
            return False
        except SQLAlchemyError as e:
            self.session.rollback()
            raise PersistenceError(f"Failed to remove '{key}': {e}") from e
