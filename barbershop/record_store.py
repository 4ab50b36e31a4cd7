"""
In-memory record store with write-through persistence
"""

import logging
from typing import Iterable, List, Tuple

from barbershop.models import ServiceRecord
from barbershop.persistence import RecordPersistence

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Ordered list of service records for the day.

    Each mutation updates memory first and then writes the full
    sequence through to the persistence adapter in the same call.
    """

    def __init__(self, persistence: RecordPersistence):
        self.persistence = persistence
        self._records: List[ServiceRecord] = []

    @classmethod
    def load(cls, persistence: RecordPersistence) -> "RecordStore":
        """Create a store populated from persistence"""
        store = cls(persistence)
        store.replace_all(persistence.load())
        return store

    @property
    def records(self) -> Tuple[ServiceRecord, ...]:
        """Snapshot of all records in save order"""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def append(self, record: ServiceRecord) -> None:
        """Add a record and persist the new sequence"""
        self._records.append(record)
        self.persistence.save(self._records)
        logger.info(
            f"Record added: {record.barber} / {record.service} / {record.price} "
            f"({len(self._records)} total)"
        )

    def replace_all(self, records: Iterable[ServiceRecord]) -> None:
        """Replace contents without persisting (initial load only)"""
        self._records = list(records)

    def clear(self) -> None:
        """Drop every record in memory and in persistence"""
        count = len(self._records)
        self._records = []
        self.persistence.clear()
        logger.info(f"Cleared {count} records")
