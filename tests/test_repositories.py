"""
Tests for the key-value repository and the record persistence adapter
"""

import json
import pytest
from contextlib import contextmanager
from unittest.mock import Mock
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from barbershop.db_models import KeyValueEntry
from barbershop.errors import PersistenceError
from barbershop.models import ServiceRecord
from barbershop.persistence import RecordPersistence, serialize_records
from barbershop.repositories import KeyValueRepository


def broken_session_factory():
    """Factory whose session fails on every query"""
    session = Mock()
    session.get.side_effect = SQLAlchemyError("disk I/O error")

    @contextmanager
    def factory():
        yield session

    return factory


class TestKeyValueRepository:
    """Tests for KeyValueRepository"""

    def test_get_missing(self, db_session):
        """Test reading an absent key returns None"""
        repo = KeyValueRepository(db_session)
        assert repo.get("missing") is None

    def test_set_and_get(self, db_session):
        repo = KeyValueRepository(db_session)
        repo.set("key", "value")
        assert repo.get("key") == "value"

    def test_set_replaces(self, db_session):
        """Test writing twice keeps only the latest value"""
        repo = KeyValueRepository(db_session)
        repo.set("key", "first")
        repo.set("key", "second")
        assert repo.get("key") == "second"

    def test_write_visible_in_new_session(self, db_engine):
        """Test insert and update are committed and read back by another session"""
        with Session(db_engine) as session:
            KeyValueRepository(session).set("key", "first")
        with Session(db_engine) as session:
            entry = session.get(KeyValueEntry, "key")
            assert entry.value == "first"
            assert entry.updated_at is not None

        with Session(db_engine) as session:
            KeyValueRepository(session).set("key", "second")
        with Session(db_engine) as session:
            assert KeyValueRepository(session).get("key") == "second"

    def test_remove(self, db_session):
        repo = KeyValueRepository(db_session)
        repo.set("key", "value")

        assert repo.remove("key") is True
        assert repo.get("key") is None

    def test_remove_missing(self, db_session):
        repo = KeyValueRepository(db_session)
        assert repo.remove("missing") is False

    def test_storage_error_wrapped(self):
        """Test SQLAlchemy errors surface as PersistenceError"""
        session = Mock()
        session.get.side_effect = SQLAlchemyError("boom")
        repo = KeyValueRepository(session)

        with pytest.raises(PersistenceError):
            repo.get("key")
        with pytest.raises(PersistenceError):
            repo.set("key", "value")
        with pytest.raises(PersistenceError):
            repo.remove("key")


class TestRecordPersistence:
    """Tests for RecordPersistence"""

    def test_load_empty(self, persistence):
        """Test absent value loads as empty list"""
        assert persistence.load() == []

    def test_save_and_load(self, persistence):
        records = [
            ServiceRecord("Berber 1", "10:30", "Saç Kesimi", "250"),
            ServiceRecord("Berber 2", "11:00", "Tıraş", "150"),
        ]
        persistence.save(records)

        assert persistence.load() == records

    def test_stored_layout(self, persistence, db_session):
        """Test stored value is a JSON array of string fields"""
        persistence.save([ServiceRecord("Berber 1", "10:30", "Saç Kesimi", "250")])

        raw = KeyValueRepository(db_session).get("barberShopRecords")
        assert json.loads(raw) == [
            {
                "barber": "Berber 1",
                "time": "10:30",
                "service": "Saç Kesimi",
                "price": "250",
            }
        ]

    def test_load_existing_json(self, persistence, db_session):
        """Test data written by another client is readable"""
        KeyValueRepository(db_session).set(
            "barberShopRecords",
            '[{"barber":"Berber 3","time":"09:15","service":"Saç Boyama","price":"450"}]',
        )

        assert persistence.load() == [
            ServiceRecord("Berber 3", "09:15", "Saç Boyama", "450")
        ]

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            "{}",
            "null",
            '[{"barber": "Berber 1"}]',
            '[{"barber": "Berber 1", "time": "10:00", "service": "Tıraş", "price": 150}]',
        ],
    )
    def test_load_malformed(self, persistence, db_session, raw):
        """Test corrupt stored data loads as empty list"""
        KeyValueRepository(db_session).set("barberShopRecords", raw)
        assert persistence.load() == []

    def test_clear(self, persistence):
        persistence.save([ServiceRecord("Berber 1", "10:30", "Tıraş", "150")])
        persistence.clear()

        assert persistence.load() == []

    def test_clear_when_empty(self, persistence):
        persistence.clear()
        assert persistence.load() == []

    def test_separate_keys(self, session_factory):
        """Test adapters with different keys do not share data"""
        first = RecordPersistence(session_factory, "first")
        second = RecordPersistence(session_factory, "second")
        first.save([ServiceRecord("Berber 1", "10:30", "Tıraş", "150")])

        assert second.load() == []

    def test_failures_are_soft(self):
        """Test storage errors are logged, never raised"""
        persistence = RecordPersistence(broken_session_factory(), "barberShopRecords")

        assert persistence.load() == []
        persistence.save([ServiceRecord("Berber 1", "10:30", "Tıraş", "150")])
        persistence.clear()

    def test_serialize_keeps_unicode(self):
        payload = serialize_records([ServiceRecord("Berber 1", "10:30", "Tıraş", "150")])
        assert "Tıraş" in payload
