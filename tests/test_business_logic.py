"""
Tests for business logic: record store, filtering, totals and the entry form
"""

import math
import pytest
from datetime import datetime
from unittest.mock import Mock

from barbershop.aggregates import (
    filtered,
    filtered_total,
    format_total,
    parse_price,
    total,
    total_label,
)
from barbershop.errors import InvalidPrice, MissingField
from barbershop.form import FormController, validate_price
from barbershop.models import ALL_BARBERS, FormState, ServiceRecord
from barbershop.record_store import RecordStore


def fixed_clock(hour=14, minute=5):
    return lambda: datetime(2026, 10, 19, hour, minute)


@pytest.fixture(name="records")
def records_fixture():
    return [
        ServiceRecord("Berber 1", "09:00", "Saç Kesimi", "250"),
        ServiceRecord("Berber 2", "09:30", "Tıraş", "150"),
        ServiceRecord("Berber 1", "10:15", "Sakal Tıraşı", "100"),
        ServiceRecord("Berber 3", "11:00", "Saç Boyama", "450"),
    ]


class TestRecordStore:
    """Tests for RecordStore write-through behaviour"""

    def test_append_persists(self, store, persistence):
        record = ServiceRecord("Berber 1", "10:30", "Saç Kesimi", "250")
        store.append(record)

        assert store.records == (record,)
        assert persistence.load() == [record]

    def test_append_keeps_order(self, store, records):
        for record in records:
            store.append(record)

        assert list(store.records) == records
        assert len(store) == 4

    def test_every_append_saves_full_sequence(self, records):
        persistence = Mock()
        store = RecordStore(persistence)
        store.append(records[0])
        store.append(records[1])

        assert persistence.save.call_count == 2
        saved = persistence.save.call_args[0][0]
        assert list(saved) == records[:2]

    def test_replace_all_does_not_save(self, records):
        persistence = Mock()
        store = RecordStore(persistence)
        store.replace_all(records)

        assert list(store.records) == records
        persistence.save.assert_not_called()

    def test_clear(self, store, persistence, records):
        for record in records:
            store.append(record)

        store.clear()

        assert store.records == ()
        assert persistence.load() == []

    def test_load_restores(self, persistence, records):
        persistence.save(records)
        store = RecordStore.load(persistence)
        assert list(store.records) == records

    def test_records_snapshot_is_read_only(self, store, records):
        store.append(records[0])
        snapshot = store.records
        store.append(records[1])

        assert len(snapshot) == 1


class TestFilterAndAggregate:
    """Tests for filtering and totals"""

    def test_filter_all(self, records):
        assert filtered(records, ALL_BARBERS) == records

    def test_filter_barber(self, records):
        result = filtered(records, "Berber 1")
        assert result == [records[0], records[2]]

    def test_filter_unknown_barber(self, records):
        assert filtered(records, "Berber 9") == []

    def test_total_empty(self):
        assert format_total(total([])) == "0.00"

    def test_total_decimal(self):
        subset = [
            ServiceRecord("Berber 1", "09:00", "Tıraş", "100"),
            ServiceRecord("Berber 1", "09:10", "Tıraş", "150.5"),
        ]
        assert format_total(total(subset)) == "250.50"

    def test_filtered_total(self, records):
        assert filtered_total(records, ALL_BARBERS) == "950.00"
        assert filtered_total(records, "Berber 1") == "350.00"
        assert filtered_total(records, "Berber 2") == "150.00"

    def test_unparsable_price_propagates_nan(self):
        """Test a corrupt stored price shows up in the total"""
        subset = [
            ServiceRecord("Berber 1", "09:00", "Tıraş", "100"),
            ServiceRecord("Berber 1", "09:10", "Tıraş", "abc"),
        ]
        assert math.isnan(total(subset))
        assert format_total(total(subset)) == "nan"

    def test_parse_price(self):
        assert parse_price("150.5") == 150.5
        assert math.isnan(parse_price(""))

    def test_total_label(self):
        assert total_label(ALL_BARBERS) == "Toplam Günlük Gelir:"
        assert total_label("Berber 2") == "Berber 2 Toplam Gelir:"


class TestFormController:
    """Tests for the entry form"""

    def test_validate_ok(self):
        FormController.validate("Berber 1", "Tıraş", "150")

    @pytest.mark.parametrize(
        "barber,service,price,missing",
        [
            ("", "Tıraş", "150", ("barber",)),
            ("Berber 1", "", "150", ("service",)),
            ("Berber 1", "Tıraş", "", ("price",)),
            ("", "", "", ("barber", "service", "price")),
            ("  ", "Tıraş", "150", ("barber",)),
        ],
    )
    def test_validate_missing(self, barber, service, price, missing):
        with pytest.raises(MissingField) as exc_info:
            FormController.validate(barber, service, price)
        assert exc_info.value.fields == missing

    def test_save_missing_leaves_store_unchanged(self, store, persistence):
        form = FormController(store, clock=fixed_clock())
        form.select_barber("Berber 1")
        form.select_service("Tıraş")

        with pytest.raises(MissingField):
            form.save()

        assert store.records == ()
        assert persistence.load() == []
        assert form.state == FormState.EDITING
        assert form.barber == "Berber 1"

    def test_save_creates_record(self, store, persistence):
        form = FormController(store, clock=fixed_clock(9, 7))
        form.select_barber("Berber 1")
        form.select_service("Saç Kesimi")
        form.select_price("250")

        record = form.save()

        assert record == ServiceRecord("Berber 1", "09:07", "Saç Kesimi", "250")
        assert persistence.load() == [record]

    def test_save_resets_fields(self, store):
        form = FormController(store, clock=fixed_clock())
        form.select_barber("Berber 2")
        form.select_service("Tıraş")
        form.select_price("150")
        form.save()

        assert (form.barber, form.service, form.price) == ("", "", "")
        assert form.state == FormState.IDLE_AFTER_SAVE

    def test_selection_returns_to_editing(self, store):
        form = FormController(store, clock=fixed_clock())
        form.select_barber("Berber 2")
        form.select_service("Tıraş")
        form.select_price("150")
        form.save()

        form.select_barber("Berber 3")
        assert form.state == FormState.EDITING

    @pytest.mark.parametrize("price", ["abc", "-5", "nan", "inf"])
    def test_save_rejects_invalid_price(self, store, price):
        form = FormController(store, clock=fixed_clock())
        form.select_barber("Berber 1")
        form.select_service("Tıraş")
        form.select_price(price)

        with pytest.raises(InvalidPrice):
            form.save()
        assert store.records == ()

    def test_validate_price_strips(self):
        assert validate_price(" 150.5 ") == "150.5"
        assert validate_price("0") == "0"

    def test_suggested_prices(self, store):
        form = FormController(store)
        assert form.suggested_prices("Saç Kesimi") == ["250", "300", "350"]
        assert form.suggested_prices("Tıraş") == ["150", "200", "250"]
        assert form.suggested_prices("Sakal Tıraşı") == ["100", "150", "200"]
        assert form.suggested_prices("Saç Boyama") == ["450", "550", "650"]
        assert form.suggested_prices("Manikür") == []

    def test_suggested_prices_current_service(self, store):
        form = FormController(store)
        form.select_service("Tıraş")
        assert form.suggested_prices() == ["150", "200", "250"]

    def test_custom_price_table(self, store):
        form = FormController(store, service_prices={"Fön": ["80", "90", "100"]})
        assert form.suggested_prices("Fön") == ["80", "90", "100"]
        assert form.suggested_prices("Tıraş") == []


class TestEndToEnd:
    """Save, filter and total as staff would use it"""

    def test_two_barbers(self, store, persistence):
        form = FormController(store, clock=fixed_clock())

        form.select_barber("Berber 1")
        form.select_service("Saç Kesimi")
        form.select_price("250")
        form.save()

        form.select_barber("Berber 2")
        form.select_service("Tıraş")
        form.select_price("150")
        form.save()

        berber_1 = filtered(store.records, "Berber 1")
        assert len(berber_1) == 1
        assert format_total(total(berber_1)) == "250.00"

        everyone = filtered(store.records, ALL_BARBERS)
        assert len(everyone) == 2
        assert format_total(total(everyone)) == "400.00"

        # Survives a restart
        reloaded = RecordStore.load(persistence)
        assert reloaded.records == store.records
