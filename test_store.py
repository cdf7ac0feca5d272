from datetime import date

import pytest

from app.models.core import DailyMaterialRecord, MaterialType
from app.services.store import SqlRecordStore


def test_upsert_creates_then_updates(db):
    store = SqlRecordStore(db)
    rec = store.upsert_record(date(2025, 6, 9), MaterialType.TOFU, {"input_quantity": 100, "output_quantity": 20})
    db.commit()
    assert rec.version == 1
    assert rec.deleted_at is None

    again = store.upsert_record(date(2025, 6, 9), MaterialType.TOFU, {"output_quantity": 30, "note": "late shipment"})
    db.commit()
    assert again.id == rec.id
    assert again.version == 2
    assert (again.input_quantity, again.output_quantity, again.note) == (100, 30, "late shipment")
    assert db.query(DailyMaterialRecord).count() == 1


def test_get_record_is_keyed_by_material(db):
    store = SqlRecordStore(db)
    store.upsert_record(date(2025, 6, 9), MaterialType.TOFU, {"input_quantity": 5})
    db.commit()
    assert store.get_record(date(2025, 6, 9), MaterialType.TOFU) is not None
    assert store.get_record(date(2025, 6, 9), MaterialType.SAUSAGE) is None
    assert store.get_record(date(2025, 6, 10), MaterialType.TOFU) is None


def test_query_range_orders_and_filters(db):
    store = SqlRecordStore(db)
    for day in (12, 9, 10, 20):
        store.upsert_record(date(2025, 6, day), MaterialType.POULTRY_MEAT, {"input_quantity": day})
    store.upsert_record(date(2025, 6, 11), MaterialType.TOFU, {"input_quantity": 1})
    db.commit()

    rows = store.query_range(MaterialType.POULTRY_MEAT, date(2025, 6, 10), date(2025, 6, 15))
    assert [r.date for r in rows] == [date(2025, 6, 10), date(2025, 6, 12)]

    everything = store.query_range(MaterialType.POULTRY_MEAT, None, date(2025, 6, 30))
    assert [r.date.day for r in everything] == [9, 10, 12, 20]
    assert store.first_date(MaterialType.POULTRY_MEAT) == date(2025, 6, 9)
    assert store.first_date(MaterialType.LIVESTOCK_MEAT) is None


def test_upsert_rejects_unknown_fields(db):
    with pytest.raises(ValueError):
        SqlRecordStore(db).upsert_record(date(2025, 6, 9), MaterialType.TOFU, {"remaining_quantity": 3})
