from datetime import date
from typing import Protocol

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.core import DailyMaterialRecord, MaterialType

UPDATABLE = {"input_quantity", "output_quantity", "unit_price_input", "unit_price_output", "note"}


class RecordStore(Protocol):
    def get_record(self, day: date, material: MaterialType) -> DailyMaterialRecord | None: ...
    def upsert_record(self, day: date, material: MaterialType, fields: dict) -> DailyMaterialRecord: ...
    def query_range(self, material: MaterialType, start: date | None, end: date) -> list[DailyMaterialRecord]: ...
    def first_date(self, material: MaterialType) -> date | None: ...


class SqlRecordStore:
    """Daily records in SQL. Does not commit; the caller owns the transaction."""

    def __init__(self, db: Session):
        self.db = db

    def get_record(self, day: date, material: MaterialType) -> DailyMaterialRecord | None:
        return (self.db.query(DailyMaterialRecord)
                  .filter(DailyMaterialRecord.date == day,
                          DailyMaterialRecord.material_type == material)
                  .first())

    def upsert_record(self, day: date, material: MaterialType, fields: dict) -> DailyMaterialRecord:
        unknown = set(fields) - UPDATABLE
        if unknown:
            raise ValueError(f"not updatable: {', '.join(sorted(unknown))}")
        rec = self.get_record(day, material)
        if not rec:
            rec = DailyMaterialRecord(date=day, material_type=material, input_quantity=0, output_quantity=0,
                                      unit_price_input=0, unit_price_output=0)
            self.db.add(rec)
        else:
            rec.bump_version()
        for k, v in fields.items():
            setattr(rec, k, v)
        self.db.flush()
        return rec

    def query_range(self, material: MaterialType, start: date | None, end: date) -> list[DailyMaterialRecord]:
        # single read for the whole range so balances never mix two versions of the ledger
        q = self.db.query(DailyMaterialRecord).filter(DailyMaterialRecord.material_type == material,
                                                      DailyMaterialRecord.date <= end)
        if start is not None:
            q = q.filter(DailyMaterialRecord.date >= start)
        return q.order_by(DailyMaterialRecord.date.asc()).all()

    def first_date(self, material: MaterialType) -> date | None:
        return (self.db.query(func.min(DailyMaterialRecord.date))
                  .filter(DailyMaterialRecord.material_type == material)
                  .scalar())
