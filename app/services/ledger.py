"""
One ledger implementation shared by every processing-station material.

A MaterialLedger reads a material's history with a single range query and
hands it to the pure balance/aggregate functions, so daily, weekly, monthly
and all-time views all agree on the same carry-over chain.
"""
from datetime import date, timedelta
import math

from sqlalchemy.orm import Session

from app.errors import NegativeQuantity, RecordNotFound
from app.models.core import AuditAction, DailyMaterialRecord, MaterialType
from app.services.aggregate import Summary, aggregate
from app.services.balance import BalanceEntry
from app.services.materials import MaterialSpec, resolve_material
from app.services.periods import day_name, month_bounds, trailing_months, week_dates
from app.services.store import RecordStore, SqlRecordStore
from app.util.audit import log_audit
from app.util.log import get_logger

logger = get_logger("ledger")

NON_NEGATIVE = ("input_quantity", "output_quantity", "unit_price_input", "unit_price_output")


class MaterialLedger:
    def __init__(self, db: Session, material: str | MaterialType, store: RecordStore | None = None):
        self.db = db
        self.spec: MaterialSpec = resolve_material(material)
        self.store = store or SqlRecordStore(db)

    @property
    def material(self) -> MaterialType:
        return self.spec.type

    # ---------- helpers ----------

    def carry_over_note(self, day: date, carried: float) -> str | None:
        if carried <= 0:
            return None
        prev = day - timedelta(days=1)
        return f"Carried over from {prev:%d/%m/%Y}: +{carried:g} {self.spec.unit} {self.spec.label}"

    def _row(self, entry: BalanceEntry, rec: DailyMaterialRecord | None) -> dict:
        return {
            "date": entry.date.isoformat(),
            "day_of_week": day_name(entry.date),
            "recorded": rec is not None,
            "input_quantity": entry.input,
            "output_quantity": entry.output,
            "carry_over": entry.opening,
            "remaining": entry.remaining,
            "shortfall": entry.shortfall,
            "unit_price_input": float(rec.unit_price_input) if rec else self.spec.default_price_input,
            "unit_price_output": float(rec.unit_price_output) if rec else self.spec.default_price_output,
            "note": rec.note if rec else None,
            "carry_over_note": self.carry_over_note(entry.date, entry.opening),
        }

    def _history(self, end: date) -> list[DailyMaterialRecord]:
        return self.store.query_range(self.material, None, end)

    # ---------- views ----------

    def daily(self, day: date, strict: bool = False) -> dict:
        """Day view; with strict=True a day that was never recorded raises RecordNotFound."""
        history = self._history(day)
        rec = next((r for r in reversed(history) if r.date == day), None)
        if strict and rec is None:
            raise RecordNotFound(f"no {self.material.value} record for {day.isoformat()}")
        summary = aggregate(history, day, day)
        row = self._row(summary.days[0], rec)
        row["material_type"] = self.material.value
        row["unit"] = self.spec.unit
        if rec:
            row["id"] = rec.id
            row["version"] = rec.version
        return row

    def weekly(self, week: int, year: int) -> dict:
        dates = week_dates(week, year)
        history = self._history(dates[-1])
        summary = aggregate(history, dates[0], dates[-1])
        by_day = {r.date: r for r in history if r.date >= dates[0]}
        return {
            "material_type": self.material.value,
            "week": week,
            "year": year,
            "week_dates": [d.isoformat() for d in dates],
            "daily_data": [self._row(e, by_day.get(e.date)) for e in summary.days],
            "totals": summary.totals(),
        }

    def monthly(self, month: int, year: int, month_count: int) -> dict:
        months = trailing_months(year, month, month_count)
        history = self._history(month_bounds(*months[-1])[1])
        summaries = []
        for y, m in months:
            start, end = month_bounds(y, m)
            s = aggregate(history, start, end)
            summaries.append({"month": f"{m:02d}/{y}", "year": y, "month_number": m, **s.totals()})
        return {
            "material_type": self.material.value,
            "target_month": month,
            "target_year": year,
            "month_count": month_count,
            "monthly_summaries": summaries,
        }

    def stats(self) -> dict:
        first = self.store.first_date(self.material)
        if first is None:
            today = date.today()
            s = Summary(range_start=today, range_end=today)
        else:
            history = self._history(date.max)
            s = aggregate(history, first, history[-1].date)
        return {"material_type": self.material.value, **s.totals()}

    # ---------- edits ----------

    def record_day(self, day: date, fields: dict, actor: str | None = None) -> dict:
        changes = {k: v for k, v in fields.items() if v is not None}
        for k in NON_NEGATIVE:
            if k in changes and not (math.isfinite(float(changes[k])) and float(changes[k]) >= 0):
                raise NegativeQuantity(f"{k} must be a finite, non-negative number: {changes[k]}")

        existing = self.store.get_record(day, self.material)
        before = existing.as_dict() if existing else None
        if existing is None:
            changes.setdefault("unit_price_input", self.spec.default_price_input)
            changes.setdefault("unit_price_output", self.spec.default_price_output)

        rec = self.store.upsert_record(day, self.material, changes)
        log_audit(self.db, actor, "daily_material_record", rec.id,
                  AuditAction.UPDATE if before else AuditAction.CREATE,
                  before=before, after=rec.as_dict())
        self.db.commit()
        self.db.refresh(rec)
        logger.info("%s %s %s by %s", "updated" if before else "created", self.material.value,
                    day.isoformat(), actor or "anonymous")

        view = self.daily(day)
        if view["shortfall"] > 0:
            logger.warning("%s %s ships %.3f %s more than available; remaining clamped to 0",
                           self.material.value, day.isoformat(), view["shortfall"], self.spec.unit)
        return view
