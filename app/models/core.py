from sqlalchemy import String, Numeric, Enum, Text, Date, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column
from enum import Enum as PyEnum
import datetime as dt
from app.db import Base
from app.models.common import IdMixin, TSMMixin

# ── Enums ───────────────────────────────────────────────────────────────────
class MaterialType(PyEnum):
    TOFU = "tofu"
    PICKLED_VEGETABLE = "pickledVegetable"
    BEAN_SPROUTS = "beanSprouts"
    SAUSAGE = "sausage"
    POULTRY_MEAT = "poultryMeat"
    LIVESTOCK_MEAT = "livestockMeat"

class AuditAction(PyEnum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"

# ── Processing station ledger ───────────────────────────────────────────────
class DailyMaterialRecord(Base, IdMixin, TSMMixin):
    __tablename__ = "daily_material_record"
    # one row per (date, material); remaining stock is derived, never stored
    date: Mapped[dt.date] = mapped_column(Date)
    material_type: Mapped[MaterialType] = mapped_column(Enum(MaterialType))
    input_quantity: Mapped[float] = mapped_column(Numeric(12, 3, asdecimal=False), default=0)    # received / produced
    output_quantity: Mapped[float] = mapped_column(Numeric(12, 3, asdecimal=False), default=0)   # shipped / consumed
    unit_price_input: Mapped[float] = mapped_column(Numeric(14, 2, asdecimal=False), default=0)
    unit_price_output: Mapped[float] = mapped_column(Numeric(14, 2, asdecimal=False), default=0)
    note: Mapped[str | None] = mapped_column(Text)
    __table_args__ = (
        UniqueConstraint("date", "material_type", name="uq_daily_material_record_key"),
        Index("ix_daily_material_record_material_date", "material_type", "date"),
    )

    def as_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "material_type": self.material_type.value,
            "input_quantity": float(self.input_quantity or 0),
            "output_quantity": float(self.output_quantity or 0),
            "unit_price_input": float(self.unit_price_input or 0),
            "unit_price_output": float(self.unit_price_output or 0),
            "note": self.note,
        }

# ── Audit ───────────────────────────────────────────────────────────────────
class AuditLog(Base, IdMixin, TSMMixin):
    __tablename__ = "audit_log"
    actor: Mapped[str | None] = mapped_column(String(120))
    entity: Mapped[str] = mapped_column(String(60))
    entity_id: Mapped[str] = mapped_column(String(36))
    action: Mapped[AuditAction] = mapped_column(Enum(AuditAction))
    before: Mapped[str | None] = mapped_column(Text)   # JSON
    after: Mapped[str | None] = mapped_column(Text)    # JSON
