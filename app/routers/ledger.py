from fastapi import APIRouter, Depends, Header
from sqlalchemy.orm import Session
from datetime import date
from typing import List

from app.config import settings
from app.db import get_db
from app.schemas.common import ErrorOut
from app.schemas.ledger import DailyRecordIn, MaterialOut
from app.services.ledger import MaterialLedger
from app.services.materials import MATERIALS

router = APIRouter(
    prefix="/material-ledger",
    tags=["material-ledger"],
    responses={400: {"model": ErrorOut}, 404: {"model": ErrorOut}},
)


def get_ledger(material_type: str, db: Session = Depends(get_db)) -> MaterialLedger:
    return MaterialLedger(db, material_type)


@router.get("", response_model=List[MaterialOut])
def list_materials():
    return [
        MaterialOut(
            material_type=m.type.value, label=m.label, unit=m.unit, input_label=m.input_label,
            default_price_input=m.default_price_input, default_price_output=m.default_price_output,
        )
        for m in MATERIALS.values()
    ]


@router.get("/{material_type}/weekly")
def weekly(week: int, year: int, ledger: MaterialLedger = Depends(get_ledger)):
    return ledger.weekly(week, year)


@router.get("/{material_type}/monthly")
def monthly(month: int, year: int, month_count: int = settings.DEFAULT_MONTH_COUNT, ledger: MaterialLedger = Depends(get_ledger)):
    return ledger.monthly(month, year, month_count)


@router.get("/{material_type}/stats")
def stats(ledger: MaterialLedger = Depends(get_ledger)):
    return ledger.stats()


@router.get("/{material_type}/daily/{day}")
def daily(day: date, strict: bool = False, ledger: MaterialLedger = Depends(get_ledger)):
    return ledger.daily(day, strict=strict)


@router.patch("/{material_type}/{day}")
def record_day(day: date, body: DailyRecordIn, ledger: MaterialLedger = Depends(get_ledger),
               actor: str | None = Header(default=None, alias="X-Actor")):
    return ledger.record_day(day, body.model_dump(), actor=actor)
