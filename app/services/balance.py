"""
Running balance (carry-over) for one material's daily ledger.

remaining(d) = max(0, remaining(d-1) + input(d) - output(d))

The zero floor is a business rule: stock cannot go negative. The amount the
floor removed is reported as ``shortfall`` so callers can flag the day instead
of silently hiding an over-shipment.
"""
from dataclasses import dataclass
from datetime import date, timedelta
import math
from typing import Iterable, Protocol, Sequence

from app.errors import InvalidRecordOrder, NegativeQuantity


class DailyMovement(Protocol):
    date: date
    input_quantity: float
    output_quantity: float


@dataclass(frozen=True)
class EmptyDay:
    """Placeholder for a calendar day with no stored record."""
    date: date
    input_quantity: float = 0.0
    output_quantity: float = 0.0
    unit_price_input: float = 0.0
    unit_price_output: float = 0.0
    note: str | None = None


@dataclass(frozen=True)
class BalanceEntry:
    date: date
    opening: float      # carried over from the previous day
    input: float
    output: float
    remaining: float
    shortfall: float = 0.0

    def as_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "opening": self.opening,
            "input": self.input,
            "output": self.output,
            "remaining": self.remaining,
            "shortfall": self.shortfall,
        }


def _check_quantity(value: float, what: str, day: date | None = None) -> float:
    v = float(value or 0)
    if not math.isfinite(v) or v < 0:
        where = f" on {day.isoformat()}" if day else ""
        raise NegativeQuantity(f"{what} must be a finite, non-negative number{where}: {v}")
    return v


def compute_running_balance(records: Sequence[DailyMovement], opening_balance: float = 0.0) -> list[BalanceEntry]:
    """
    Carry stock forward day by day.

    ``records`` must be sorted by strictly increasing date. Gaps are not
    interpolated here; pass the output of :func:`zero_fill` when every calendar
    day should continue the chain.
    """
    remaining = _check_quantity(opening_balance, "opening balance")
    out: list[BalanceEntry] = []
    prev_day: date | None = None
    for r in records:
        if prev_day is not None and r.date <= prev_day:
            raise InvalidRecordOrder(f"dates must be strictly increasing: {r.date.isoformat()} after {prev_day.isoformat()}")
        qty_in = _check_quantity(r.input_quantity, "input quantity", r.date)
        qty_out = _check_quantity(r.output_quantity, "output quantity", r.date)
        raw = remaining + qty_in - qty_out
        entry = BalanceEntry(
            date=r.date,
            opening=remaining,
            input=qty_in,
            output=qty_out,
            remaining=max(0.0, raw),
            shortfall=max(0.0, -raw),
        )
        out.append(entry)
        remaining = entry.remaining
        prev_day = r.date
    return out


def zero_fill(records: Iterable[DailyMovement], start: date, end: date) -> list:
    """One record per calendar day in [start, end]; missing days become EmptyDay."""
    by_day = {r.date: r for r in records if start <= r.date <= end}
    days = []
    d = start
    while d <= end:
        days.append(by_day.get(d) or EmptyDay(d))
        d += timedelta(days=1)
    return days
