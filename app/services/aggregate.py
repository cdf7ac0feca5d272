"""
Range summaries over a material's daily records.

Totals and balances come from the records inside [range_start, range_end];
any records before range_start are only used to work out the opening balance.
"""
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from app.config import settings
from app.errors import InvalidPeriod
from app.services.balance import BalanceEntry, compute_running_balance, zero_fill


def _money(x) -> float:
    return float(Decimal(str(x)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))


def _mean_nonzero(values: Iterable[float]) -> float:
    vals = [float(v) for v in values if v]
    return sum(vals) / len(vals) if vals else 0.0


@dataclass
class Summary:
    range_start: date
    range_end: date
    total_input: float = 0.0
    total_output: float = 0.0
    opening_balance: float = 0.0
    closing_balance: float = 0.0
    average_input_price: float = 0.0
    average_output_price: float = 0.0
    processing_efficiency: float = 0.0   # percent
    revenue: float = 0.0
    cost: float = 0.0
    profit: float = 0.0
    other_costs: float = 0.0
    net_profit: float = 0.0
    days_with_data: int = 0
    total_shortfall: float = 0.0
    days: list[BalanceEntry] = field(default_factory=list)

    def totals(self) -> dict:
        return {
            "range_start": self.range_start.isoformat(),
            "range_end": self.range_end.isoformat(),
            "total_input": self.total_input,
            "total_output": self.total_output,
            "opening_balance": self.opening_balance,
            "closing_balance": self.closing_balance,
            "average_input_price": self.average_input_price,
            "average_output_price": self.average_output_price,
            "processing_efficiency": self.processing_efficiency,
            "revenue": self.revenue,
            "cost": self.cost,
            "profit": self.profit,
            "other_costs": self.other_costs,
            "net_profit": self.net_profit,
            "days_with_data": self.days_with_data,
            "total_shortfall": self.total_shortfall,
        }


def opening_balance_before(records: list, day: date) -> float:
    """Remaining stock at the end of the day before ``day``; 0 without history."""
    history = [r for r in records if r.date < day]
    if not history:
        return 0.0
    chain = compute_running_balance(zero_fill(history, history[0].date, day - timedelta(days=1)))
    return chain[-1].remaining


def financials(total_input: float, total_output: float, avg_in: float, avg_out: float,
               other_cost_rate: float | None = None) -> dict:
    rate = settings.OTHER_COST_RATE if other_cost_rate is None else other_cost_rate
    revenue = total_output * avg_out
    cost = total_input * avg_in
    other = cost * rate
    return {
        "revenue": _money(revenue),
        "cost": _money(cost),
        "profit": _money(revenue - cost),
        "other_costs": _money(other),
        "net_profit": _money(revenue - cost - other),
    }


def aggregate(records: Iterable, range_start: date, range_end: date,
              other_cost_rate: float | None = None) -> Summary:
    if range_end < range_start:
        raise InvalidPeriod(f"range end {range_end.isoformat()} is before range start {range_start.isoformat()}")

    ordered = sorted(records, key=lambda r: r.date)
    opening = opening_balance_before(ordered, range_start)
    stored = [r for r in ordered if range_start <= r.date <= range_end]
    days = compute_running_balance(zero_fill(stored, range_start, range_end), opening)

    total_in = sum(d.input for d in days)
    total_out = sum(d.output for d in days)
    avg_in = _mean_nonzero(r.unit_price_input for r in stored)
    avg_out = _mean_nonzero(r.unit_price_output for r in stored)

    return Summary(
        range_start=range_start,
        range_end=range_end,
        total_input=total_in,
        total_output=total_out,
        opening_balance=opening,
        closing_balance=days[-1].remaining,
        average_input_price=_money(avg_in),
        average_output_price=_money(avg_out),
        processing_efficiency=round(total_out / total_in * 100, 2) if total_in else 0.0,
        days_with_data=sum(1 for d in days if d.input or d.output),
        total_shortfall=sum(d.shortfall for d in days),
        days=days,
        **financials(total_in, total_out, avg_in, avg_out, other_cost_rate),
    )
