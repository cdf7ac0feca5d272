from dataclasses import dataclass
from datetime import date, timedelta

import pytest

from app.errors import InvalidPeriod
from app.services.aggregate import aggregate, financials, opening_balance_before


@dataclass
class Row:
    date: date
    input_quantity: float
    output_quantity: float
    unit_price_input: float = 0.0
    unit_price_output: float = 0.0


START = date(2025, 6, 9)


def week_of(qty_in, qty_out, **prices):
    return [Row(START + timedelta(days=i), qty_in, qty_out, **prices) for i in range(7)]


def test_weekly_totals_and_efficiency():
    s = aggregate(week_of(10, 5), START, START + timedelta(days=6))
    assert s.total_input == 70
    assert s.total_output == 35
    assert s.processing_efficiency == 50
    assert s.opening_balance == 0
    assert s.closing_balance == 35
    assert s.days_with_data == 7
    assert len(s.days) == 7


def test_empty_range_is_all_zero():
    s = aggregate([], START, START + timedelta(days=6))
    assert (s.total_input, s.total_output, s.closing_balance) == (0, 0, 0)
    assert s.processing_efficiency == 0
    assert s.average_input_price == 0
    assert s.revenue == s.cost == s.net_profit == 0


def test_single_day_matches_the_day():
    rows = [Row(START, 40, 15, 12000, 15000)]
    s = aggregate(rows, START, START)
    assert (s.total_input, s.total_output, s.closing_balance) == (40, 15, 25)
    assert s.days[0].remaining == 25
    assert s.average_input_price == 12000
    assert s.average_output_price == 15000


def test_opening_balance_comes_from_history():
    rows = [Row(date(2025, 6, 1), 30, 10), Row(date(2025, 6, 3), 0, 5), Row(date(2025, 6, 10), 4, 0)]
    assert opening_balance_before(rows, date(2025, 6, 9)) == 15
    s = aggregate(rows, date(2025, 6, 9), date(2025, 6, 15))
    assert s.opening_balance == 15
    assert s.total_input == 4
    assert s.closing_balance == 19


def test_no_history_opens_at_zero():
    assert opening_balance_before([Row(START, 5, 0)], START) == 0


def test_average_prices_ignore_zero_prices():
    rows = [Row(START, 1, 0, 10000, 0), Row(START + timedelta(days=1), 1, 0, 0, 0), Row(START + timedelta(days=2), 1, 0, 14000, 20000)]
    s = aggregate(rows, START, START + timedelta(days=2))
    assert s.average_input_price == 12000
    assert s.average_output_price == 20000


def test_records_out_of_order_are_sorted():
    rows = list(reversed(week_of(10, 5)))
    assert aggregate(rows, START, START + timedelta(days=6)).closing_balance == 35


def test_inverted_range_rejected():
    with pytest.raises(InvalidPeriod):
        aggregate([], START, START - timedelta(days=1))


def test_monthly_profit():
    f = financials(total_input=120, total_output=100, avg_in=60000, avg_out=150000, other_cost_rate=0)
    assert f["revenue"] == 15_000_000
    assert f["cost"] == 7_200_000
    assert f["profit"] == 7_800_000
    assert f["net_profit"] == 7_800_000


def test_other_costs_reduce_net_profit():
    f = financials(total_input=120, total_output=100, avg_in=60000, avg_out=150000, other_cost_rate=0.05)
    assert f["other_costs"] == 360_000
    assert f["profit"] == 7_800_000
    assert f["net_profit"] == 7_440_000


def test_summary_financials_use_aggregated_totals():
    s = aggregate(week_of(10, 5, unit_price_input=12000, unit_price_output=15000), START, START + timedelta(days=6),
                  other_cost_rate=0)
    assert s.revenue == 35 * 15000
    assert s.cost == 70 * 12000
    assert s.profit == 35 * 15000 - 70 * 12000
