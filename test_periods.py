from datetime import date

import pytest

from app.errors import InvalidPeriod
from app.services.periods import day_name, month_bounds, trailing_months, week_dates


def test_week_one_starts_on_first_monday():
    assert week_dates(1, 2024)[0] == date(2024, 1, 1)      # 1 Jan 2024 is a Monday
    assert week_dates(1, 2025)[0] == date(2025, 1, 6)      # 1 Jan 2025 is a Wednesday


def test_week_dates_are_seven_consecutive_days():
    dates = week_dates(23, 2025)
    assert dates[0] == date(2025, 6, 9)
    assert dates[-1] == date(2025, 6, 15)
    assert len(dates) == 7


@pytest.mark.parametrize("week,year", [(0, 2025), (54, 2025), (10, 2019), (10, 2031)])
def test_week_out_of_range(week, year):
    with pytest.raises(InvalidPeriod):
        week_dates(week, year)


def test_month_bounds_handles_leap_year():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2025, 12) == (date(2025, 12, 1), date(2025, 12, 31))
    with pytest.raises(InvalidPeriod):
        month_bounds(2025, 13)


def test_trailing_months_cross_year_boundary():
    assert trailing_months(2025, 2, 4) == [(2024, 11), (2024, 12), (2025, 1), (2025, 2)]
    assert trailing_months(2025, 6, 1) == [(2025, 6)]


def test_trailing_months_count_limits():
    with pytest.raises(InvalidPeriod):
        trailing_months(2025, 6, 0)
    with pytest.raises(InvalidPeriod):
        trailing_months(2025, 6, 1000)


def test_day_name():
    assert day_name(date(2025, 6, 9)) == "Monday"
    assert day_name(date(2025, 6, 15)) == "Sunday"
