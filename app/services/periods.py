from datetime import date, timedelta
import calendar

from app.config import settings
from app.errors import InvalidPeriod

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def day_name(d: date) -> str:
    return DAY_NAMES[d.weekday()]


def check_year(year: int) -> None:
    if not settings.MIN_YEAR <= year <= settings.MAX_YEAR:
        raise InvalidPeriod(f"year must be between {settings.MIN_YEAR} and {settings.MAX_YEAR}")


def week_dates(week: int, year: int) -> list[date]:
    """Week 1 starts on the first Monday on or after 1 January."""
    if not 1 <= week <= 53:
        raise InvalidPeriod("week must be between 1 and 53")
    check_year(year)
    jan1 = date(year, 1, 1)
    first_monday = jan1 + timedelta(days=(7 - jan1.weekday()) % 7)
    start = first_monday + timedelta(weeks=week - 1)
    return [start + timedelta(days=i) for i in range(7)]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    if not 1 <= month <= 12:
        raise InvalidPeriod("month must be between 1 and 12")
    return date(year, month, 1), date(year, month, calendar.monthrange(year, month)[1])


def trailing_months(year: int, month: int, count: int) -> list[tuple[int, int]]:
    """``count`` (year, month) pairs ending with year/month, oldest first."""
    if not 1 <= month <= 12:
        raise InvalidPeriod("month must be between 1 and 12")
    check_year(year)
    if not 1 <= count <= settings.MAX_MONTH_COUNT:
        raise InvalidPeriod(f"month_count must be between 1 and {settings.MAX_MONTH_COUNT}")
    index = year * 12 + (month - 1)
    return [(i // 12, i % 12 + 1) for i in range(index - count + 1, index + 1)]
