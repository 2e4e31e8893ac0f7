"""Date manipulation utilities"""

from datetime import date, datetime, timedelta
from dateutil.relativedelta import relativedelta
from subtrack.domain.exceptions import CalendarArithmeticError


def start_of_day(value: date | datetime) -> date:
    """Reduce a date or datetime to its calendar date (time-of-day dropped)"""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(start: date | datetime, end: date | datetime) -> int:
    """Whole calendar days from start to end (negative if end is earlier)"""
    return (start_of_day(end) - start_of_day(start)).days


def add_days(from_date: date, days: int) -> date:
    """Add calendar days to a date"""
    try:
        return from_date + timedelta(days=days)
    except OverflowError as e:
        raise CalendarArithmeticError(f"Cannot add {days} days to {from_date}") from e


def add_months(from_date: date, months: int) -> date:
    """
    Add calendar months, keeping the day-of-month.

    When the target month is shorter the result is clamped to its last day:
    2024-01-31 + 1 month = 2024-02-29, 2023-01-31 + 1 month = 2023-02-28.
    """
    try:
        return from_date + relativedelta(months=months)
    except (ValueError, OverflowError) as e:
        raise CalendarArithmeticError(f"Cannot add {months} months to {from_date}") from e


def add_years(from_date: date, years: int) -> date:
    """Add calendar years; Feb 29 lands on Feb 28 in a non-leap target year"""
    try:
        return from_date + relativedelta(years=years)
    except (ValueError, OverflowError) as e:
        raise CalendarArithmeticError(f"Cannot add {years} years to {from_date}") from e
