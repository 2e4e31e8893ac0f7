"""Unit tests for date and money helpers"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from fractions import Fraction
from subtrack.domain.exceptions import CalendarArithmeticError
from subtrack.utils.date_utils import add_days, add_months, add_years, days_between, start_of_day
from subtrack.utils.money import format_amount, to_money


def test_start_of_day():
    assert start_of_day(datetime(2024, 5, 1, 18, 30)) == date(2024, 5, 1)
    assert start_of_day(date(2024, 5, 1)) == date(2024, 5, 1)


def test_days_between_can_be_negative():
    assert days_between(date(2024, 1, 10), date(2024, 1, 15)) == 5
    assert days_between(date(2024, 1, 15), date(2024, 1, 10)) == -5


def test_add_months_clamps():
    assert add_months(date(2024, 3, 31), 1) == date(2024, 4, 30)
    assert add_months(date(2024, 3, 31), -1) == date(2024, 2, 29)


def test_add_years_leap_day():
    assert add_years(date(2024, 2, 29), 4) == date(2028, 2, 29)
    assert add_years(date(2024, 2, 29), 1) == date(2025, 2, 28)


def test_overflow_raises_calendar_error():
    with pytest.raises(CalendarArithmeticError):
        add_days(date.min, -1)
    with pytest.raises(CalendarArithmeticError):
        add_months(date(1, 1, 1), -1)


def test_to_money_rounds_half_up():
    assert to_money(Fraction(130, 3)) == Decimal("43.33")
    assert to_money(Fraction(2, 3)) == Decimal("0.67")
    assert to_money(Decimal("0.125")) == Decimal("0.13")
    assert to_money(12) == Decimal("12.00")


def test_format_amount():
    assert format_amount(Fraction("15.99"), "usd") == "15.99 USD"
