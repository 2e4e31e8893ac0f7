"""Billing period value type - renewal date and monthly cost arithmetic"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from fractions import Fraction
from typing import Any, Dict, List, Optional
from subtrack.domain.exceptions import InvalidArgumentError
from subtrack.utils.date_utils import add_days, add_months, add_years


class PeriodKind(str, Enum):
    """Recurrence cadence tag"""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMIANNUAL = "semiannual"
    YEARLY = "yearly"
    CUSTOM = "custom"


_DISPLAY_NAMES = {
    PeriodKind.WEEKLY: "Weekly",
    PeriodKind.BIWEEKLY: "Bi-Weekly",
    PeriodKind.MONTHLY: "Monthly",
    PeriodKind.QUARTERLY: "Quarterly",
    PeriodKind.SEMIANNUAL: "Semi-Annual",
    PeriodKind.YEARLY: "Yearly",
}

# Approximate lengths, used for sorting and rough comparisons only
_DAYS_IN_PERIOD = {
    PeriodKind.WEEKLY: 7,
    PeriodKind.BIWEEKLY: 14,
    PeriodKind.MONTHLY: 30,
    PeriodKind.QUARTERLY: 91,
    PeriodKind.SEMIANNUAL: 182,
    PeriodKind.YEARLY: 365,
}

_MONTHLY_MULTIPLIERS = {
    PeriodKind.WEEKLY: Fraction(52, 12),
    PeriodKind.BIWEEKLY: Fraction(26, 12),
    PeriodKind.MONTHLY: Fraction(1),
    PeriodKind.QUARTERLY: Fraction(1, 3),
    PeriodKind.SEMIANNUAL: Fraction(1, 6),
    PeriodKind.YEARLY: Fraction(1, 12),
}

_MONTH_STEPS = {
    PeriodKind.MONTHLY: 1,
    PeriodKind.QUARTERLY: 3,
    PeriodKind.SEMIANNUAL: 6,
}


@dataclass(frozen=True)
class BillingPeriod:
    """
    Recurrence cadence of a subscription charge.

    Fixed cadences carry no day count; ``custom`` carries ``days >= 1``.
    Instances are immutable and compare by value, so ``BillingPeriod.custom(45)``
    equals any other 45-day custom period.
    """

    kind: PeriodKind
    days: Optional[int] = None

    def __post_init__(self) -> None:
        try:
            kind = PeriodKind(self.kind)
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown billing period: {self.kind!r}") from e
        object.__setattr__(self, "kind", kind)

        if kind is PeriodKind.CUSTOM:
            if isinstance(self.days, bool) or not isinstance(self.days, int):
                raise InvalidArgumentError("Custom billing period requires an integer day count")
            if self.days < 1:
                raise InvalidArgumentError(f"Custom billing period must be at least 1 day, got {self.days}")
        elif self.days is not None:
            raise InvalidArgumentError(f"{kind.value} billing period does not take a day count")

    # Constructors for each variant

    @classmethod
    def weekly(cls) -> "BillingPeriod":
        return cls(PeriodKind.WEEKLY)

    @classmethod
    def biweekly(cls) -> "BillingPeriod":
        return cls(PeriodKind.BIWEEKLY)

    @classmethod
    def monthly(cls) -> "BillingPeriod":
        return cls(PeriodKind.MONTHLY)

    @classmethod
    def quarterly(cls) -> "BillingPeriod":
        return cls(PeriodKind.QUARTERLY)

    @classmethod
    def semiannual(cls) -> "BillingPeriod":
        return cls(PeriodKind.SEMIANNUAL)

    @classmethod
    def yearly(cls) -> "BillingPeriod":
        return cls(PeriodKind.YEARLY)

    @classmethod
    def custom(cls, days: int) -> "BillingPeriod":
        return cls(PeriodKind.CUSTOM, days)

    @classmethod
    def parse(cls, kind: str, days: Optional[int] = None) -> "BillingPeriod":
        """Build a period from its wire form, e.g. ``("custom", 45)``"""
        if isinstance(kind, str):
            kind = kind.strip().lower()
        return cls(kind, days)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "days": self.days}

    @property
    def display_name(self) -> str:
        if self.kind is PeriodKind.CUSTOM:
            return f"{self.days} Days"
        return _DISPLAY_NAMES[self.kind]

    @property
    def days_in_period(self) -> int:
        if self.kind is PeriodKind.CUSTOM:
            return self.days
        return _DAYS_IN_PERIOD[self.kind]

    @property
    def monthly_multiplier(self) -> Fraction:
        """
        Factor converting a price at this cadence to a monthly-equivalent cost.

        Exact rational values (52/12 for weekly, 30/days for custom) so that
        summing many subscriptions never accumulates rounding error.
        """
        if self.kind is PeriodKind.CUSTOM:
            return Fraction(30, self.days)
        return _MONTHLY_MULTIPLIERS[self.kind]

    def next_occurrence(self, from_date: date) -> date:
        """
        Compute the next charge date after ``from_date``.

        Month-based cadences add calendar months and clamp to the last day of
        a shorter target month. Yearly maps Feb 29 to Feb 28.

        Raises:
            CalendarArithmeticError: If the result is beyond the calendar range
        """
        if self.kind is PeriodKind.WEEKLY:
            return add_days(from_date, 7)
        if self.kind is PeriodKind.BIWEEKLY:
            return add_days(from_date, 14)
        if self.kind is PeriodKind.YEARLY:
            return add_years(from_date, 1)
        if self.kind is PeriodKind.CUSTOM:
            return add_days(from_date, self.days)
        return add_months(from_date, _MONTH_STEPS[self.kind])

    def __str__(self) -> str:
        return self.display_name


STANDARD_PERIODS: List[BillingPeriod] = [
    BillingPeriod.weekly(),
    BillingPeriod.biweekly(),
    BillingPeriod.monthly(),
    BillingPeriod.quarterly(),
    BillingPeriod.semiannual(),
    BillingPeriod.yearly(),
]
