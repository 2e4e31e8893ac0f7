"""Domain models - pure Python dataclasses representing business entities"""

import uuid
from dataclasses import dataclass, field, fields
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from fractions import Fraction
from typing import Any, List, Optional
from subtrack.domain.billing import BillingPeriod
from subtrack.domain.catalog import get_cancel_url
from subtrack.domain.exceptions import InvalidArgumentError
from subtrack.utils.date_utils import add_days, days_between, start_of_day

DEFAULT_CURRENCY = "USD"
DEFAULT_REMINDER_LEAD_DAYS = 3

_IMMUTABLE_FIELDS = {"id", "created_at"}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SubscriptionCategory(str, Enum):
    """Organizational bucket for a subscription"""

    PERSONAL = "Personal"
    BUSINESS = "Business"
    ENTERTAINMENT = "Entertainment"
    UTILITIES = "Utilities"
    TRIALS = "Trials"

    @classmethod
    def from_raw(cls, raw: Optional[str]) -> "SubscriptionCategory":
        """Parse a stored value, falling back to Personal for unknown input"""
        if not isinstance(raw, str):
            return cls.PERSONAL
        for category in cls:
            if raw.strip().lower() == category.value.lower():
                return category
        return cls.PERSONAL


@dataclass
class Subscription:
    """
    A tracked recurring charge.

    Mutated in place over its lifecycle through ``update``; every mutation
    refreshes ``updated_at``. ``id`` and ``created_at`` are set once.
    """

    name: str
    price: Decimal
    billing_period: BillingPeriod
    next_renewal_date: date
    currency_code: str = DEFAULT_CURRENCY
    category: SubscriptionCategory = SubscriptionCategory.PERSONAL
    reminder_lead_time_days: int = DEFAULT_REMINDER_LEAD_DAYS
    reminders_enabled: bool = True
    is_apple_subscription: bool = False
    cancel_url: Optional[str] = None
    notes: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        self._validate()
        if self.updated_at is None:
            self.updated_at = self.created_at

    def _validate(self) -> None:
        if not isinstance(self.price, Decimal):
            # str() first so floats like 15.99 don't carry binary noise
            try:
                self.price = Decimal(str(self.price))
            except InvalidOperation as e:
                raise InvalidArgumentError(f"Invalid price: {self.price!r}") from e
        if not self.price.is_finite() or self.price < 0:
            raise InvalidArgumentError(f"Price must be a non-negative amount, got {self.price}")

        if not isinstance(self.billing_period, BillingPeriod):
            raise InvalidArgumentError("billing_period must be a BillingPeriod")

        if not isinstance(self.name, str):
            raise InvalidArgumentError("name must be a string")

        if not isinstance(self.currency_code, str):
            raise InvalidArgumentError(f"currency_code must be a string, got {self.currency_code!r}")

        if isinstance(self.reminder_lead_time_days, bool) or not isinstance(self.reminder_lead_time_days, int):
            raise InvalidArgumentError(
                f"Reminder lead time must be a whole number of days, got {self.reminder_lead_time_days!r}"
            )
        if self.reminder_lead_time_days < 0:
            raise InvalidArgumentError(
                f"Reminder lead time must be non-negative, got {self.reminder_lead_time_days}"
            )

        if not isinstance(self.next_renewal_date, date):
            raise InvalidArgumentError(f"next_renewal_date must be a date, got {self.next_renewal_date!r}")
        self.next_renewal_date = start_of_day(self.next_renewal_date)
        self.currency_code = self.currency_code.upper()
        if not isinstance(self.category, SubscriptionCategory):
            self.category = SubscriptionCategory.from_raw(self.category)

        # Catalog lookup never overrides a link the user supplied
        if not self.cancel_url:
            self.cancel_url = get_cancel_url(self.name)

    # Lifecycle

    def update(self, now: Optional[datetime] = None, **changes: Any) -> None:
        """Apply field changes in place and refresh ``updated_at``"""
        known = {f.name for f in fields(self)}
        for name in changes:
            if name in _IMMUTABLE_FIELDS:
                raise InvalidArgumentError(f"{name} cannot be changed after creation")
            if name not in known or name == "updated_at":
                raise InvalidArgumentError(f"Unknown subscription field: {name}")

        previous = {f.name: getattr(self, f.name) for f in fields(self)}
        for name, value in changes.items():
            setattr(self, name, value)
        try:
            self._validate()
        except Exception:
            for name, value in previous.items():
                setattr(self, name, value)
            raise

        self.updated_at = now or _utcnow()

    def advance_renewal(self, now: Optional[datetime] = None) -> date:
        """Move the renewal date forward by one billing period"""
        self.next_renewal_date = self.billing_period.next_occurrence(self.next_renewal_date)
        self.updated_at = now or _utcnow()
        return self.next_renewal_date

    # Derived values

    @property
    def notification_identifier(self) -> str:
        return f"subscription-{self.id}"

    @property
    def estimated_monthly_cost(self) -> Fraction:
        return Fraction(self.price) * self.billing_period.monthly_multiplier

    @property
    def estimated_yearly_cost(self) -> Fraction:
        return self.estimated_monthly_cost * 12

    @property
    def reminder_date(self) -> date:
        return add_days(self.next_renewal_date, -self.reminder_lead_time_days)

    def days_until_renewal(self, today: date | datetime) -> int:
        """
        Whole days from ``today`` to the renewal date.

        Negative when the renewal date has passed; overdue subscriptions are
        reported as such rather than clamped to zero.
        """
        return days_between(today, self.next_renewal_date)

    def is_renewing_within(self, days: int, today: date | datetime) -> bool:
        return 0 <= self.days_until_renewal(today) <= days

    def is_overdue(self, today: date | datetime) -> bool:
        return self.days_until_renewal(today) < 0

    def is_reminder_due(self, today: date | datetime) -> bool:
        """True from the reminder date up to and including the renewal date"""
        if not self.reminders_enabled:
            return False
        return self.reminder_date <= start_of_day(today) <= self.next_renewal_date

    def upcoming_renewal_dates(self, count: int = 3) -> List[date]:
        """The next ``count`` charge dates, starting with ``next_renewal_date``"""
        if count < 0:
            raise InvalidArgumentError(f"count must be non-negative, got {count}")

        dates: List[date] = []
        current = self.next_renewal_date
        for i in range(count):
            dates.append(current)
            if i < count - 1:
                current = self.billing_period.next_occurrence(current)
        return dates
