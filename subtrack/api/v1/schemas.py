"""Pydantic schemas for API request/response validation"""

from datetime import date
from decimal import Decimal
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, UUID4, field_validator

from subtrack.config import settings
from subtrack.domain.billing import BillingPeriod
from subtrack.domain.models import Subscription, SubscriptionCategory

PeriodKindLiteral = Literal["weekly", "biweekly", "monthly", "quarterly", "semiannual", "yearly", "custom"]


class BillingPeriodSchema(BaseModel):
    """Wire form of a billing period: ``{"kind": "custom", "days": 45}``"""

    kind: PeriodKindLiteral
    days: Optional[int] = Field(None, ge=1, description="Required for custom periods only")

    def to_domain(self) -> BillingPeriod:
        return BillingPeriod.parse(self.kind, self.days)


class ScheduleRequest(BaseModel):
    """Request body for POST /v1/billing/schedule"""

    period: BillingPeriodSchema
    from_date: date
    count: int = Field(default_factory=lambda: settings.default_upcoming_count, ge=1)


class ScheduleResponse(BaseModel):
    """Response for POST /v1/billing/schedule"""

    period: BillingPeriodSchema
    display_name: str
    days_in_period: int
    monthly_multiplier: str = Field(..., description="Exact fraction, e.g. '13/3'")
    dates: List[date]


class SubscriptionInput(BaseModel):
    """One subscription as held by the client"""

    id: Optional[UUID4] = None
    name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    currency_code: str = Field(default_factory=lambda: settings.default_currency, min_length=3, max_length=3)
    billing_period: BillingPeriodSchema
    next_renewal_date: date
    category: SubscriptionCategory = SubscriptionCategory.PERSONAL
    reminder_lead_time_days: int = Field(default_factory=lambda: settings.default_reminder_lead_days, ge=0)
    reminders_enabled: bool = True
    is_apple_subscription: bool = False
    cancel_url: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def parse_category(cls, value):
        """Unknown categories fall back to Personal instead of failing"""
        if isinstance(value, SubscriptionCategory):
            return value
        return SubscriptionCategory.from_raw(value)

    def to_domain(self) -> Subscription:
        extra = {"id": self.id} if self.id is not None else {}
        return Subscription(
            name=self.name,
            price=self.price,
            currency_code=self.currency_code,
            billing_period=self.billing_period.to_domain(),
            next_renewal_date=self.next_renewal_date,
            category=self.category,
            reminder_lead_time_days=self.reminder_lead_time_days,
            reminders_enabled=self.reminders_enabled,
            is_apple_subscription=self.is_apple_subscription,
            cancel_url=self.cancel_url,
            notes=self.notes,
            **extra,
        )


class SummaryRequest(BaseModel):
    """Request body for POST /v1/subscriptions/summary"""

    subscriptions: List[SubscriptionInput]
    renewing_within_days: int = Field(7, ge=0)
    upcoming_count: int = Field(default_factory=lambda: settings.default_upcoming_count, ge=0)


class SubscriptionSummary(BaseModel):
    """Derived values for a single subscription"""

    id: str
    name: str
    currency_code: str
    billing_period: str
    estimated_monthly_cost: Decimal
    estimated_yearly_cost: Decimal
    days_until_renewal: int
    is_overdue: bool
    reminder_date: date
    is_reminder_due: bool
    upcoming_renewal_dates: List[date]
    cancel_url: Optional[str] = None
    is_apple_subscription: bool


class CurrencyTotalSchema(BaseModel):
    """Spend totals for one currency"""

    currency_code: str
    monthly: Decimal
    yearly: Decimal
    count: int


class CategoryTotalSchema(BaseModel):
    """Monthly-equivalent spend for one category within one currency"""

    currency_code: str
    category: SubscriptionCategory
    monthly: Decimal
    count: int


class SummaryResponse(BaseModel):
    """Response for POST /v1/subscriptions/summary"""

    as_of: date
    subscriptions: List[SubscriptionSummary]
    totals: List[CurrencyTotalSchema]
    categories: List[CategoryTotalSchema]
    renewing_soon: List[str]


class EntitlementRequest(BaseModel):
    """Request body for POST /v1/entitlements"""

    has_premium_access: bool
    current_count: int = Field(..., ge=0)
    earned_extra_slots: int = Field(0, ge=0)


class EntitlementResponse(BaseModel):
    """Response for POST /v1/entitlements"""

    has_premium_access: bool
    can_add_subscription: bool
    remaining_free_slots: Optional[int] = None
    can_add_unlimited_subscriptions: bool
    can_export_data: bool
    can_use_notifications: bool
    can_sync_to_calendar: bool
    can_use_widgets: bool
    is_charts_unlocked: bool


class CancelUrlResponse(BaseModel):
    """Response for GET /v1/catalog/cancel-url"""

    name: str
    cancel_url: Optional[str] = None
    matched: bool
