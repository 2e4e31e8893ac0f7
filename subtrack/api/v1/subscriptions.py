"""POST /v1/subscriptions/summary - derived costs and renewal info"""

import time
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException

from subtrack.api.v1.schemas import (
    CategoryTotalSchema,
    CurrencyTotalSchema,
    SubscriptionSummary,
    SummaryRequest,
    SummaryResponse,
)
from subtrack.api.dependencies import get_request_id, get_today
from subtrack.config import settings
from subtrack.domain.exceptions import CalendarArithmeticError, InvalidArgumentError
from subtrack.domain.portfolio import category_breakdown, renewing_within, totals_by_currency
from subtrack.infrastructure.observability.logging import log_summary
from subtrack.infrastructure.observability.metrics import calendar_failure_counter, summary_size_histogram
from subtrack.utils.money import to_money

router = APIRouter()


@router.post("/subscriptions/summary", response_model=SummaryResponse)
def summarize_subscriptions(
    request_body: SummaryRequest,
    request_id: str = Depends(get_request_id),
    today: date = Depends(get_today),
):
    """
    Compute per-subscription and portfolio-level figures.

    Flow:
    1. Build domain subscriptions from the payload
    2. Derive costs, countdowns and upcoming dates for each
    3. Total spend per currency (amounts are never converted)
    4. Break down monthly spend per category within each currency
    5. List subscriptions renewing within the requested window
    """
    start_time = time.perf_counter()

    if request_body.upcoming_count > settings.max_upcoming_count:
        raise HTTPException(
            status_code=400,
            detail=f"upcoming_count must not exceed {settings.max_upcoming_count}",
        )

    try:
        # 1. Domain objects
        subscriptions = [item.to_domain() for item in request_body.subscriptions]

        # 2. Per-subscription values
        items = [
            SubscriptionSummary(
                id=str(sub.id),
                name=sub.name,
                currency_code=sub.currency_code,
                billing_period=sub.billing_period.display_name,
                estimated_monthly_cost=to_money(sub.estimated_monthly_cost),
                estimated_yearly_cost=to_money(sub.estimated_yearly_cost),
                days_until_renewal=sub.days_until_renewal(today),
                is_overdue=sub.is_overdue(today),
                reminder_date=sub.reminder_date,
                is_reminder_due=sub.is_reminder_due(today),
                upcoming_renewal_dates=sub.upcoming_renewal_dates(request_body.upcoming_count),
                cancel_url=sub.cancel_url,
                is_apple_subscription=sub.is_apple_subscription,
            )
            for sub in subscriptions
        ]

        # 3. Totals per currency
        totals = [
            CurrencyTotalSchema(
                currency_code=code,
                monthly=to_money(t.monthly),
                yearly=to_money(t.yearly),
                count=t.count,
            )
            for code, t in totals_by_currency(subscriptions).items()
        ]

        # 4. Category breakdown, per currency
        categories = []
        for code in sorted({sub.currency_code for sub in subscriptions}):
            in_currency = [sub for sub in subscriptions if sub.currency_code == code]
            categories.extend(
                CategoryTotalSchema(
                    currency_code=code,
                    category=entry.category,
                    monthly=to_money(entry.amount),
                    count=entry.count,
                )
                for entry in category_breakdown(in_currency)
            )

        # 5. Renewing soon
        soon = renewing_within(subscriptions, request_body.renewing_within_days, today)

    except InvalidArgumentError as e:
        logging.warning(f"Invalid subscription data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except CalendarArithmeticError as e:
        calendar_failure_counter.inc()
        logging.warning(f"Calendar arithmetic failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    summary_size_histogram.observe(len(subscriptions))
    log_summary(
        request_id,
        len(subscriptions),
        [t.currency_code for t in totals],
        len(soon),
        (time.perf_counter() - start_time) * 1000,
    )

    return SummaryResponse(
        as_of=today,
        subscriptions=items,
        totals=totals,
        categories=categories,
        renewing_soon=[str(sub.id) for sub in soon],
    )
