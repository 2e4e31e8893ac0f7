"""POST /v1/billing/schedule - renewal dates for a billing period"""

import logging
from typing import List
from datetime import date
from fastapi import APIRouter, Depends, HTTPException

from subtrack.api.v1.schemas import BillingPeriodSchema, ScheduleRequest, ScheduleResponse
from subtrack.api.dependencies import get_request_id
from subtrack.config import settings
from subtrack.domain.exceptions import CalendarArithmeticError, InvalidArgumentError
from subtrack.infrastructure.observability.metrics import calendar_failure_counter, schedule_counter

router = APIRouter()


@router.post("/billing/schedule", response_model=ScheduleResponse)
def create_schedule(
    request_body: ScheduleRequest,
    request_id: str = Depends(get_request_id),
):
    """
    Project the next ``count`` charge dates strictly after ``from_date``.

    Returns the period's display name and its exact monthly multiplier
    alongside the dates.
    """
    if request_body.count > settings.max_upcoming_count:
        raise HTTPException(
            status_code=400,
            detail=f"count must not exceed {settings.max_upcoming_count}",
        )

    try:
        period = request_body.period.to_domain()

        dates: List[date] = []
        current = request_body.from_date
        for _ in range(request_body.count):
            current = period.next_occurrence(current)
            dates.append(current)

    except InvalidArgumentError as e:
        logging.warning(f"Invalid billing period: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    except CalendarArithmeticError as e:
        calendar_failure_counter.inc()
        logging.warning(f"Calendar arithmetic failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    schedule_counter.labels(period=period.kind.value).inc()

    return ScheduleResponse(
        period=BillingPeriodSchema(**period.to_dict()),
        display_name=period.display_name,
        days_in_period=period.days_in_period,
        monthly_multiplier=str(period.monthly_multiplier),
        dates=dates,
    )
