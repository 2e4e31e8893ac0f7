"""POST /v1/entitlements - feature gates for a user state"""

from dataclasses import asdict
from fastapi import APIRouter, Depends

from subtrack.api.v1.schemas import EntitlementRequest, EntitlementResponse
from subtrack.api.dependencies import get_request_id
from subtrack.config import settings
from subtrack.domain.entitlements import evaluate_entitlements
from subtrack.infrastructure.observability.logging import log_entitlement_check
from subtrack.infrastructure.observability.metrics import record_entitlement_check

router = APIRouter()


@router.post("/entitlements", response_model=EntitlementResponse)
def check_entitlements(
    request_body: EntitlementRequest,
    request_id: str = Depends(get_request_id),
):
    """
    Evaluate every feature gate.

    Premium status comes from the caller's purchase verification; the free
    subscription limit comes from configuration.
    """
    report = evaluate_entitlements(
        has_premium_access=request_body.has_premium_access,
        current_count=request_body.current_count,
        earned_extra_slots=request_body.earned_extra_slots,
        free_limit=settings.free_subscription_limit,
    )

    record_entitlement_check(report.has_premium_access, report.can_add_subscription)
    log_entitlement_check(
        request_id,
        report.has_premium_access,
        request_body.current_count,
        report.can_add_subscription,
    )

    return EntitlementResponse(**asdict(report))
