"""Entitlement and feature-gate rules

Premium status is owned by the purchase-verification platform; here it is a
plain boolean input. Every gate is a pure function of its arguments.
"""

from dataclasses import dataclass
from typing import Optional
from subtrack.domain.exceptions import InvalidArgumentError

FREE_SUBSCRIPTION_LIMIT = 3


@dataclass(frozen=True)
class EntitlementReport:
    """All feature gates evaluated for one user state"""

    has_premium_access: bool
    can_add_subscription: bool
    remaining_free_slots: Optional[int]  # None = unlimited
    can_add_unlimited_subscriptions: bool
    can_export_data: bool
    can_use_notifications: bool
    can_sync_to_calendar: bool
    can_use_widgets: bool
    is_charts_unlocked: bool


def _check_counts(current_count: int, earned_extra_slots: int, free_limit: int) -> None:
    if current_count < 0:
        raise InvalidArgumentError(f"current_count must be non-negative, got {current_count}")
    if earned_extra_slots < 0:
        raise InvalidArgumentError(f"earned_extra_slots must be non-negative, got {earned_extra_slots}")
    if free_limit < 0:
        raise InvalidArgumentError(f"free_limit must be non-negative, got {free_limit}")


def can_add_subscription(
    has_premium_access: bool,
    current_count: int,
    earned_extra_slots: int = 0,
    free_limit: int = FREE_SUBSCRIPTION_LIMIT,
) -> bool:
    """
    Decide whether another subscription may be added.

    Premium users are unlimited. Free users get ``free_limit`` slots plus any
    slots earned from rewarded ads.
    """
    _check_counts(current_count, earned_extra_slots, free_limit)
    if has_premium_access:
        return True
    return current_count < free_limit + earned_extra_slots


def remaining_free_slots(
    has_premium_access: bool,
    current_count: int,
    earned_extra_slots: int = 0,
    free_limit: int = FREE_SUBSCRIPTION_LIMIT,
) -> Optional[int]:
    """Slots left before the free limit is hit, or None when unlimited"""
    _check_counts(current_count, earned_extra_slots, free_limit)
    if has_premium_access:
        return None
    return max(0, free_limit + earned_extra_slots - current_count)


def reward_extra_slot(earned_extra_slots: int) -> int:
    """Slot count after a rewarded ad is watched; caller persists the result"""
    if earned_extra_slots < 0:
        raise InvalidArgumentError(f"earned_extra_slots must be non-negative, got {earned_extra_slots}")
    return earned_extra_slots + 1


def can_add_unlimited_subscriptions(has_premium_access: bool) -> bool:
    return has_premium_access


def can_export_data(has_premium_access: bool) -> bool:
    return has_premium_access


def can_use_notifications(has_premium_access: bool) -> bool:
    return has_premium_access


def can_sync_to_calendar(has_premium_access: bool) -> bool:
    return has_premium_access


def can_use_widgets(has_premium_access: bool) -> bool:
    return has_premium_access


def is_charts_unlocked(has_premium_access: bool) -> bool:
    return has_premium_access


def evaluate_entitlements(
    has_premium_access: bool,
    current_count: int,
    earned_extra_slots: int = 0,
    free_limit: int = FREE_SUBSCRIPTION_LIMIT,
) -> EntitlementReport:
    """Main entry point: evaluate every gate for one user state"""
    return EntitlementReport(
        has_premium_access=has_premium_access,
        can_add_subscription=can_add_subscription(
            has_premium_access, current_count, earned_extra_slots, free_limit
        ),
        remaining_free_slots=remaining_free_slots(
            has_premium_access, current_count, earned_extra_slots, free_limit
        ),
        can_add_unlimited_subscriptions=can_add_unlimited_subscriptions(has_premium_access),
        can_export_data=can_export_data(has_premium_access),
        can_use_notifications=can_use_notifications(has_premium_access),
        can_sync_to_calendar=can_sync_to_calendar(has_premium_access),
        can_use_widgets=can_use_widgets(has_premium_access),
        is_charts_unlocked=is_charts_unlocked(has_premium_access),
    )
