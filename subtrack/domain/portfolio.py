"""Aggregations over a user's subscriptions - totals, breakdowns, filters"""

from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime
from fractions import Fraction
from typing import Dict, Iterable, List, Tuple
from subtrack.domain.exceptions import CalendarArithmeticError, InvalidArgumentError
from subtrack.domain.models import Subscription, SubscriptionCategory

_CATEGORY_ORDER = {category: i for i, category in enumerate(SubscriptionCategory)}


@dataclass
class CostTotals:
    """Monthly and yearly spend for one currency"""

    currency_code: str
    monthly: Fraction
    yearly: Fraction
    count: int


@dataclass
class CategoryTotal:
    """Monthly-equivalent spend for one category"""

    category: SubscriptionCategory
    amount: Fraction
    count: int


def total_monthly_cost(subscriptions: Iterable[Subscription]) -> Fraction:
    """Sum of monthly-equivalent costs (no currency conversion)"""
    return sum((s.estimated_monthly_cost for s in subscriptions), Fraction(0))


def total_yearly_cost(subscriptions: Iterable[Subscription]) -> Fraction:
    return sum((s.estimated_yearly_cost for s in subscriptions), Fraction(0))


def totals_by_currency(subscriptions: Iterable[Subscription]) -> Dict[str, CostTotals]:
    """Group spend per currency code, since amounts are never converted"""
    grouped: Dict[str, List[Subscription]] = {}
    for sub in subscriptions:
        grouped.setdefault(sub.currency_code, []).append(sub)

    return {
        code: CostTotals(
            currency_code=code,
            monthly=total_monthly_cost(subs),
            yearly=total_yearly_cost(subs),
            count=len(subs),
        )
        for code, subs in sorted(grouped.items())
    }


def category_breakdown(subscriptions: Iterable[Subscription]) -> List[CategoryTotal]:
    """
    Monthly-equivalent spend per category, largest first.

    Ties keep the category declaration order so output is deterministic.
    """
    totals: Dict[SubscriptionCategory, CategoryTotal] = {}
    for sub in subscriptions:
        entry = totals.get(sub.category)
        if entry is None:
            entry = totals[sub.category] = CategoryTotal(sub.category, Fraction(0), 0)
        entry.amount += sub.estimated_monthly_cost
        entry.count += 1

    return sorted(totals.values(), key=lambda t: (-t.amount, _CATEGORY_ORDER[t.category]))


def renewing_within(
    subscriptions: Iterable[Subscription],
    days: int,
    today: date | datetime,
) -> List[Subscription]:
    """Subscriptions renewing in the next ``days`` days, soonest first"""
    if days < 0:
        raise InvalidArgumentError(f"days must be non-negative, got {days}")
    matches = [s for s in subscriptions if s.is_renewing_within(days, today)]
    return sorted(matches, key=lambda s: s.next_renewal_date)


def filter_by_name(subscriptions: Iterable[Subscription], query: str) -> List[Subscription]:
    """Case-insensitive substring match on name; empty query matches all"""
    needle = query.strip().casefold()
    if not needle:
        return list(subscriptions)
    return [s for s in subscriptions if needle in s.name.casefold()]


def renewals_in_month(
    subscriptions: Iterable[Subscription],
    year: int,
    month: int,
) -> List[Tuple[date, Subscription]]:
    """
    Project each subscription's renewals forward and collect those in a month.

    Projection starts at ``next_renewal_date``; earlier months are not
    back-filled. Results are ordered by date, then name.
    """
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidArgumentError(f"year must be in {MINYEAR}..{MAXYEAR}, got {year}")
    if not 1 <= month <= 12:
        raise InvalidArgumentError(f"month must be in 1..12, got {month}")
    month_start = date(year, month, 1)

    hits: List[Tuple[date, Subscription]] = []
    for sub in subscriptions:
        current = sub.next_renewal_date
        while (current.year, current.month) <= (year, month):
            if current >= month_start:
                hits.append((current, sub))
            try:
                current = sub.billing_period.next_occurrence(current)
            except CalendarArithmeticError:
                # End of the calendar: no later renewal exists
                break

    return sorted(hits, key=lambda hit: (hit[0], hit[1].name))
