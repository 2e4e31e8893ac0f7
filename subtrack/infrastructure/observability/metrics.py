"""Prometheus metrics for renewal schedules, cost summaries and feature gates"""

from prometheus_client import Counter, Histogram

# Computation metrics
schedule_counter = Counter(
    "subtrack_schedule_total",
    "Renewal schedules computed",
    ["period"],  # weekly | monthly | ... | custom
)

summary_size_histogram = Histogram(
    "subtrack_summary_subscriptions",
    "Subscriptions per summary request",
    buckets=[1, 3, 5, 10, 25, 50, 100],
)

calendar_failure_counter = Counter(
    "subtrack_calendar_failures_total",
    "Date computations the calendar could not represent",
)

# Entitlement metrics
entitlement_check_counter = Counter(
    "subtrack_entitlement_checks_total",
    "Add-subscription gate evaluations",
    ["tier", "outcome"],  # free | premium, allowed | blocked
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_entitlement_check(has_premium_access: bool, allowed: bool) -> None:
    """Record gate outcome for monitoring free-tier limit pressure"""
    tier = "premium" if has_premium_access else "free"
    outcome = "allowed" if allowed else "blocked"
    entitlement_check_counter.labels(tier=tier, outcome=outcome).inc()
