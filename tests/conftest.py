"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from fastapi.testclient import TestClient
from subtrack.api.main import create_app
from subtrack.api.dependencies import get_today
from subtrack.domain.billing import BillingPeriod
from subtrack.domain.models import Subscription, SubscriptionCategory

# Fixed "today" so date-relative assertions never depend on the wall clock
TODAY = date(2024, 1, 10)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a pinned clock"""
    app = create_app()
    app.dependency_overrides[get_today] = lambda: TODAY
    return TestClient(app)


@pytest.fixture
def sample_subscriptions() -> list[Subscription]:
    """A small mixed portfolio"""
    return [
        Subscription(
            name="Netflix",
            price=Decimal("15.99"),
            billing_period=BillingPeriod.monthly(),
            next_renewal_date=date(2024, 1, 15),
            category=SubscriptionCategory.ENTERTAINMENT,
        ),
        Subscription(
            name="Spotify",
            price=Decimal("10.99"),
            billing_period=BillingPeriod.monthly(),
            next_renewal_date=date(2024, 2, 1),
            category=SubscriptionCategory.ENTERTAINMENT,
        ),
        Subscription(
            name="GitHub",
            price=Decimal("48.00"),
            billing_period=BillingPeriod.yearly(),
            next_renewal_date=date(2024, 1, 12),
            category=SubscriptionCategory.BUSINESS,
        ),
        Subscription(
            name="Gym",
            price=Decimal("10.00"),
            billing_period=BillingPeriod.weekly(),
            next_renewal_date=date(2024, 1, 8),
            category=SubscriptionCategory.PERSONAL,
        ),
    ]
