"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def summary_payload():
    """Portfolio as a client would send it"""
    return {
        "subscriptions": [
            {
                "id": "3f1c6a52-6a0e-4c43-9a4b-2f7d2c1f0a11",
                "name": "Netflix",
                "price": "15.99",
                "billing_period": {"kind": "monthly"},
                "next_renewal_date": "2024-01-15",
                "category": "Entertainment",
            },
            {
                "id": "9b7f1d2e-0c3a-4b5e-8f6a-1d2c3b4a5e6f",
                "name": "Gym",
                "price": "10.00",
                "billing_period": {"kind": "weekly"},
                "next_renewal_date": "2024-01-08",
                "reminder_lead_time_days": 1,
            },
            {
                "id": "c0ffee00-1234-4abc-9def-0123456789ab",
                "name": "Le Monde",
                "price": "90.00",
                "currency_code": "EUR",
                "billing_period": {"kind": "custom", "days": 45},
                "next_renewal_date": "2024-02-01",
            },
        ],
        "renewing_within_days": 7,
    }


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_request_id_header(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"

    generated = client.get("/health").headers["X-Request-ID"]
    assert generated and generated != "abc-123"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/entitlements", json={"has_premium_access": False, "current_count": 0})
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "subtrack_entitlement_checks_total" in response.text


def test_schedule_quarterly(client: TestClient):
    """POST /v1/billing/schedule returns dates after from_date"""
    response = client.post(
        "/v1/billing/schedule",
        json={"period": {"kind": "quarterly"}, "from_date": "2024-01-01", "count": 2},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["display_name"] == "Quarterly"
    assert data["monthly_multiplier"] == "1/3"
    assert data["dates"] == ["2024-04-01", "2024-07-01"]


def test_schedule_custom_period(client: TestClient):
    response = client.post(
        "/v1/billing/schedule",
        json={"period": {"kind": "custom", "days": 45}, "from_date": "2024-01-01"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["display_name"] == "45 Days"
    assert data["period"] == {"kind": "custom", "days": 45}
    assert len(data["dates"]) == 3
    assert data["dates"][0] == "2024-02-15"


def test_schedule_custom_without_days_is_rejected(client: TestClient):
    response = client.post(
        "/v1/billing/schedule",
        json={"period": {"kind": "custom"}, "from_date": "2024-01-01"},
    )
    assert response.status_code == 400


def test_schedule_zero_days_fails_validation(client: TestClient):
    response = client.post(
        "/v1/billing/schedule",
        json={"period": {"kind": "custom", "days": 0}, "from_date": "2024-01-01"},
    )
    assert response.status_code == 422


def test_schedule_past_calendar_range(client: TestClient):
    response = client.post(
        "/v1/billing/schedule",
        json={"period": {"kind": "yearly"}, "from_date": "9999-06-01", "count": 1},
    )
    assert response.status_code == 422


def test_schedule_count_capped(client: TestClient):
    response = client.post(
        "/v1/billing/schedule",
        json={"period": {"kind": "weekly"}, "from_date": "2024-01-01", "count": 10_000},
    )
    assert response.status_code == 400


def test_summary_endpoint(client: TestClient, summary_payload):
    """POST /v1/subscriptions/summary with a mixed-currency portfolio"""
    response = client.post("/v1/subscriptions/summary", json=summary_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["as_of"] == "2024-01-10"

    netflix, gym, le_monde = data["subscriptions"]
    assert netflix["estimated_monthly_cost"] == "15.99"
    assert netflix["estimated_yearly_cost"] == "191.88"
    assert netflix["days_until_renewal"] == 5
    assert netflix["reminder_date"] == "2024-01-12"
    assert netflix["upcoming_renewal_dates"] == ["2024-01-15", "2024-02-15", "2024-03-15"]

    assert gym["estimated_monthly_cost"] == "43.33"
    assert gym["days_until_renewal"] == -2
    assert gym["is_overdue"] is True
    assert gym["is_reminder_due"] is False

    assert le_monde["billing_period"] == "45 Days"
    assert le_monde["estimated_monthly_cost"] == "60.00"

    totals = {t["currency_code"]: t for t in data["totals"]}
    assert totals["USD"]["monthly"] == "59.32"
    assert totals["USD"]["count"] == 2
    assert totals["EUR"]["yearly"] == "720.00"

    usd_categories = [c["category"] for c in data["categories"] if c["currency_code"] == "USD"]
    assert usd_categories == ["Personal", "Entertainment"]

    assert data["renewing_soon"] == ["3f1c6a52-6a0e-4c43-9a4b-2f7d2c1f0a11"]


def test_summary_empty_portfolio(client: TestClient):
    response = client.post("/v1/subscriptions/summary", json={"subscriptions": []})

    assert response.status_code == 200
    data = response.json()
    assert data["subscriptions"] == []
    assert data["totals"] == []
    assert data["renewing_soon"] == []


def test_summary_rejects_negative_price(client: TestClient, summary_payload):
    summary_payload["subscriptions"][0]["price"] = "-1.00"
    response = client.post("/v1/subscriptions/summary", json=summary_payload)
    assert response.status_code == 422


def test_summary_rejects_day_count_on_fixed_period(client: TestClient, summary_payload):
    summary_payload["subscriptions"][0]["billing_period"] = {"kind": "monthly", "days": 30}
    response = client.post("/v1/subscriptions/summary", json=summary_payload)
    assert response.status_code == 400


def test_entitlements_free_user_at_limit(client: TestClient):
    response = client.post(
        "/v1/entitlements",
        json={"has_premium_access": False, "current_count": 3, "earned_extra_slots": 0},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["can_add_subscription"] is False
    assert data["remaining_free_slots"] == 0
    assert data["can_export_data"] is False


def test_entitlements_earned_slot(client: TestClient):
    response = client.post(
        "/v1/entitlements",
        json={"has_premium_access": False, "current_count": 3, "earned_extra_slots": 1},
    )

    assert response.status_code == 200
    assert response.json()["can_add_subscription"] is True


def test_entitlements_premium(client: TestClient):
    response = client.post(
        "/v1/entitlements",
        json={"has_premium_access": True, "current_count": 25},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["can_add_subscription"] is True
    assert data["remaining_free_slots"] is None
    assert data["can_sync_to_calendar"] is True


def test_entitlements_negative_count_fails_validation(client: TestClient):
    response = client.post(
        "/v1/entitlements",
        json={"has_premium_access": False, "current_count": -1},
    )
    assert response.status_code == 422


def test_summary_unknown_category_falls_back_to_personal(client: TestClient, summary_payload):
    summary_payload["subscriptions"][0]["category"] = "Streaming"
    response = client.post("/v1/subscriptions/summary", json=summary_payload)

    assert response.status_code == 200
    usd_categories = [c["category"] for c in response.json()["categories"] if c["currency_code"] == "USD"]
    assert usd_categories == ["Personal"]


def test_summary_fills_cancel_url_and_apple_flag(client: TestClient, summary_payload):
    summary_payload["subscriptions"][0]["is_apple_subscription"] = True
    response = client.post("/v1/subscriptions/summary", json=summary_payload)

    assert response.status_code == 200
    netflix, gym, _ = response.json()["subscriptions"]
    assert netflix["cancel_url"] == "https://www.netflix.com/cancelplan"
    assert netflix["is_apple_subscription"] is True
    assert gym["cancel_url"] is None
    assert gym["is_apple_subscription"] is False


def test_catalog_cancel_url_lookup(client: TestClient):
    response = client.get("/v1/catalog/cancel-url", params={"name": "Spotify Premium"})

    assert response.status_code == 200
    data = response.json()
    assert data["matched"] is True
    assert data["cancel_url"] == "https://www.spotify.com/account/billing/"


def test_catalog_cancel_url_no_match(client: TestClient):
    response = client.get("/v1/catalog/cancel-url", params={"name": "Local Gym"})

    assert response.status_code == 200
    assert response.json() == {"name": "Local Gym", "cancel_url": None, "matched": False}
