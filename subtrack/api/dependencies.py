"""Dependency injection for FastAPI endpoints"""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo
from fastapi import Request
from subtrack.config import settings


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_today() -> date:
    """Current calendar date in the configured timezone; overridden in tests"""
    tz = timezone.utc if settings.timezone.upper() == "UTC" else ZoneInfo(settings.timezone)
    return datetime.now(tz).date()
