"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter
from subtrack.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_summary(
    request_id: str,
    subscription_count: int,
    currencies: list[str],
    renewing_soon: int,
    duration_ms: float,
) -> None:
    """Log structured portfolio summary outcome"""
    logging.info(
        "Summary completed",
        extra={
            "request_id": request_id,
            "step": "summary_complete",
            "subscription_count": subscription_count,
            "currencies": currencies,
            "renewing_soon": renewing_soon,
            "duration_ms": duration_ms,
        },
    )


def log_entitlement_check(
    request_id: str,
    has_premium_access: bool,
    current_count: int,
    can_add_subscription: bool,
) -> None:
    """Log structured entitlement gate outcome"""
    logging.info(
        "Entitlement check completed",
        extra={
            "request_id": request_id,
            "step": "entitlement_check",
            "tier": "premium" if has_premium_access else "free",
            "current_count": current_count,
            "add_outcome": "allowed" if can_add_subscription else "blocked",
        },
    )
