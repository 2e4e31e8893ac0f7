"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="SUBTRACK_", extra="ignore"
    )

    # Service
    service_name: str = "subtrack-core"
    log_level: str = "INFO"

    # "Today" is resolved in this zone for date-relative computations
    timezone: str = "UTC"

    # Subscription defaults
    default_currency: str = "USD"
    default_reminder_lead_days: int = 3
    default_upcoming_count: int = 3
    max_upcoming_count: int = 60

    # Entitlements
    free_subscription_limit: int = 3


settings = Settings()
