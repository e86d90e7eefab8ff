"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from typing import Optional

from pennywise.schemas.budget import PeriodOverflow


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Pennywise"

    # Budget defaults for new budgets
    default_currency: str = "TZS"
    default_month_start_day: int = 1

    # Analytics engine
    period_overflow: PeriodOverflow = PeriodOverflow.clamp  # clamp, roll_forward
    streak_max_lookback_days: Optional[int] = None  # None walks back to the start of history

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )


# Global settings instance
settings = Settings()
