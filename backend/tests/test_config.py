"""Tests for application settings."""

from pennywise.config import Settings
from pennywise.schemas.budget import PeriodOverflow


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, test_settings):
        assert test_settings.app_name == "Pennywise"
        assert test_settings.default_month_start_day == 1
        assert test_settings.period_overflow == PeriodOverflow.clamp
        assert test_settings.streak_max_lookback_days is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PERIOD_OVERFLOW", "roll_forward")
        monkeypatch.setenv("STREAK_MAX_LOOKBACK_DAYS", "90")

        settings = Settings(_env_file=None)
        assert settings.period_overflow == PeriodOverflow.roll_forward
        assert settings.streak_max_lookback_days == 90
