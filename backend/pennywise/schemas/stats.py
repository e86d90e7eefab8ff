"""
Budget statistics schemas.
"""

from pydantic import BaseModel, ConfigDict
from datetime import date
from decimal import Decimal


class PeriodBoundary(BaseModel):
    month_start: date
    month_end: date


class ElapsedDays(BaseModel):
    elapsed: int
    total: int


class BudgetStats(BaseModel):
    """Snapshot of the derived budget metrics for one reference date."""
    spent_today: Decimal
    spent_month_to_date: Decimal
    daily_remaining: Decimal
    monthly_remaining: Decimal
    projected_month_end: Decimal
    streak: int
    is_over_daily_budget: bool
    is_over_monthly_budget: bool
    is_on_track_monthly: bool
    running_balance: Decimal
    currency: str
    month_start: date
    month_end: date
    elapsed_days: int
    total_days: int

    model_config = ConfigDict(frozen=True)
