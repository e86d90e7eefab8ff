"""
Spending analytics schemas.
"""

import enum
from pydantic import BaseModel
from typing import List
from datetime import date
from decimal import Decimal


class AnalyticsPeriod(str, enum.Enum):
    """Look-back window for spending summaries."""
    week = "week"
    month = "month"
    all = "all"


class CategoryTotal(BaseModel):
    category: str
    amount: Decimal
    count: int
    percent: float


class SpendingSummary(BaseModel):
    period: AnalyticsPeriod
    start_date: date
    end_date: date
    days: int
    total_income: Decimal
    total_expenses: Decimal
    net_income: Decimal
    avg_daily_income: Decimal
    avg_daily_expenses: Decimal
    monthly_income_projection: Decimal
    monthly_expenses_projection: Decimal
    expenses_by_category: List[CategoryTotal]
    income_by_category: List[CategoryTotal]
    transaction_count: int
