"""
Budget configuration schemas.
"""

import enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from decimal import Decimal


class PeriodOverflow(str, enum.Enum):
    """How a month start day missing from a month (e.g. 31 in February) is resolved."""
    clamp = "clamp"
    roll_forward = "roll_forward"


class BudgetBase(BaseModel):
    daily_target: Decimal
    monthly_target: Decimal
    currency: str
    month_start_day: int = Field(1, ge=1, le=31)
    bank_balance: Decimal = Decimal("0")


class BudgetCreate(BaseModel):
    """Currency and month start day fall back to the configured defaults when omitted."""
    user_id: str
    daily_target: Decimal
    monthly_target: Decimal
    currency: Optional[str] = None
    month_start_day: Optional[int] = Field(None, ge=1, le=31)
    bank_balance: Decimal = Decimal("0")


class BudgetUpdate(BaseModel):
    daily_target: Optional[Decimal] = None
    monthly_target: Optional[Decimal] = None
    currency: Optional[str] = None
    month_start_day: Optional[int] = Field(None, ge=1, le=31)
    bank_balance: Optional[Decimal] = None


class BudgetConfig(BudgetBase):
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(frozen=True, from_attributes=True)
