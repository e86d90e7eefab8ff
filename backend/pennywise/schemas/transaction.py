"""
Transaction schemas.
"""

import enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime
from decimal import Decimal


class TransactionKind(str, enum.Enum):
    """Transaction filter by sign: income is negative, expense is positive."""
    all = "all"
    income = "income"
    expense = "expense"


class TransactionBase(BaseModel):
    date: date
    amount: Decimal
    category: str = Field(..., min_length=1)
    note: Optional[str] = None


class TransactionCreate(TransactionBase):
    user_id: str


class Transaction(TransactionBase):
    id: str
    user_id: str
    created_at: datetime

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @property
    def is_income(self) -> bool:
        return self.amount < 0
