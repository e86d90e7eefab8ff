"""
Pydantic schemas package.
"""

from pennywise.schemas.analytics import (
    AnalyticsPeriod,
    CategoryTotal,
    SpendingSummary,
)
from pennywise.schemas.budget import (
    PeriodOverflow,
    BudgetBase,
    BudgetCreate,
    BudgetUpdate,
    BudgetConfig,
)
from pennywise.schemas.stats import (
    PeriodBoundary,
    ElapsedDays,
    BudgetStats,
)
from pennywise.schemas.transaction import (
    TransactionKind,
    TransactionBase,
    TransactionCreate,
    Transaction,
)

__all__ = [
    "AnalyticsPeriod",
    "CategoryTotal",
    "SpendingSummary",
    "PeriodOverflow",
    "BudgetBase",
    "BudgetCreate",
    "BudgetUpdate",
    "BudgetConfig",
    "PeriodBoundary",
    "ElapsedDays",
    "BudgetStats",
    "TransactionKind",
    "TransactionBase",
    "TransactionCreate",
    "Transaction",
]
