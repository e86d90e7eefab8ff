"""Service for spending summaries and transaction filtering."""

from typing import Dict, List, Optional, Sequence, Union
from datetime import date, datetime, timedelta
from decimal import Decimal

from pennywise.schemas.analytics import AnalyticsPeriod, CategoryTotal, SpendingSummary
from pennywise.schemas.transaction import Transaction, TransactionKind
from pennywise.services.period_service import as_date, clamped_date

ZERO = Decimal("0")

# Days used to turn a daily average into a monthly projection
PROJECTION_DAYS = 30


def get_period_start(
    period: AnalyticsPeriod,
    today: date,
    transactions: Sequence[Transaction] = ()
) -> date:
    """First day of the look-back window ending today."""
    if period == AnalyticsPeriod.week:
        return today - timedelta(days=7)
    elif period == AnalyticsPeriod.month:
        return clamped_date(today.year, today.month - 1, today.day)
    else:
        dates = [t.date for t in transactions if t.date <= today]
        return min(dates) if dates else today


def _category_totals(
    totals: Dict[str, Decimal],
    counts: Dict[str, int],
    grand_total: Decimal
) -> List[CategoryTotal]:
    return [
        CategoryTotal(
            category=category,
            amount=amount,
            count=counts[category],
            percent=float(amount / grand_total * 100) if grand_total > 0 else 0
        )
        for category, amount in sorted(totals.items(), key=lambda x: x[1], reverse=True)
    ]


def summarize_spending(
    transactions: Sequence[Transaction],
    period: AnalyticsPeriod,
    today: Union[date, datetime]
) -> SpendingSummary:
    """
    Summarize income and expenses over a look-back window.
    Income is reported as a positive figure; net income is income minus expenses.
    """
    today = as_date(today)
    start_date = get_period_start(period, today, transactions)
    in_period = [t for t in transactions if start_date <= t.date <= today]

    total_income = ZERO
    total_expenses = ZERO
    expense_totals: Dict[str, Decimal] = {}
    expense_counts: Dict[str, int] = {}
    income_totals: Dict[str, Decimal] = {}
    income_counts: Dict[str, int] = {}

    for t in in_period:
        amount = abs(t.amount)
        if t.is_income:
            total_income += amount
            income_totals[t.category] = income_totals.get(t.category, ZERO) + amount
            income_counts[t.category] = income_counts.get(t.category, 0) + 1
        else:
            total_expenses += amount
            expense_totals[t.category] = expense_totals.get(t.category, ZERO) + amount
            expense_counts[t.category] = expense_counts.get(t.category, 0) + 1

    days = max(1, (today - start_date).days)
    avg_daily_income = total_income / days
    avg_daily_expenses = total_expenses / days

    return SpendingSummary(
        period=period,
        start_date=start_date,
        end_date=today,
        days=days,
        total_income=total_income,
        total_expenses=total_expenses,
        net_income=total_income - total_expenses,
        avg_daily_income=avg_daily_income,
        avg_daily_expenses=avg_daily_expenses,
        monthly_income_projection=avg_daily_income * PROJECTION_DAYS,
        monthly_expenses_projection=avg_daily_expenses * PROJECTION_DAYS,
        expenses_by_category=_category_totals(expense_totals, expense_counts, total_expenses),
        income_by_category=_category_totals(income_totals, income_counts, total_income),
        transaction_count=len(in_period)
    )


def filter_transactions(
    transactions: Sequence[Transaction],
    search: Optional[str] = None,
    category: Optional[str] = None,
    kind: TransactionKind = TransactionKind.all
) -> List[Transaction]:
    """Filter transactions by text, category and kind, newest first."""
    needle = search.lower() if search else None

    def matches(t: Transaction) -> bool:
        if needle and needle not in t.category.lower() and needle not in (t.note or "").lower():
            return False
        if category and t.category != category:
            return False
        if kind == TransactionKind.income and not t.amount < 0:
            return False
        if kind == TransactionKind.expense and not t.amount > 0:
            return False
        return True

    return sorted((t for t in transactions if matches(t)), key=lambda t: t.date, reverse=True)
