"""
Budget statistics engine.

Pure functions turning a transaction history and a budget configuration into
the metrics shown on the dashboard. Amounts follow the sign convention of the
transaction list: positive is an expense, negative is income, so every "spent"
figure is a net value and can be negative.
"""

import logging
from collections import defaultdict
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Dict, Iterable, Optional, Sequence, Union

from pennywise.schemas.budget import BudgetConfig, PeriodOverflow
from pennywise.schemas.stats import BudgetStats
from pennywise.schemas.transaction import Transaction
from pennywise.services.period_service import (
    as_date,
    calculate_elapsed_days_in_month,
    get_month_boundary,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

Number = Union[Decimal, int, float]


def to_decimal(value: Number) -> Decimal:
    """Convert through the string form so a float like 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def net_amount(transactions: Iterable[Transaction]) -> Decimal:
    return sum((t.amount for t in transactions), ZERO)


def daily_totals(transactions: Iterable[Transaction]) -> Dict[date, Decimal]:
    """Net spend per calendar date."""
    totals: Dict[date, Decimal] = defaultdict(lambda: ZERO)
    for t in transactions:
        totals[t.date] += t.amount
    return dict(totals)


def calculate_spent_today(
    transactions: Sequence[Transaction],
    today: Union[date, datetime]
) -> Decimal:
    """Net amount of the transactions dated today."""
    today = as_date(today)
    return net_amount(t for t in transactions if t.date == today)


def calculate_spent_month_to_date(
    transactions: Sequence[Transaction],
    today: Union[date, datetime],
    month_start_day: int,
    overflow: PeriodOverflow = PeriodOverflow.clamp
) -> Decimal:
    """Net amount from the start of the budget month through today, inclusive."""
    today = as_date(today)
    month_start = get_month_boundary(today, month_start_day, overflow).month_start
    return net_amount(t for t in transactions if month_start <= t.date <= today)


def calculate_streak(
    transactions: Sequence[Transaction],
    daily_target: Number,
    today: Union[date, datetime],
    history_start: Optional[date] = None,
    max_lookback_days: Optional[int] = None
) -> int:
    """
    Count consecutive days, going back from today, whose net spend stays
    within the daily target.

    Days without transactions count as zero spend. The walk ends at the first
    day over target or once the start of history has been counted. The start
    of history is ``history_start`` when given, else the earliest transaction
    date. ``max_lookback_days`` optionally caps the result.
    """
    if not transactions:
        return 0

    today = as_date(today)
    daily_target = to_decimal(daily_target)
    totals = daily_totals(transactions)
    first_day = history_start or min(totals)
    first_day = min(first_day, today)

    streak = 0
    current = today
    while current >= first_day:
        if max_lookback_days is not None and streak >= max_lookback_days:
            break
        if totals.get(current, ZERO) > daily_target:
            break
        streak += 1
        current -= timedelta(days=1)

    return streak


def calculate_projected_month_end(
    spent_month_to_date: Number,
    elapsed_days: int,
    total_days_in_month: int
) -> Decimal:
    """Extrapolate month-to-date spend linearly over the whole budget month."""
    if elapsed_days == 0:
        return ZERO
    return (to_decimal(spent_month_to_date) / elapsed_days) * total_days_in_month


def is_on_track_monthly(
    spent_month_to_date: Number,
    monthly_target: Number,
    elapsed_days: int,
    total_days_in_month: int
) -> bool:
    """Whether spend so far is within the target's share for the elapsed days."""
    spent_month_to_date = to_decimal(spent_month_to_date)
    monthly_target = to_decimal(monthly_target)
    if total_days_in_month <= 0:
        return spent_month_to_date <= monthly_target
    expected_spend = monthly_target * elapsed_days / total_days_in_month
    return spent_month_to_date <= expected_spend


def calculate_running_balance(
    transactions: Sequence[Transaction],
    bank_balance: Number,
    today: Optional[Union[date, datetime]] = None
) -> Decimal:
    """Bank balance minus net spend, counting transactions up to today when given."""
    if today is not None:
        today = as_date(today)
        transactions = [t for t in transactions if t.date <= today]
    return to_decimal(bank_balance) - net_amount(transactions)


def calculate_budget_stats(
    transactions: Sequence[Transaction],
    budget: BudgetConfig,
    today: Union[date, datetime],
    overflow: PeriodOverflow = PeriodOverflow.clamp,
    history_start: Optional[date] = None,
    max_lookback_days: Optional[int] = None
) -> BudgetStats:
    """Compute every dashboard metric for the given reference instant."""
    today = as_date(today)

    spent_today = calculate_spent_today(transactions, today)
    spent_month_to_date = calculate_spent_month_to_date(
        transactions, today, budget.month_start_day, overflow
    )
    boundary = get_month_boundary(today, budget.month_start_day, overflow)
    days = calculate_elapsed_days_in_month(today, budget.month_start_day, overflow)
    streak = calculate_streak(
        transactions,
        budget.daily_target,
        today,
        history_start=history_start,
        max_lookback_days=max_lookback_days
    )
    projected = calculate_projected_month_end(spent_month_to_date, days.elapsed, days.total)
    on_track = is_on_track_monthly(
        spent_month_to_date, budget.monthly_target, days.elapsed, days.total
    )

    logger.debug(
        f"Stats for {today}: period {boundary.month_start}..{boundary.month_end}, "
        f"day {days.elapsed}/{days.total}, streak {streak}"
    )

    return BudgetStats(
        spent_today=spent_today,
        spent_month_to_date=spent_month_to_date,
        daily_remaining=max(ZERO, budget.daily_target - spent_today),
        monthly_remaining=max(ZERO, budget.monthly_target - spent_month_to_date),
        projected_month_end=projected,
        streak=streak,
        is_over_daily_budget=spent_today > budget.daily_target,
        is_over_monthly_budget=spent_month_to_date > budget.monthly_target,
        is_on_track_monthly=on_track,
        running_balance=calculate_running_balance(transactions, budget.bank_balance, today),
        currency=budget.currency,
        month_start=boundary.month_start,
        month_end=boundary.month_end,
        elapsed_days=days.elapsed,
        total_days=days.total
    )
