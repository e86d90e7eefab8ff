"""
Budget period calculations.

A budget month starts on the budget's ``month_start_day`` and runs until the
day before that day in the following month. With ``month_start_day == 1`` it
is the calendar month.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import Union

from pennywise.schemas.budget import PeriodOverflow
from pennywise.schemas.stats import PeriodBoundary, ElapsedDays


def as_date(value: Union[date, datetime]) -> date:
    """Drop the time of day from a reference instant."""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by delta months, carrying into the year."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def rolled_date(year: int, month: int, day: int) -> date:
    """
    Build a date letting an out-of-range day overflow into neighbouring months.
    Day 0 is the last day of the previous month, day 31 of February lands in March.
    """
    year, month = shift_month(year, month, 0)
    return date(year, month, 1) + timedelta(days=day - 1)


def clamped_date(year: int, month: int, day: int) -> date:
    """Build a date clamping the day into the month."""
    year, month = shift_month(year, month, 0)
    return date(year, month, max(1, min(day, days_in_month(year, month))))


def get_month_boundary(
    today: Union[date, datetime],
    month_start_day: int,
    overflow: PeriodOverflow = PeriodOverflow.clamp
) -> PeriodBoundary:
    """
    Get the first and last day of the budget month containing ``today``.

    ``overflow`` decides what happens when ``month_start_day`` does not exist
    in a month. ``clamp`` moves it to the month's last day. ``roll_forward``
    lets it spill into the next month, which can yield a period that does not
    contain ``today``.
    """
    today = as_date(today)
    year, month = today.year, today.month

    if month_start_day == 1:
        return PeriodBoundary(
            month_start=date(year, month, 1),
            month_end=date(year, month, days_in_month(year, month))
        )

    if overflow == PeriodOverflow.roll_forward:
        if today.day >= month_start_day:
            month_start = rolled_date(year, month, month_start_day)
            month_end = rolled_date(year, month + 1, month_start_day - 1)
        else:
            month_start = rolled_date(year, month - 1, month_start_day)
            month_end = rolled_date(year, month, month_start_day - 1)
        return PeriodBoundary(month_start=month_start, month_end=month_end)

    this_start = clamped_date(year, month, month_start_day)
    if today >= this_start:
        month_start = this_start
        next_start = clamped_date(year, month + 1, month_start_day)
    else:
        month_start = clamped_date(year, month - 1, month_start_day)
        next_start = this_start

    return PeriodBoundary(
        month_start=month_start,
        month_end=next_start - timedelta(days=1)
    )


def calculate_elapsed_days_in_month(
    today: Union[date, datetime],
    month_start_day: int,
    overflow: PeriodOverflow = PeriodOverflow.clamp
) -> ElapsedDays:
    """Days elapsed in the budget month (today included) and its total length."""
    today = as_date(today)
    boundary = get_month_boundary(today, month_start_day, overflow)
    return ElapsedDays(
        elapsed=(today - boundary.month_start).days + 1,
        total=(boundary.month_end - boundary.month_start).days + 1
    )
