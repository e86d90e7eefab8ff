"""Shared test fixtures."""

import pytest
from datetime import datetime
from decimal import Decimal
import uuid

from pennywise.config import Settings
from pennywise.schemas.budget import BudgetConfig
from pennywise.schemas.transaction import Transaction


def make_transaction(txn_date, amount, category="Food", note=None, user_id="user1"):
    """Build a transaction dated txn_date (date or ISO string)."""
    return Transaction(
        id=str(uuid.uuid4()),
        user_id=user_id,
        amount=Decimal(str(amount)),
        category=category,
        date=txn_date,
        note=note,
        created_at=datetime(2025, 2, 1, 12, 0, 0),
    )


def make_budget(daily_target="50", monthly_target="500", month_start_day=1, bank_balance="0", currency="TZS"):
    return BudgetConfig(
        id="budget-1",
        user_id="user1",
        daily_target=Decimal(daily_target),
        monthly_target=Decimal(monthly_target),
        currency=currency,
        month_start_day=month_start_day,
        bank_balance=Decimal(bank_balance),
        created_at=datetime(2025, 1, 1),
        updated_at=datetime(2025, 1, 1),
    )


@pytest.fixture
def sample_transactions():
    """Two transactions on Feb 4th and one each on Feb 3rd and Feb 2nd."""
    return [
        make_transaction("2025-02-04", "25.5", "Food"),
        make_transaction("2025-02-04", "15.0", "Transport"),
        make_transaction("2025-02-03", "10.0", "Food"),
        make_transaction("2025-02-02", "5.0", "Food"),
    ]


@pytest.fixture
def sample_budget():
    return make_budget()


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None)


class FakeClock:
    """Callable clock returning a fixed instant that tests can move."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 2, 4, 18, 30, 0))
