"""Tests for schema parsing and validation."""

import pytest
from datetime import date, datetime
from decimal import Decimal
from pydantic import ValidationError

from pennywise.schemas.budget import BudgetCreate, BudgetUpdate
from pennywise.schemas.transaction import Transaction, TransactionCreate

from conftest import make_budget, make_transaction


class TestTransactionSchema:
    """Test transaction parsing."""

    def test_parses_iso_date_and_decimal_string(self):
        txn = TransactionCreate(user_id="user1", date="2025-02-04", amount="25.50", category="Food")
        assert txn.date == date(2025, 2, 4)
        assert txn.amount == Decimal("25.50")
        assert txn.note is None

    def test_rejects_invalid_date(self):
        with pytest.raises(ValidationError):
            TransactionCreate(user_id="user1", date="2025-02-30", amount="1", category="Food")

    def test_rejects_non_numeric_amount(self):
        with pytest.raises(ValidationError):
            TransactionCreate(user_id="user1", date="2025-02-04", amount="lots", category="Food")

    def test_rejects_empty_category(self):
        with pytest.raises(ValidationError):
            TransactionCreate(user_id="user1", date="2025-02-04", amount="1", category="")

    def test_transaction_is_immutable(self):
        txn = make_transaction("2025-02-04", "10")
        with pytest.raises(ValidationError):
            txn.amount = Decimal("20")

    def test_is_income(self):
        assert make_transaction("2025-02-04", "-10").is_income is True
        assert make_transaction("2025-02-04", "0").is_income is False


class TestBudgetSchema:
    """Test budget validation."""

    def test_month_start_day_bounds(self):
        for day in (0, 32):
            with pytest.raises(ValidationError):
                BudgetCreate(
                    user_id="user1",
                    daily_target="50",
                    monthly_target="500",
                    currency="TZS",
                    month_start_day=day
                )

    def test_accepts_day_31(self):
        budget = make_budget(month_start_day=31)
        assert budget.month_start_day == 31

    def test_defaults(self):
        """Currency and start day are left for the store to fill from settings."""
        budget = BudgetCreate(user_id="user1", daily_target="50", monthly_target="500")
        assert budget.currency is None
        assert budget.month_start_day is None
        assert budget.bank_balance == 0

    def test_non_positive_targets_allowed(self):
        budget = make_budget(daily_target="0", monthly_target="-5")
        assert budget.daily_target == 0

    def test_update_is_partial(self):
        update = BudgetUpdate(currency="USD")
        assert update.model_dump(exclude_unset=True) == {"currency": "USD"}

    def test_update_validates_month_start_day(self):
        with pytest.raises(ValidationError):
            BudgetUpdate(month_start_day=40)
