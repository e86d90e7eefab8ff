"""
In-memory budget store.

Owns the current budget and transaction list for one user, recomputes the
statistics after every change and hands them to subscribers. Storage and
transport are left to the caller: load the store from wherever the data lives
and mirror its mutations back.
"""

import logging
import uuid
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from pennywise.config import Settings, settings as default_settings
from pennywise.schemas.analytics import AnalyticsPeriod, SpendingSummary
from pennywise.schemas.budget import BudgetConfig, BudgetCreate, BudgetUpdate
from pennywise.schemas.stats import BudgetStats
from pennywise.schemas.transaction import Transaction, TransactionCreate
from pennywise.services.analytics_service import summarize_spending
from pennywise.services.budget_stats_service import calculate_budget_stats

logger = logging.getLogger(__name__)

StatsListener = Callable[[Optional[BudgetStats]], None]


class BudgetStore:

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        settings: Optional[Settings] = None
    ):
        self.clock = clock
        self.settings = settings or default_settings
        self.budget: Optional[BudgetConfig] = None
        self.transactions: List[Transaction] = []
        self.stats: Optional[BudgetStats] = None
        self._listeners: List[StatsListener] = []

    def subscribe(self, listener: StatsListener) -> Callable[[], None]:
        """Register a listener for recomputed stats. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load(
        self,
        budget: Optional[BudgetConfig],
        transactions: Iterable[Transaction]
    ) -> Optional[BudgetStats]:
        """Replace the store contents, keeping transactions newest first."""
        self.budget = budget
        self.transactions = sorted(transactions, key=lambda t: t.date, reverse=True)
        logger.debug(f"Loaded {len(self.transactions)} transactions")
        return self.calculate_stats()

    def create_budget(self, data: BudgetCreate) -> BudgetConfig:
        now = self.clock()
        fields = data.model_dump(exclude_none=True)
        fields.setdefault("currency", self.settings.default_currency)
        fields.setdefault("month_start_day", self.settings.default_month_start_day)
        self.budget = BudgetConfig(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **fields
        )
        logger.debug(f"Created budget {self.budget.id} for user {data.user_id}")
        self.calculate_stats()
        return self.budget

    def update_budget(self, budget_id: str, data: BudgetUpdate) -> BudgetConfig:
        """Apply the fields set on ``data``. Fields explicitly set to None are left unchanged."""
        if not self.budget or self.budget.id != budget_id:
            logger.warning(f"Budget update rejected for unknown budget {budget_id}")
            raise ValueError(f"Budget {budget_id} not found")

        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        changes["updated_at"] = self.clock()
        updated = BudgetConfig.model_validate({**self.budget.model_dump(), **changes})
        self.budget = updated
        logger.debug(f"Updated budget {budget_id}: {sorted(changes)}")
        self.calculate_stats()
        return self.budget

    def add_transaction(self, data: TransactionCreate) -> Transaction:
        transaction = Transaction(
            id=str(uuid.uuid4()),
            created_at=self.clock(),
            **data.model_dump()
        )
        self.transactions = [transaction, *self.transactions]
        logger.debug(f"Added transaction {transaction.id} ({transaction.amount} on {transaction.date})")
        self.calculate_stats()
        return transaction

    def delete_transaction(self, transaction_id: str) -> None:
        remaining = [t for t in self.transactions if t.id != transaction_id]
        if len(remaining) == len(self.transactions):
            logger.warning(f"Delete rejected for unknown transaction {transaction_id}")
            raise ValueError(f"Transaction {transaction_id} not found")

        self.transactions = remaining
        logger.debug(f"Deleted transaction {transaction_id}")
        self.calculate_stats()

    def calculate_stats(self) -> Optional[BudgetStats]:
        """
        Recompute stats against the clock and notify listeners.

        The streak walk ends at the earliest loaded transaction, not at the
        budget's creation date: budgets are often set up after importing
        older history, and those days still count.
        """
        if not self.budget:
            self.stats = None
        else:
            self.stats = calculate_budget_stats(
                self.transactions,
                self.budget,
                self.clock(),
                overflow=self.settings.period_overflow,
                max_lookback_days=self.settings.streak_max_lookback_days
            )

        for listener in list(self._listeners):
            listener(self.stats)
        return self.stats

    def summarize(self, period: AnalyticsPeriod = AnalyticsPeriod.month) -> SpendingSummary:
        return summarize_spending(self.transactions, period, self.clock())
