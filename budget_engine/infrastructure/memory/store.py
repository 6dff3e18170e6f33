"""In-memory store owning the ledger and goal set for one app instance"""

from decimal import Decimal
from typing import Any, List, Optional
from budget_engine.domain.aggregation import compute_summary
from budget_engine.domain.catalog import CategoryCatalog, DEFAULT_CATALOG, SAVINGS_RATE
from budget_engine.domain.goals import GoalSet
from budget_engine.domain.ledger import Ledger
from budget_engine.domain.models import BudgetSummary, Goal, ProgressRecord, Transaction
from budget_engine.domain.progress import compute_progress


class BudgetStore:
    """
    Pairs one Ledger with one GoalSet.

    Summary and progress are recomputed from the current snapshot on every
    call; nothing is cached.
    """

    def __init__(
        self,
        catalog: CategoryCatalog = DEFAULT_CATALOG,
        savings_rate: Decimal = SAVINGS_RATE,
    ):
        self.catalog = catalog
        self.savings_rate = savings_rate
        self.ledger = Ledger(catalog)
        self.goals = GoalSet(catalog)

    def add_transaction(
        self,
        kind: Any,
        amount: Any,
        category: Any,
        description: Any,
        date: Optional[Any] = None,
    ) -> Transaction:
        return self.ledger.add_transaction(kind, amount, category, description, date)

    def remove_transaction(self, transaction_id: str) -> Transaction:
        return self.ledger.remove_transaction(transaction_id)

    def add_goal(self, kind: Any, amount: Any, category: Optional[str] = None, period: Optional[str] = None) -> Goal:
        return self.goals.add_goal(kind, amount, category, period)

    def remove_goal(self, goal_id: str) -> Goal:
        return self.goals.remove_goal(goal_id)

    def summary(self) -> BudgetSummary:
        return compute_summary(self.ledger, self.savings_rate)

    def progress(self) -> List[ProgressRecord]:
        return compute_progress(self.goals, self.summary())
