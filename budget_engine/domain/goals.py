"""GoalSet - declared monthly targets"""

import uuid
from typing import Any, Iterator, List, Optional, Tuple
from budget_engine.domain.catalog import CategoryCatalog, DEFAULT_CATALOG
from budget_engine.domain.exceptions import DuplicateGoalError, NotFoundError
from budget_engine.domain.models import Goal, TransactionKind
from budget_engine.domain.validation import parse_amount, parse_category, parse_kind, parse_period


class GoalSet:
    """
    At most one income goal, and at most one expense goal per category.

    Goals are never updated in place: remove and add again.
    """

    def __init__(self, catalog: CategoryCatalog = DEFAULT_CATALOG):
        self.catalog = catalog
        self._goals: List[Goal] = []

    def add_goal(
        self,
        kind: Any,
        amount: Any,
        category: Optional[str] = None,
        period: Optional[str] = None,
    ) -> Goal:
        """
        Validate and register a goal.

        Income goals have a single global target, so any category passed
        with one is ignored.

        Raises:
            ValidationError: On bad kind, amount, period or expense category
            DuplicateGoalError: If a goal already exists for the same slot
        """
        goal_kind = parse_kind(kind)
        target = parse_amount(amount)
        goal_period = parse_period(period)

        if goal_kind == TransactionKind.EXPENSE:
            goal_category = parse_category(self.catalog, goal_kind, category)
        else:
            goal_category = None

        if self._find_slot(goal_kind, goal_category) is not None:
            if goal_category is None:
                raise DuplicateGoalError("An income goal already exists")
            raise DuplicateGoalError(f"An expense goal already exists for {goal_category}")

        goal = Goal(
            id=str(uuid.uuid4()),
            kind=goal_kind,
            amount=target,
            category=goal_category,
            period=goal_period,
        )
        self._goals.append(goal)
        return goal

    def remove_goal(self, goal_id: str) -> Goal:
        for i, goal in enumerate(self._goals):
            if goal.id == goal_id:
                return self._goals.pop(i)
        raise NotFoundError(f"Goal {goal_id} not found")

    def list_goals(self) -> Tuple[Goal, ...]:
        return tuple(self._goals)

    def income_goals(self) -> List[Goal]:
        return [g for g in self._goals if g.kind == TransactionKind.INCOME]

    def expense_goals(self) -> List[Goal]:
        return [g for g in self._goals if g.kind == TransactionKind.EXPENSE]

    def _find_slot(self, kind: TransactionKind, category: Optional[str]) -> Optional[Goal]:
        for goal in self._goals:
            if goal.kind == kind and (kind == TransactionKind.INCOME or goal.category == category):
                return goal
        return None

    def __iter__(self) -> Iterator[Goal]:
        return iter(tuple(self._goals))

    def __len__(self) -> int:
        return len(self._goals)
