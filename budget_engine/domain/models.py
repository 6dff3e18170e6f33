"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional


class TransactionKind(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class GoalStatus(str, Enum):
    # expense goals
    OK = "ok"
    OVER = "over"
    # income goals
    BEHIND = "behind"
    MET = "met"
    # both
    WARNING = "warning"


MONTHLY = "monthly"


@dataclass(frozen=True)
class Transaction:
    """Recorded money movement; never mutated after insertion"""

    id: str
    kind: TransactionKind
    amount: Decimal
    category: str
    description: str
    date: date


@dataclass(frozen=True)
class Goal:
    """Monthly target: an income goal or a per-category expense limit"""

    id: str
    kind: TransactionKind
    amount: Decimal
    category: Optional[str] = None  # expense goals only
    period: str = MONTHLY


@dataclass
class BudgetSummary:
    """Derived totals over a ledger snapshot"""

    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal
    expenses_by_category: Dict[str, Decimal] = field(default_factory=dict)
    savings_target: Decimal = Decimal("0")


@dataclass
class ProgressRecord:
    """One goal's standing against its target"""

    goal_id: str
    kind: TransactionKind
    category: Optional[str]
    current: Decimal
    target: Decimal
    percentage: Decimal  # capped at 100
    status: GoalStatus
    overage: Optional[Decimal] = None  # expense goals over their limit


@dataclass
class CategoryShare:
    """Slice of the expenses-by-category chart"""

    category: str
    amount: Decimal
    share: Decimal  # percent of total expenses
    color: str
