"""Goal progress evaluation - current vs target and status classification"""

from decimal import Decimal
from typing import Iterable, List, Optional
from budget_engine.domain.models import BudgetSummary, Goal, GoalStatus, ProgressRecord, TransactionKind

COMPLETE = Decimal("100")
EXPENSE_WARNING_THRESHOLD = Decimal("80")
INCOME_WARNING_THRESHOLD = Decimal("70")


def progress_percentage(current: Decimal, target: Decimal) -> Decimal:
    """
    Share of the target reached, capped at 100.

    Overshooting the target never shows above 100; expense overruns are
    reported through ProgressRecord.overage instead.
    """
    if target <= 0:
        return Decimal("0")
    return min(current / target * COMPLETE, COMPLETE)


def classify_expense(percentage: Decimal) -> GoalStatus:
    """
    Spending limit status: getting close to the limit is already bad.

    - >= 100: over
    - 80 - 100: warning
    - < 80: ok
    """
    if percentage >= COMPLETE:
        return GoalStatus.OVER
    elif percentage >= EXPENSE_WARNING_THRESHOLD:
        return GoalStatus.WARNING
    else:
        return GoalStatus.OK


def classify_income(percentage: Decimal) -> GoalStatus:
    """
    Income target status: falling short is bad, with a lower warning band
    than expenses.

    - >= 100: met
    - 70 - 100: warning
    - < 70: behind
    """
    if percentage >= COMPLETE:
        return GoalStatus.MET
    elif percentage >= INCOME_WARNING_THRESHOLD:
        return GoalStatus.WARNING
    else:
        return GoalStatus.BEHIND


def current_for_goal(goal: Goal, summary: BudgetSummary) -> Decimal:
    if goal.kind == TransactionKind.INCOME:
        return summary.total_income
    return summary.expenses_by_category.get(goal.category, Decimal("0"))


def evaluate_goal(goal: Goal, summary: BudgetSummary) -> ProgressRecord:
    current = current_for_goal(goal, summary)
    percentage = progress_percentage(current, goal.amount)

    overage: Optional[Decimal] = None
    if goal.kind == TransactionKind.EXPENSE:
        status = classify_expense(percentage)
        if current > goal.amount:
            overage = current - goal.amount
    else:
        status = classify_income(percentage)

    return ProgressRecord(
        goal_id=goal.id,
        kind=goal.kind,
        category=goal.category,
        current=current,
        target=goal.amount,
        percentage=percentage,
        status=status,
        overage=overage,
    )


def compute_progress(goals: Iterable[Goal], summary: BudgetSummary) -> List[ProgressRecord]:
    """
    Main entry point: one ProgressRecord per goal, in goal order.

    No goals is a valid state and yields an empty list.
    """
    return [evaluate_goal(goal, summary) for goal in goals]
