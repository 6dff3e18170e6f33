"""Unit tests for the goal set"""

import pytest
from decimal import Decimal
from budget_engine.domain.exceptions import DuplicateGoalError, NotFoundError, ValidationError
from budget_engine.domain.goals import GoalSet
from budget_engine.domain.models import TransactionKind


def test_add_expense_goal(goal_set: GoalSet):
    goal = goal_set.add_goal("expense", "1000", "Moradia")

    assert goal.kind == TransactionKind.EXPENSE
    assert goal.category == "Moradia"
    assert goal.amount == Decimal("1000")
    assert goal.period == "monthly"
    assert len(goal_set) == 1


def test_income_goal_ignores_category(goal_set: GoalSet):
    """Income has a single global target, not per category"""
    goal = goal_set.add_goal(TransactionKind.INCOME, 6000, category="Salário")
    assert goal.category is None


def test_second_income_goal_rejected(goal_set: GoalSet):
    goal_set.add_goal("income", 6000)

    with pytest.raises(DuplicateGoalError):
        goal_set.add_goal("income", 7000)

    assert len(goal_set) == 1


def test_second_expense_goal_same_category_rejected(goal_set: GoalSet):
    goal_set.add_goal("expense", 1000, "Moradia")

    with pytest.raises(DuplicateGoalError):
        goal_set.add_goal("expense", 800, "Moradia")

    assert len(goal_set) == 1


def test_expense_goal_other_category_allowed(goal_set: GoalSet):
    goal_set.add_goal("expense", 1000, "Moradia")
    goal_set.add_goal("expense", 600, "Alimentação")
    goal_set.add_goal("income", 6000)

    assert len(goal_set) == 3
    assert [g.category for g in goal_set.expense_goals()] == ["Moradia", "Alimentação"]
    assert len(goal_set.income_goals()) == 1


def test_expense_goal_requires_category(goal_set: GoalSet):
    with pytest.raises(ValidationError) as exc_info:
        goal_set.add_goal("expense", 500)

    assert exc_info.value.field == "category"


def test_expense_goal_rejects_income_category(goal_set: GoalSet):
    with pytest.raises(ValidationError):
        goal_set.add_goal("expense", 500, "Freelance")


@pytest.mark.parametrize("amount", [0, -1, "", "muito", None])
def test_goal_amount_must_be_positive_number(goal_set: GoalSet, amount):
    with pytest.raises(ValidationError):
        goal_set.add_goal("income", amount)

    assert len(goal_set) == 0


def test_only_monthly_period(goal_set: GoalSet):
    with pytest.raises(ValidationError) as exc_info:
        goal_set.add_goal("income", 6000, period="weekly")

    assert exc_info.value.field == "period"


def test_invalid_goal_checked_before_duplicate(goal_set: GoalSet):
    """A bad amount is a validation error even if the slot is taken"""
    goal_set.add_goal("income", 6000)

    with pytest.raises(ValidationError):
        goal_set.add_goal("income", -1)


def test_remove_goal_frees_slot(goal_set: GoalSet):
    """Replacing a goal is remove + add"""
    goal = goal_set.add_goal("expense", 1000, "Moradia")

    removed = goal_set.remove_goal(goal.id)
    replacement = goal_set.add_goal("expense", 1500, "Moradia")

    assert removed == goal
    assert goal_set.list_goals() == (replacement,)


def test_remove_unknown_goal(goal_set: GoalSet):
    goal_set.add_goal("income", 6000)

    with pytest.raises(NotFoundError):
        goal_set.remove_goal("does-not-exist")

    assert len(goal_set) == 1


def test_goal_set_uses_injected_catalog(small_catalog):
    goals = GoalSet(small_catalog)
    goals.add_goal("expense", 900, "Rent")

    with pytest.raises(ValidationError):
        goals.add_goal("expense", 900, "Moradia")


@pytest.mark.parametrize("amount", ["1e30", "100.001"])
def test_goal_amount_bounds(goal_set: GoalSet, amount):
    with pytest.raises(ValidationError):
        goal_set.add_goal("expense", amount, "Moradia")

    assert len(goal_set) == 0
