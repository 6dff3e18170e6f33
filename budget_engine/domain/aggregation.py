"""Aggregation engine - totals and category sums over a ledger snapshot"""

from decimal import Decimal
from typing import Dict, Iterable, List, Mapping
from budget_engine.domain.catalog import CATEGORY_COLORS, DEFAULT_CATEGORY_COLOR, SAVINGS_RATE
from budget_engine.domain.models import BudgetSummary, CategoryShare, Transaction, TransactionKind

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def _sum_kind(transactions: Iterable[Transaction], kind: TransactionKind) -> Decimal:
    return sum((t.amount for t in transactions if t.kind == kind), ZERO)


def total_income(transactions: Iterable[Transaction]) -> Decimal:
    return _sum_kind(transactions, TransactionKind.INCOME)


def total_expenses(transactions: Iterable[Transaction]) -> Decimal:
    return _sum_kind(transactions, TransactionKind.EXPENSE)


def balance(transactions: Iterable[Transaction]) -> Decimal:
    """Income minus expenses; negative when overspent"""
    txns = list(transactions)
    return total_income(txns) - total_expenses(txns)


def expenses_by_category(transactions: Iterable[Transaction]) -> Dict[str, Decimal]:
    """
    Sum expense amounts per category.

    Only categories with at least one expense appear; keys keep the order in
    which each category was first seen.
    """
    totals: Dict[str, Decimal] = {}
    for txn in transactions:
        if txn.kind != TransactionKind.EXPENSE:
            continue
        totals[txn.category] = totals.get(txn.category, ZERO) + txn.amount
    return totals


def savings_target(transactions: Iterable[Transaction], savings_rate: Decimal = SAVINGS_RATE) -> Decimal:
    """Suggested savings for the month: a fixed share of total income"""
    return total_income(transactions) * savings_rate


def compute_summary(transactions: Iterable[Transaction], savings_rate: Decimal = SAVINGS_RATE) -> BudgetSummary:
    """
    Main entry point: derive every summary figure from one snapshot.

    Sums are kept at full Decimal precision; rounding belongs to the
    display layer.
    """
    txns = list(transactions)
    income = total_income(txns)
    expenses = total_expenses(txns)

    return BudgetSummary(
        total_income=income,
        total_expenses=expenses,
        balance=income - expenses,
        expenses_by_category=expenses_by_category(txns),
        savings_target=income * savings_rate,
    )


def category_breakdown(
    expenses: Mapping[str, Decimal],
    colors: Mapping[str, str] = CATEGORY_COLORS,
) -> List[CategoryShare]:
    """Expenses-by-category as chart slices with their share of the total"""
    total = sum(expenses.values(), ZERO)

    return [
        CategoryShare(
            category=category,
            amount=amount,
            share=(amount / total * HUNDRED) if total > 0 else ZERO,
            color=colors.get(category, DEFAULT_CATEGORY_COLOR),
        )
        for category, amount in expenses.items()
    ]
