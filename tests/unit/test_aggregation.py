"""Unit tests for ledger aggregation"""

import pytest
from decimal import Decimal
from budget_engine.domain.aggregation import (
    balance,
    category_breakdown,
    compute_summary,
    expenses_by_category,
    savings_target,
    total_expenses,
    total_income,
)
from budget_engine.domain.catalog import DEFAULT_CATEGORY_COLOR
from budget_engine.domain.ledger import Ledger


@pytest.fixture
def mixed_ledger(ledger: Ledger) -> Ledger:
    """Several categories, repeated ones, and amounts that break binary floats"""
    ledger.add_transaction("income", "3000.10", "Salário", "Salário")
    ledger.add_transaction("income", "0.20", "Investimentos", "Rendimento")
    ledger.add_transaction("expense", "0.10", "Alimentação", "Bala")
    ledger.add_transaction("expense", "0.20", "Alimentação", "Chiclete")
    ledger.add_transaction("expense", "250", "Transporte", "Gasolina")
    ledger.add_transaction("expense", "3100", "Moradia", "Aluguel")
    return ledger


def test_scenario_salary_and_rent(salary_and_rent: Ledger):
    """Income 5000 and rent 1200"""
    summary = compute_summary(salary_and_rent)

    assert summary.total_income == Decimal("5000")
    assert summary.total_expenses == Decimal("1200")
    assert summary.balance == Decimal("3800")
    assert summary.savings_target == Decimal("1000")
    assert summary.expenses_by_category == {"Moradia": Decimal("1200")}


def test_empty_ledger_is_all_zero(ledger: Ledger):
    summary = compute_summary(ledger)

    assert summary.total_income == 0
    assert summary.total_expenses == 0
    assert summary.balance == 0
    assert summary.savings_target == 0
    assert summary.expenses_by_category == {}


def test_balance_identity(mixed_ledger: Ledger):
    assert total_income(mixed_ledger) - total_expenses(mixed_ledger) == balance(mixed_ledger)


def test_balance_can_be_negative(mixed_ledger: Ledger):
    assert balance(mixed_ledger) == Decimal("-350.00")


def test_category_sums_add_up_to_total(mixed_ledger: Ledger):
    by_category = expenses_by_category(mixed_ledger)
    assert sum(by_category.values()) == total_expenses(mixed_ledger)


def test_decimal_accumulation_is_exact(mixed_ledger: Ledger):
    """0.1 + 0.2 is exactly 0.3"""
    assert expenses_by_category(mixed_ledger)["Alimentação"] == Decimal("0.3")


def test_expenses_by_category_only_expenses(mixed_ledger: Ledger):
    """Income categories and unused expense categories are absent"""
    by_category = expenses_by_category(mixed_ledger)

    assert list(by_category) == ["Alimentação", "Transporte", "Moradia"]
    assert "Salário" not in by_category
    assert "Lazer" not in by_category


def test_outros_counted_per_kind(ledger: Ledger):
    """Outros exists in both lists; only the expense side is aggregated"""
    ledger.add_transaction("income", 100, "Outros", "Venda")
    ledger.add_transaction("expense", 40, "Outros", "Presente")

    assert expenses_by_category(ledger) == {"Outros": Decimal("40")}


def test_savings_target_is_twenty_percent(mixed_ledger: Ledger):
    assert savings_target(mixed_ledger) == total_income(mixed_ledger) * Decimal("0.20")
    assert savings_target(mixed_ledger) == Decimal("600.06")


def test_savings_rate_can_be_injected(salary_and_rent: Ledger):
    summary = compute_summary(salary_and_rent, savings_rate=Decimal("0.10"))
    assert summary.savings_target == Decimal("500")


def test_aggregates_plain_iterables(salary_and_rent: Ledger):
    """Functions work on any snapshot of transactions, not only a Ledger"""
    snapshot = list(salary_and_rent.list_transactions())
    assert total_income(snapshot) == Decimal("5000")
    assert compute_summary(snapshot).balance == Decimal("3800")


def test_category_breakdown_shares_and_colors():
    breakdown = category_breakdown({"Moradia": Decimal("750"), "Mystery": Decimal("250")})

    assert [s.category for s in breakdown] == ["Moradia", "Mystery"]
    assert breakdown[0].share == Decimal("75")
    assert breakdown[0].color == "#45b7d1"
    assert breakdown[1].share == Decimal("25")
    assert breakdown[1].color == DEFAULT_CATEGORY_COLOR


def test_category_breakdown_empty():
    assert category_breakdown({}) == []


def test_sums_at_maximum_amount_stay_exact(ledger: Ledger):
    """Largest accepted amounts plus a cent accumulate without rounding"""
    for _ in range(1000):
        ledger.add_transaction("expense", "9999999999999.99", "Moradia", "Imóvel")
    ledger.add_transaction("expense", "0.01", "Lazer", "Bala")

    summary = compute_summary(ledger)

    assert summary.total_expenses == Decimal("9999999999999990.01")
    assert summary.expenses_by_category["Lazer"] == Decimal("0.01")
    assert summary.balance == Decimal("-9999999999999990.01")
