"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from fastapi.testclient import TestClient
from budget_engine.api.main import create_app
from budget_engine.domain.catalog import CategoryCatalog
from budget_engine.domain.goals import GoalSet
from budget_engine.domain.ledger import Ledger
from budget_engine.domain.models import TransactionKind
from budget_engine.infrastructure.memory.store import BudgetStore


@pytest.fixture
def store() -> BudgetStore:
    """Fresh in-memory store per test"""
    return BudgetStore()


@pytest.fixture
def client(store: BudgetStore) -> TestClient:
    """Create FastAPI test client bound to the test store"""
    app = create_app(store)
    return TestClient(app)


@pytest.fixture
def ledger() -> Ledger:
    return Ledger()


@pytest.fixture
def goal_set() -> GoalSet:
    return GoalSet()


@pytest.fixture
def small_catalog() -> CategoryCatalog:
    """Swapped-in catalog to check validators read the injected one"""
    return CategoryCatalog(income=("Wages",), expense=("Rent", "Food"))


@pytest.fixture
def salary_and_rent(ledger: Ledger) -> Ledger:
    """Income 5000 in Salário, expense 1200 in Moradia"""
    ledger.add_transaction(TransactionKind.INCOME, Decimal("5000"), "Salário", "Salário de julho", date(2025, 7, 5))
    ledger.add_transaction(TransactionKind.EXPENSE, Decimal("1200"), "Moradia", "Aluguel", date(2025, 7, 10))
    return ledger
