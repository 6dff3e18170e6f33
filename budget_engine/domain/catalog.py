"""Static budget configuration: category catalog, chart colors, savings rate"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Tuple
from budget_engine.domain.models import TransactionKind


@dataclass(frozen=True)
class CategoryCatalog:
    """Ordered list of allowed category names per transaction kind"""

    income: Tuple[str, ...]
    expense: Tuple[str, ...]

    def categories_for(self, kind: TransactionKind) -> Tuple[str, ...]:
        return self.income if kind == TransactionKind.INCOME else self.expense

    def contains(self, kind: TransactionKind, category: str) -> bool:
        return category in self.categories_for(kind)


DEFAULT_CATALOG = CategoryCatalog(
    income=("Salário", "Freelance", "Investimentos", "Outros"),
    expense=("Alimentação", "Transporte", "Moradia", "Saúde", "Educação", "Lazer", "Outros"),
)

# Share of total income suggested as the monthly savings target.
# Fixed business rule, not a user setting.
SAVINGS_RATE = Decimal("0.20")

# Amounts are whole currency units below 10**13 with at most cent precision,
# so every sum stays well inside the 28-digit Decimal context.
MAX_AMOUNT_INTEGER_DIGITS = 13
MAX_AMOUNT_DECIMAL_PLACES = 2

DEFAULT_CATEGORY_COLOR = "#a8e6cf"

CATEGORY_COLORS: Dict[str, str] = {
    "Alimentação": "#ff6b6b",
    "Transporte": "#4ecdc4",
    "Moradia": "#45b7d1",
    "Saúde": "#96ceb4",
    "Educação": "#feca57",
    "Lazer": "#ff9ff3",
    "Outros": "#a8e6cf",
    "Salário": "#26de81",
    "Freelance": "#2bcbba",
    "Investimentos": "#0fb9b1",
}
