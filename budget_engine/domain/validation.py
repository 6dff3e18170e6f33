"""Field validation shared by the ledger and the goal set.

Every function either returns a normalized value or raises ValidationError,
so callers can validate all fields before touching any state.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional
from budget_engine.domain.catalog import CategoryCatalog, MAX_AMOUNT_DECIMAL_PLACES, MAX_AMOUNT_INTEGER_DIGITS
from budget_engine.domain.exceptions import ValidationError
from budget_engine.domain.models import MONTHLY, TransactionKind


def parse_kind(value: Any) -> TransactionKind:
    """Accept a TransactionKind or its name ("income"/"expense", any case)"""
    if isinstance(value, TransactionKind):
        return value
    if isinstance(value, str):
        try:
            return TransactionKind(value.strip().lower())
        except ValueError:
            pass
    raise ValidationError(f"Unknown kind: {value!r}", field="kind")


def parse_amount(value: Any) -> Decimal:
    """
    Convert user input into a positive, finite Decimal within the amount bounds.

    Floats go through repr() so 0.1 becomes Decimal("0.1"), not the binary
    approximation. Strings may use a comma as decimal separator.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError("Amount is required", field="amount")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    elif isinstance(value, str):
        text = value.strip().replace(",", ".")
        if not text:
            raise ValidationError("Amount is required", field="amount")
        try:
            amount = Decimal(text)
        except InvalidOperation as e:
            raise ValidationError(f"Amount is not a number: {value!r}", field="amount") from e
    else:
        raise ValidationError(f"Amount is not a number: {value!r}", field="amount")

    if not amount.is_finite():
        raise ValidationError("Amount must be a finite number", field="amount")
    if amount <= 0:
        raise ValidationError("Amount must be greater than zero", field="amount")
    if amount.adjusted() >= MAX_AMOUNT_INTEGER_DIGITS:
        raise ValidationError(
            f"Amount must have at most {MAX_AMOUNT_INTEGER_DIGITS} integer digits",
            field="amount",
        )
    if -amount.normalize().as_tuple().exponent > MAX_AMOUNT_DECIMAL_PLACES:
        raise ValidationError(
            f"Amount must have at most {MAX_AMOUNT_DECIMAL_PLACES} decimal places",
            field="amount",
        )

    return amount


def parse_description(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Description is required", field="description")
    return value.strip()


def parse_category(catalog: CategoryCatalog, kind: TransactionKind, value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError("Category is required", field="category")
    if not catalog.contains(kind, value):
        raise ValidationError(
            f"Category {value!r} is not allowed for {kind.value}",
            field="category",
        )
    return value


def parse_date(value: Any) -> date:
    """Default to today; accept date, datetime (time dropped) or ISO string"""
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise ValidationError(f"Invalid date: {value!r}", field="date") from e
    raise ValidationError(f"Invalid date: {value!r}", field="date")


def parse_period(value: Optional[str]) -> str:
    if value is None or value == MONTHLY:
        return MONTHLY
    raise ValidationError(f"Unsupported period: {value!r}", field="period")
