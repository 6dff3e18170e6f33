"""GET /v1/summary, /v1/progress, /v1/categories - derived budget views"""

from fastapi import APIRouter, Depends

from budget_engine.api.v1.schemas import (
    CategoriesResponse,
    CategoryShareSchema,
    ProgressItem,
    ProgressResponse,
    SummaryResponse,
)
from budget_engine.api.dependencies import get_store
from budget_engine.config import settings
from budget_engine.domain.aggregation import category_breakdown
from budget_engine.infrastructure.memory.store import BudgetStore
from budget_engine.utils.money import format_currency, quantize_money

router = APIRouter()


@router.get("/summary", response_model=SummaryResponse)
def get_summary(store: BudgetStore = Depends(get_store)):
    """
    Totals, balance, savings target and expenses by category.

    Values are rounded to cents here; the engine keeps full precision.
    """
    summary = store.summary()
    symbol = settings.currency_symbol

    breakdown = [
        CategoryShareSchema(
            category=share.category,
            amount=quantize_money(share.amount),
            share=quantize_money(share.share),
            color=share.color,
        )
        for share in category_breakdown(summary.expenses_by_category)
    ]

    return SummaryResponse(
        total_income=quantize_money(summary.total_income),
        total_expenses=quantize_money(summary.total_expenses),
        balance=quantize_money(summary.balance),
        savings_target=quantize_money(summary.savings_target),
        expenses_by_category={
            category: quantize_money(amount)
            for category, amount in summary.expenses_by_category.items()
        },
        breakdown=breakdown,
        display={
            "total_income": format_currency(summary.total_income, symbol),
            "total_expenses": format_currency(summary.total_expenses, symbol),
            "balance": format_currency(summary.balance, symbol),
            "savings_target": format_currency(summary.savings_target, symbol),
        },
    )


@router.get("/progress", response_model=ProgressResponse)
def get_progress(store: BudgetStore = Depends(get_store)):
    """One progress record per goal; empty when no goals are set"""
    items = [
        ProgressItem(
            goal_id=record.goal_id,
            kind=record.kind,
            category=record.category,
            current=quantize_money(record.current),
            target=quantize_money(record.target),
            percentage=quantize_money(record.percentage),
            status=record.status,
            overage=quantize_money(record.overage) if record.overage is not None else None,
        )
        for record in store.progress()
    ]

    return ProgressResponse(goals=items)


@router.get("/categories", response_model=CategoriesResponse)
def get_categories(store: BudgetStore = Depends(get_store)):
    return CategoriesResponse(
        income=list(store.catalog.income),
        expense=list(store.catalog.expense),
    )
