"""/v1/transactions - record, list and remove ledger entries"""

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from budget_engine.api.v1.schemas import TransactionCreate, TransactionListResponse, TransactionResponse
from budget_engine.api.dependencies import get_request_id, get_store
from budget_engine.config import settings
from budget_engine.domain.exceptions import NotFoundError, ValidationError
from budget_engine.domain.models import Transaction
from budget_engine.infrastructure.memory.store import BudgetStore
from budget_engine.infrastructure.observability.logging import (
    log_rejected_operation,
    log_transaction_recorded,
    log_transaction_removed,
)
from budget_engine.infrastructure.observability.metrics import (
    record_rejection,
    record_transaction,
    record_transaction_removal,
)
from budget_engine.utils.money import format_currency, quantize_money

router = APIRouter()


def to_response(txn: Transaction) -> TransactionResponse:
    return TransactionResponse(
        id=txn.id,
        kind=txn.kind,
        amount=quantize_money(txn.amount),
        category=txn.category,
        description=txn.description,
        date=txn.date,
    )


@router.post("/transactions", response_model=TransactionResponse, status_code=201)
def create_transaction(
    request_body: TransactionCreate,
    request: Request,
    store: BudgetStore = Depends(get_store),
):
    """
    Record an income or expense.

    The category must belong to the catalog list for the given kind.
    Rejected input leaves the ledger unchanged.
    """
    request_id = get_request_id(request)

    try:
        txn = store.add_transaction(
            kind=request_body.kind,
            amount=request_body.amount,
            category=request_body.category,
            description=request_body.description,
            date=request_body.date,
        )
    except ValidationError as e:
        record_rejection(e)
        log_rejected_operation(request_id, "add_transaction", e)
        raise HTTPException(status_code=422, detail=str(e))

    record_transaction(txn.kind.value)
    log_transaction_recorded(request_id, txn.id, txn.kind.value, format_currency(txn.amount, settings.currency_symbol))

    return to_response(txn)


@router.get("/transactions", response_model=TransactionListResponse)
def list_transactions(
    recent: Optional[int] = Query(None, ge=1, description="Only the N most recent, newest first"),
    store: BudgetStore = Depends(get_store),
):
    """List transactions in insertion order, or the most recent ones newest first"""
    if recent is None:
        transactions = store.ledger.list_transactions()
    else:
        transactions = store.ledger.recent_transactions(recent)

    return TransactionListResponse(transactions=[to_response(t) for t in transactions])


@router.get("/transactions/recent", response_model=TransactionListResponse)
def recent_transactions(store: BudgetStore = Depends(get_store)):
    """Recent transactions panel, sized by settings"""
    transactions = store.ledger.recent_transactions(settings.recent_transactions_limit)
    return TransactionListResponse(transactions=[to_response(t) for t in transactions])


@router.delete("/transactions/{transaction_id}", response_model=TransactionResponse)
def delete_transaction(
    transaction_id: str,
    request: Request,
    store: BudgetStore = Depends(get_store),
):
    request_id = get_request_id(request)

    try:
        txn = store.remove_transaction(transaction_id)
    except NotFoundError as e:
        record_rejection(e)
        log_rejected_operation(request_id, "remove_transaction", e)
        raise HTTPException(status_code=404, detail=str(e))

    record_transaction_removal(txn.kind.value)
    log_transaction_removed(request_id, txn.id, txn.kind.value)

    return to_response(txn)
