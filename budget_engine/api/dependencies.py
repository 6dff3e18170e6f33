"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from budget_engine.infrastructure.memory.store import BudgetStore


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_store(request: Request) -> BudgetStore:
    """Provide the app-wide in-memory budget store"""
    return request.app.state.store
