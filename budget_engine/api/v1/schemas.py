"""Pydantic schemas for API request/response validation"""

import datetime
from decimal import Decimal
from typing import Dict, List, Optional
from pydantic import BaseModel, Field
from budget_engine.domain.models import GoalStatus, TransactionKind


class TransactionCreate(BaseModel):
    """Request body for POST /v1/transactions"""

    kind: TransactionKind
    amount: Decimal = Field(..., description="Positive amount; validated by the ledger")
    category: str
    description: str
    date: Optional[datetime.date] = Field(None, description="Defaults to today")


class TransactionResponse(BaseModel):
    id: str
    kind: TransactionKind
    amount: Decimal
    category: str
    description: str
    date: datetime.date


class TransactionListResponse(BaseModel):
    """Response for GET /v1/transactions"""

    transactions: List[TransactionResponse]


class GoalCreate(BaseModel):
    """Request body for POST /v1/goals"""

    kind: TransactionKind
    amount: Decimal = Field(..., description="Positive monthly target")
    category: Optional[str] = Field(None, description="Required for expense goals, ignored for income")
    period: str = "monthly"


class GoalResponse(BaseModel):
    id: str
    kind: TransactionKind
    amount: Decimal
    category: Optional[str] = None
    period: str


class GoalListResponse(BaseModel):
    """Response for GET /v1/goals, grouped the way the goals panel shows them"""

    income: List[GoalResponse]
    expense: List[GoalResponse]


class CategoryShareSchema(BaseModel):
    category: str
    amount: Decimal
    share: Decimal
    color: str


class SummaryResponse(BaseModel):
    """Response for GET /v1/summary"""

    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal
    savings_target: Decimal
    expenses_by_category: Dict[str, Decimal]
    breakdown: List[CategoryShareSchema]
    display: Dict[str, str]


class ProgressItem(BaseModel):
    goal_id: str
    kind: TransactionKind
    category: Optional[str] = None
    current: Decimal
    target: Decimal
    percentage: Decimal
    status: GoalStatus
    overage: Optional[Decimal] = None


class ProgressResponse(BaseModel):
    """Response for GET /v1/progress"""

    goals: List[ProgressItem]


class CategoriesResponse(BaseModel):
    """Response for GET /v1/categories"""

    income: List[str]
    expense: List[str]
