"""/v1/goals - declare and remove monthly targets"""

from fastapi import APIRouter, Depends, HTTPException, Request

from budget_engine.api.v1.schemas import GoalCreate, GoalListResponse, GoalResponse
from budget_engine.api.dependencies import get_request_id, get_store
from budget_engine.domain.exceptions import DuplicateGoalError, NotFoundError, ValidationError
from budget_engine.domain.models import Goal
from budget_engine.infrastructure.memory.store import BudgetStore
from budget_engine.infrastructure.observability.logging import log_goal_change, log_rejected_operation
from budget_engine.infrastructure.observability.metrics import record_goal_change, record_rejection
from budget_engine.utils.money import quantize_money

router = APIRouter()


def to_response(goal: Goal) -> GoalResponse:
    return GoalResponse(
        id=goal.id,
        kind=goal.kind,
        amount=quantize_money(goal.amount),
        category=goal.category,
        period=goal.period,
    )


@router.post("/goals", response_model=GoalResponse, status_code=201)
def create_goal(
    request_body: GoalCreate,
    request: Request,
    store: BudgetStore = Depends(get_store),
):
    """
    Add an income goal or an expense limit.

    Only one income goal may exist, and one expense goal per category.
    """
    request_id = get_request_id(request)

    try:
        goal = store.add_goal(
            kind=request_body.kind,
            amount=request_body.amount,
            category=request_body.category,
            period=request_body.period,
        )
    except ValidationError as e:
        record_rejection(e)
        log_rejected_operation(request_id, "add_goal", e)
        raise HTTPException(status_code=422, detail=str(e))
    except DuplicateGoalError as e:
        record_rejection(e)
        log_rejected_operation(request_id, "add_goal", e)
        raise HTTPException(status_code=409, detail=str(e))

    record_goal_change("added", goal.kind.value)
    log_goal_change(request_id, "added", goal.id, goal.kind.value, goal.category)

    return to_response(goal)


@router.get("/goals", response_model=GoalListResponse)
def list_goals(store: BudgetStore = Depends(get_store)):
    return GoalListResponse(
        income=[to_response(g) for g in store.goals.income_goals()],
        expense=[to_response(g) for g in store.goals.expense_goals()],
    )


@router.delete("/goals/{goal_id}", response_model=GoalResponse)
def delete_goal(
    goal_id: str,
    request: Request,
    store: BudgetStore = Depends(get_store),
):
    request_id = get_request_id(request)

    try:
        goal = store.remove_goal(goal_id)
    except NotFoundError as e:
        record_rejection(e)
        log_rejected_operation(request_id, "remove_goal", e)
        raise HTTPException(status_code=404, detail=str(e))

    record_goal_change("removed", goal.kind.value)
    log_goal_change(request_id, "removed", goal.id, goal.kind.value, goal.category)

    return to_response(goal)
