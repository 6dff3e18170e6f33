"""Prometheus metrics for ledger activity, goal changes, and rejected input"""

from prometheus_client import Counter, Histogram

transactions_counter = Counter(
    "budget_transactions_total",
    "Transactions recorded",
    ["kind"],  # income | expense
)

transaction_removals_counter = Counter(
    "budget_transaction_removals_total",
    "Transactions deleted from the ledger",
    ["kind"],
)

goal_changes_counter = Counter(
    "budget_goal_changes_total",
    "Goals added or removed",
    ["action", "kind"],
)

rejected_operations_counter = Counter(
    "budget_rejected_operations_total",
    "Operations rejected by domain validation",
    ["error"],  # ValidationError | DuplicateGoalError | NotFoundError
)

# Gateway latency per route template, e.g. /v1/goals/{goal_id}
request_duration_histogram = Histogram(
    "budget_http_request_duration_seconds",
    "Budget gateway request latency",
    ["method", "route", "status"],
)


def record_transaction(kind: str) -> None:
    transactions_counter.labels(kind=kind).inc()


def record_transaction_removal(kind: str) -> None:
    transaction_removals_counter.labels(kind=kind).inc()


def record_goal_change(action: str, kind: str) -> None:
    goal_changes_counter.labels(action=action, kind=kind).inc()


def record_rejection(error: Exception) -> None:
    rejected_operations_counter.labels(error=type(error).__name__).inc()
