"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from budget_engine.api.middleware import RequestIDMiddleware, MetricsMiddleware
from budget_engine.api.v1 import goals, summary, transactions
from budget_engine.infrastructure.memory.store import BudgetStore
from budget_engine.infrastructure.observability.logging import setup_logging
from budget_engine.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app(store: BudgetStore | None = None) -> FastAPI:
    """Create and configure FastAPI application with its own in-memory store"""
    app = FastAPI(
        title="Budget Engine",
        description="Income/expense ledger, monthly goals and progress tracking",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.store = store or BudgetStore()

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(transactions.router, prefix="/v1", tags=["transactions"])
    app.include_router(goals.router, prefix="/v1", tags=["goals"])
    app.include_router(summary.router, prefix="/v1", tags=["summary"])

    return app


app = create_app()
