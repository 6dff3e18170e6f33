"""Gateway middleware: request ids for log correlation, latency per route"""

import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from budget_engine.infrastructure.observability.metrics import request_duration_histogram

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id.

    Endpoints pass it to the log helpers so a rejected transaction or goal
    can be traced back to the response the collaborator received.
    """

    async def dispatch(self, request: Request, call_next):
        request.state.request_id = str(uuid.uuid4())

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Observe latency under the route template (/v1/goals/{goal_id}), not the raw path"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)

        route = request.scope.get("route")
        request_duration_histogram.labels(
            method=request.method,
            route=getattr(route, "path", "unmatched"),
            status=response.status_code,
        ).observe(time.perf_counter() - start_time)

        return response
