"""Prometheus metrics & middleware for the stats analyzer service.

Collects per-endpoint request count and latency plus rejected-input counts,
and exposes the /metrics endpoint for Prometheus.
"""
from __future__ import annotations

from fastapi import APIRouter, Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
import time

# Prometheus metric names as constants
REQUEST_COUNT_NAME = "stats_analyzer_request_total"
REQUEST_LATENCY_NAME = "stats_analyzer_request_duration_seconds"
REQUEST_ERROR_COUNT_NAME = "stats_analyzer_request_errors_total"
REJECTED_INPUT_COUNT_NAME = "stats_analyzer_rejected_input_total"

# -----------------------------------------------------------------------------
# Metric objects
# -----------------------------------------------------------------------------
# REQUEST_COUNT: total HTTP requests, labeled by path, method, and status code.
REQUEST_COUNT = Counter(
    name=REQUEST_COUNT_NAME,
    documentation="Total HTTP requests",
    labelnames=["path", "method", "status"],
)

# REQUEST_LATENCY: request duration (seconds), labeled by path and method.
# Exposed as _bucket, _count and _sum series.
REQUEST_LATENCY = Histogram(
    name=REQUEST_LATENCY_NAME,
    documentation="Request latency in seconds",
    labelnames=["path", "method"],
)

# REQUEST_ERROR_COUNT: error responses (status >= 400)
REQUEST_ERROR_COUNT = Counter(
    name=REQUEST_ERROR_COUNT_NAME,
    documentation="Total HTTP error responses (status >= 400)",
    labelnames=["path", "method", "status"],
)

# REJECTED_INPUT_COUNT: data sets refused by the validator, labeled by failure kind
# (not_a_sequence, invalid_element, empty_sequence).
REJECTED_INPUT_COUNT = Counter(
    name=REJECTED_INPUT_COUNT_NAME,
    documentation="Total data sets rejected by validation",
    labelnames=["kind"],
)

# -----------------------------------------------------------------------------
# ASGI middleware
# -----------------------------------------------------------------------------
# Wraps every HTTP request: on response start it increments the request
# counter (and error counter for status >= 400) and observes the latency.
# The path label is the route template when one matched.
class MetricsMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        # Only instrument HTTP requests (not websockets, lifespan, etc.)
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        req = Request(scope, receive)
        started_at = time.perf_counter()

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                status_code = message["status"]
                # e.g. "/statistics/{operation}" rather than "/statistics/median"
                route = scope.get("route")
                if route and hasattr(route, "path"):
                    path_template = route.path
                else:
                    path_template = scope.get("path", "")
                REQUEST_COUNT.labels(path_template, req.method, status_code).inc()
                if int(status_code) >= 400:
                    REQUEST_ERROR_COUNT.labels(path_template, req.method, status_code).inc()
                REQUEST_LATENCY.labels(path_template, req.method).observe(time.perf_counter() - started_at)
            await send(message)

        await self.app(scope, receive, send_wrapper)


def record_rejected_input(kind: str) -> None:
    """Count one data set refused by the validator."""
    REJECTED_INPUT_COUNT.labels(kind).inc()

# -----------------------------------------------------------------------------
# /metrics endpoint
# -----------------------------------------------------------------------------
metrics_router = APIRouter()

@metrics_router.get("/metrics")
async def metrics():
    # Plaintext exposition format, scraped by Prometheus
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
