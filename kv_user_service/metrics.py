"""
Prometheus metrics for the user service.

Tracks HTTP traffic and key-value store operations.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "user_http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"]
)

http_request_duration_seconds = Histogram(
    "user_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.075, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0),
)

# Store metrics
user_store_operations_total = Counter(
    "user_store_operations_total", "Total key-value store operations", ["operation", "status"]
)

user_store_operation_duration_seconds = Histogram(
    "user_store_operation_duration_seconds",
    "Key-value store operation duration in seconds",
    ["operation"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

# Repository metrics
user_operations_total = Counter(
    "user_operations_total", "Total user repository operations", ["operation", "status"]
)


def track_request_metrics(method: str, endpoint: str, status_code: int, duration: float):
    """Track HTTP request metrics."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def track_store_operation(operation: str, success: bool, duration: float):
    """Track key-value store operation metrics."""
    status = "success" if success else "failure"
    user_store_operations_total.labels(operation=operation, status=status).inc()
    user_store_operation_duration_seconds.labels(operation=operation).observe(duration)


def track_user_operation(operation: str, success: bool):
    """Track user repository operations."""
    status = "success" if success else "failure"
    user_operations_total.labels(operation=operation, status=status).inc()


async def metrics_endpoint():
    """
    Prometheus metrics endpoint.

    Returns:
        Response with Prometheus metrics in text format
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
