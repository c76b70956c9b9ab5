"""
Prometheus metrics for Company Directory Service.

Tracks HTTP traffic, repository outcomes and store retries.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "directory_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "directory_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0),
)

# Persistence metrics
store_retries_total = Counter(
    "directory_store_retries_total",
    "Store operations retried after a failure",
    ["operation"],
)

repository_operations_total = Counter(
    "directory_repository_operations_total",
    "Repository operation outcomes",
    ["entity", "operation", "result"],
)


def track_request_metrics(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record one HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=status).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(
        duration
    )


async def metrics_endpoint() -> Response:
    """Expose metrics in Prometheus text format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
