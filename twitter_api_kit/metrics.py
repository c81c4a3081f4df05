"""
Prometheus Metrics for TwitterAPIKit

Counters and histograms for transport operations. The host application
exposes the prometheus_client registry.
"""

import logging

from prometheus_client import Counter, Histogram

logger = logging.getLogger("twitter_api_kit.metrics")

# kind is "data" or "stream"; code is the HTTP status or "error"
REQUEST_COUNT = Counter(
    "twitter_api_kit_requests_total",
    "Total number of completed transport operations",
    ["kind", "code"],
)

REQUEST_LATENCY = Histogram(
    "twitter_api_kit_request_latency_seconds",
    "Transport operation duration in seconds",
    ["kind"],
)


def metrics_request(kind: str, code: str, latency: float) -> None:
    """
    Record metrics for a completed operation.

    Args:
        kind: "data" or "stream"
        code: HTTP status code as a string, or "error"
        latency: Operation duration in seconds
    """
    try:
        REQUEST_COUNT.labels(kind=kind, code=code).inc()
        REQUEST_LATENCY.labels(kind=kind).observe(latency)
    except Exception as e:
        # Metrics failures should not break request delivery
        logger.debug("Failed to record metrics: %s", e)
