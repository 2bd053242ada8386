"""Prometheus metrics for indexing and query evaluation."""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import Counter, Gauge, Histogram, generate_latest


if TYPE_CHECKING:
    from collections.abc import Generator


INDEX_BUILD_LATENCY = Histogram(
    "text_search_index_build_seconds",
    "Time spent building an in-memory index for one corpus root",
    buckets=(0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0, 30.0),
)

INDEX_DOC_COUNT = Gauge(
    "text_search_index_document_count",
    "Documents indexed by the most recent build",
)

QUERY_LATENCY = Histogram(
    "text_search_query_latency_seconds",
    "Boolean query evaluation latency",
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.5),
)

QUERY_COUNT = Counter(
    "text_search_queries_total",
    "Evaluated boolean queries",
    ["outcome"],
)


@contextmanager
def track_latency(histogram: Histogram, **labels: str) -> Generator[None, None, None]:
    """Context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        target = histogram.labels(**labels) if labels else histogram
        target.observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest()
