"""Observability module for structured logging, tracing, and metrics."""

from text_boolean_search.observability.context import get_trace_context, trace_context
from text_boolean_search.observability.logging import JsonFormatter, configure_logging
from text_boolean_search.observability.metrics import (
    INDEX_BUILD_LATENCY,
    INDEX_DOC_COUNT,
    QUERY_COUNT,
    QUERY_LATENCY,
    get_metrics,
    track_latency,
)
from text_boolean_search.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "INDEX_BUILD_LATENCY",
    "INDEX_DOC_COUNT",
    "QUERY_COUNT",
    "QUERY_LATENCY",
    "JsonFormatter",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "trace_context",
    "track_latency",
]
