"""Prometheus metrics for body matchers.

Metrics include:

- Match evaluations by matcher kind, phase and verdict
- Body read failures
- Correlation lookups on the response side (hit, miss, no token)
- Cleanup operation tracking

Examples:
    Recording a request-side evaluation::

        from body_matchers.observability.metrics import record_evaluation

        record_evaluation(matcher="request_hash", phase="request", verdict=True)
"""

from prometheus_client import Counter

# Labels: matcher (kind), phase (request, response), verdict (true, false)
evaluations_total = Counter(
    "body_matcher_evaluations_total",
    "Total number of match evaluations",
    ["matcher", "phase", "verdict"],
)

body_read_failures_total = Counter(
    "body_matcher_body_read_failures_total",
    "Total number of body streams that failed to be read",
    ["matcher"],
)

# Labels: result (hit, miss, no_token)
correlation_lookups_total = Counter(
    "body_matcher_correlation_lookups_total",
    "Total number of response-side correlation lookups",
    ["matcher", "result"],
)

cleanup_operations = Counter(
    "body_matcher_cleanup_operations_total",
    "Total number of cleanup operations performed",
)

cleanup_records_removed = Counter(
    "body_matcher_cleanup_records_removed_total",
    "Total number of expired correlation records removed by cleanup",
)


def record_evaluation(matcher: str, phase: str, verdict: bool) -> None:
    """Record the verdict of a match call.

    Args:
        matcher: The matcher kind (body, request_hash, ...)
        phase: "request" or "response"
        verdict: The returned verdict
    """
    evaluations_total.labels(
        matcher=matcher, phase=phase, verdict="true" if verdict else "false"
    ).inc()


def record_body_read_failure(matcher: str) -> None:
    body_read_failures_total.labels(matcher=matcher).inc()


def record_correlation_lookup(matcher: str, result: str) -> None:
    """Record a response-side lookup.

    Args:
        matcher: The matcher kind
        result: "hit", "miss" or "no_token"
    """
    correlation_lookups_total.labels(matcher=matcher, result=result).inc()


def record_cleanup(records_removed: int) -> None:
    """Record a cleanup operation.

    Args:
        records_removed: Number of expired records removed
    """
    cleanup_operations.inc()
    cleanup_records_removed.inc(records_removed)
