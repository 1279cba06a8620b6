"""Scenario 1: Routing exchanges whose request reports an error

A pipeline routes every exchange whose request body contains "error". The
request is evaluated when it arrives; the response-side decision must agree
with it once the upstream answers.

- Hash-correlated matcher tags the request and answers the response
- Unique-body-only mode drops a replayed identical request
- Identity-correlated matcher answers each response exactly once
- Downstream consumers still see the untouched bodies
"""

import io

from body_matchers import MatcherConfig, Request, Response, build_matcher
from body_matchers.fingerprint import compute_body_hash

BODY = b"status: error, code 500"
UPSTREAM_BODY = b'{"detail": "code 500 from backend"}'


def new_request() -> Request:
    return Request(
        method="POST",
        url="https://upstream.internal/report",
        headers={"Content-Type": "text/plain"},
        body=io.BytesIO(BODY),
    )


def upstream(request: Request) -> Response:
    """Stand-in upstream answering every request the same way."""
    return Response(request=request, status_code=500, body=io.BytesIO(UPSTREAM_BODY))


def test_hash_correlated_exchange():
    matcher = build_matcher("request_hash", "error")
    request = new_request()

    assert matcher.match_request(request) is True
    assert request.headers["X-Request-Hash"] == compute_body_hash(BODY)

    response = upstream(request)

    assert matcher.match_response(response) is True
    assert response.body.read() == UPSTREAM_BODY
    assert request.body.read() == BODY


def test_replayed_request_dropped_in_unique_body_only_mode():
    matcher = build_matcher("request_hash", "error", MatcherConfig(unique_body_only=True))

    first = new_request()
    assert matcher.match_request(first) is True

    replay = new_request()
    assert matcher.match_request(replay) is False
    assert matcher.match_response(upstream(replay)) is False


def test_identity_correlated_exchanges_are_independent():
    matcher = build_matcher("request_id", "error")
    first, second = new_request(), new_request()

    assert matcher.match_request(first) is True
    assert matcher.match_request(second) is True

    first_response, second_response = upstream(first), upstream(second)

    assert matcher.match_response(second_response) is True
    assert matcher.match_response(first_response) is True
    # Retried response delivery does not match again
    assert matcher.match_response(first_response) is False


def test_response_only_rule_routes_on_upstream_answer():
    matcher = build_matcher("response_body", "code 500")
    request = new_request()

    assert matcher.match_request(request) is False
    assert matcher.match_response(upstream(request)) is True


def test_plain_rule_agrees_on_both_sides():
    matcher = build_matcher("body", "error")
    request = new_request()

    assert matcher.match_request(request) is True
    response = upstream(request)
    assert matcher.match_response(response) is True
    assert request.body.read() == BODY
