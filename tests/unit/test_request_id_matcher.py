"""Tests for RequestIdMatcher, correlating verdicts by a generated id."""

import uuid

import pytest

from body_matchers.config import MatcherConfig
from body_matchers.matchers import RequestIdMatcher
from body_matchers.models import MatcherKind


@pytest.fixture
def matcher() -> RequestIdMatcher:
    return RequestIdMatcher("error")


class TestMatchRequest:
    def test_match_sets_uuid_header(self, matcher, request_factory, sample_request_body) -> None:
        request = request_factory(body=sample_request_body)

        assert matcher.match_request(request) is True
        uuid.UUID(request.headers["X-Request-Match-Id"])

    def test_no_match(self, matcher, request_factory) -> None:
        request = request_factory(body=b"ok")

        assert matcher.match_request(request) is False
        assert matcher.store.get(request.headers["X-Request-Match-Id"]) is False

    def test_identical_bodies_get_distinct_entries(self, matcher, request_factory) -> None:
        first = request_factory(body=b"error")
        second = request_factory(body=b"error")

        matcher.match_request(first)
        matcher.match_request(second)

        assert first.headers["X-Request-Match-Id"] != second.headers["X-Request-Match-Id"]
        assert len(matcher.store) == 2

    def test_no_dedup_even_when_configured(self, request_factory) -> None:
        matcher = RequestIdMatcher("error", MatcherConfig(unique_body_only=True))

        assert matcher.match_request(request_factory(body=b"error")) is True
        assert matcher.match_request(request_factory(body=b"error")) is True

    def test_existing_header_is_reused(self, matcher, request_factory) -> None:
        request = request_factory(body=b"error", headers={"X-Request-Match-Id": "upstream-id"})

        matcher.match_request(request)

        assert request.headers == {"X-Request-Match-Id": "upstream-id"}
        assert matcher.store.get("upstream-id") is True

    def test_absent_body_stores_false(self, matcher, request_factory) -> None:
        request = request_factory(body=None)

        assert matcher.match_request(request) is False
        assert matcher.store.get(request.headers["X-Request-Match-Id"]) is False

    def test_read_failure_stores_false(self, matcher, request_factory, failing_stream) -> None:
        request = request_factory()
        request.body = failing_stream

        assert matcher.match_request(request) is False
        assert matcher.store.get(request.headers["X-Request-Match-Id"]) is False

    def test_body_restored(self, matcher, request_factory) -> None:
        request = request_factory(body=b"some error text")
        matcher.match_request(request)

        assert request.body.read() == b"some error text"


class TestMatchResponse:
    def test_returns_and_consumes_verdict(self, matcher, request_factory, response_factory) -> None:
        request = request_factory(body=b"error")
        matcher.match_request(request)
        response = response_factory(request)

        assert matcher.match_response(response) is True
        assert len(matcher.store) == 0

    def test_second_lookup_returns_false(self, matcher, request_factory, response_factory) -> None:
        request = request_factory(body=b"error")
        matcher.match_request(request)
        response = response_factory(request)

        assert matcher.match_response(response) is True
        assert matcher.match_response(response) is False

    def test_false_verdict_is_also_consumed(
        self, matcher, request_factory, response_factory
    ) -> None:
        request = request_factory(body=b"ok")
        matcher.match_request(request)

        assert matcher.match_response(response_factory(request)) is False
        assert len(matcher.store) == 0

    def test_missing_token(self, matcher, request_factory, response_factory) -> None:
        assert matcher.match_response(response_factory(request_factory(body=b"error"))) is False

    def test_unknown_token(self, matcher, request_factory, response_factory) -> None:
        request = request_factory(headers={"X-Request-Match-Id": "never-stored"})

        assert matcher.match_response(response_factory(request)) is False

    def test_ignores_response_body(self, matcher, request_factory, response_factory) -> None:
        request = request_factory(body=b"fine")
        matcher.match_request(request)

        assert matcher.match_response(response_factory(request, body=b"error")) is False

    def test_re_evaluated_request_gets_fresh_entry(
        self, matcher, request_factory, response_factory
    ) -> None:
        request = request_factory(body=b"error")
        response = response_factory(request)

        matcher.match_request(request)
        assert matcher.match_response(response) is True

        matcher.match_request(request)
        assert matcher.match_response(response) is True


def test_kind() -> None:
    assert RequestIdMatcher("x").kind is MatcherKind.REQUEST_ID
    assert RequestIdMatcher("x").token_header == "X-Request-Match-Id"
