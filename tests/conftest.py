"""
Pytest configuration and shared fixtures for body_matchers tests.
"""

import io
from collections.abc import Callable

import pytest

from body_matchers.models import Request, Response


class FailingStream(io.RawIOBase):
    """A body stream whose reads always fail."""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:  # type: ignore[no-untyped-def]
        raise OSError("connection reset by peer")


def make_request(body: bytes | None = None, headers: dict[str, str] | None = None) -> Request:
    """Build a POST request with an optional in-memory body."""
    return Request(
        method="POST",
        url="/api/orders",
        headers=dict(headers or {}),
        body=io.BytesIO(body) if body is not None else None,
    )


def make_response(request: Request, body: bytes | None = None, status_code: int = 200) -> Response:
    """Build a response to request with an optional in-memory body."""
    return Response(
        request=request,
        status_code=status_code,
        body=io.BytesIO(body) if body is not None else None,
    )


@pytest.fixture
def sample_request_body() -> bytes:
    """Provide a sample request body containing "error"."""
    return b"status: error, code 500"


@pytest.fixture
def request_factory() -> Callable[..., Request]:
    return make_request


@pytest.fixture
def response_factory() -> Callable[..., Response]:
    return make_response


@pytest.fixture
def failing_stream() -> FailingStream:
    return FailingStream()
