"""Core type definitions for body matchers.

This module provides the exchange objects the matchers operate on
(Request and Response), the record kept for each correlation token, and
the enumeration of matcher kinds.

Examples:
    Building an exchange::

        import io
        from body_matchers.models import Request, Response

        request = Request(
            method="POST",
            url="https://api.example.com/orders",
            headers={"Content-Type": "application/json"},
            body=io.BytesIO(b'{"sku": "A-1"}'),
        )
        response = Response(
            request=request,
            status_code=500,
            body=io.BytesIO(b'{"error": "out of stock"}'),
        )

    Creating a correlation record::

        from datetime import UTC, datetime

        record = CorrelationRecord(
            token="k1x...",
            verdict=True,
            created_at=datetime.now(UTC),
        )
"""

from datetime import datetime
from enum import Enum
from typing import Any, BinaryIO

from pydantic import BaseModel, Field, field_validator


class MatcherKind(str, Enum):
    """The correlation policy implemented by a matcher.

    Attributes:
        BODY: Stateless; the response side re-evaluates the request body.
        REQUEST_HASH: Request verdict cached under a hash of the body.
        REQUEST_ID: Request verdict cached under a generated id, consumed once.
        RESPONSE_BODY: Only the response body is evaluated.
    """

    BODY = "body"
    REQUEST_HASH = "request_hash"
    REQUEST_ID = "request_id"
    RESPONSE_BODY = "response_body"


class Request:
    """HTTP request as seen by the matchers.

    Host pipelines convert their framework-specific request objects into
    this format and must pass the same instance to match_request and, via
    Response.request, to match_response.

    Attributes:
        method: HTTP method (GET, POST, etc.)
        url: Request URL or path
        headers: Request headers as dict. Matchers may add correlation headers.
        body: Readable binary stream, or None when the request has no body.
    """

    def __init__(
        self,
        method: str = "GET",
        url: str = "/",
        headers: dict[str, str] | None = None,
        body: BinaryIO | None = None,
    ) -> None:
        self.method = method
        self.url = url
        self.headers = headers if headers is not None else {}
        self.body = body

    def __repr__(self) -> str:
        return f"Request(method={self.method!r}, url={self.url!r})"


class Response:
    """HTTP response as seen by the matchers.

    Attributes:
        request: The request that produced this response. Read-only.
        status_code: HTTP status code
        headers: Response headers as dict
        body: Readable binary stream, or None when the response has no body.
    """

    def __init__(
        self,
        request: Request,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
        body: BinaryIO | None = None,
    ) -> None:
        self._request = request
        self.status_code = status_code
        self.headers = headers if headers is not None else {}
        self.body = body

    @property
    def request(self) -> Request:
        return self._request

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code!r}, request={self._request!r})"


class CorrelationRecord(BaseModel):
    """A verdict computed at request time, waiting for its response.

    Attributes:
        token: The correlation token the verdict is stored under.
        verdict: Whether the request matched.
        created_at: When the verdict was stored.
        expires_at: When the record stops being visible. None means never.

    Examples:
        Overwriting a verdict in place::

            record.verdict = False
    """

    token: str = Field(
        ...,
        description="Correlation token taken from the request headers",
        min_length=1,
        examples=["n4bQgYhMfWWaL-qgxVrQFaO_TxsrC4Is0V1sFbDwCgg=", "7f1c..."],
    )
    verdict: bool = Field(
        ...,
        description="Request-side match result",
    )
    created_at: datetime = Field(
        ...,
        description="Timestamp when the verdict was stored",
    )
    expires_at: datetime | None = Field(
        default=None,
        description="Timestamp after which the record is treated as absent",
    )

    @field_validator("expires_at")
    @classmethod
    def validate_expires_after_created(cls, v: datetime | None, info: Any) -> datetime | None:
        """Validate that expires_at, when set, is after created_at.

        Raises:
            ValueError: If expires_at is not after created_at.
        """
        if v is not None and "created_at" in info.data and v <= info.data["created_at"]:
            raise ValueError("expires_at must be after created_at")
        return v

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at < now
