"""Body snapshot/restore and substring search.

Inspecting a body drains its stream. Every function here that reads a body
installs a fresh stream over the same bytes before returning, so other
consumers of the request or response see the body unchanged.

The one exception is a failed read: the stream is left as the failure left
it, and the caller is expected to treat the exchange as a non-match.

Examples:
    Searching a request body::

        from body_matchers.body import snapshot_and_search

        if snapshot_and_search(request, "error"):
            ...
        request.body.read()  # still the full original body
"""

import io
from typing import BinaryIO, Protocol

from body_matchers.exceptions import BodyReadError
from body_matchers.observability.logging import get_logger
from body_matchers.observability.metrics import record_body_read_failure

logger = get_logger(__name__)


class HttpMessage(Protocol):
    """Anything carrying a replaceable body stream (Request or Response)."""

    body: BinaryIO | None


def read_body(stream: BinaryIO) -> bytes:
    """Drain a body stream completely.

    Raises:
        BodyReadError: If the stream raises while being read.
    """
    try:
        return stream.read()
    except (OSError, ValueError) as e:
        raise BodyReadError(f"Error reading body: {e}", cause=e) from e


def snapshot_body(message: HttpMessage) -> bytes | None:
    """Read a message body and replace it with a replayable stream.

    Args:
        message: Request or Response whose body is inspected

    Returns:
        The body bytes, or None if the message has no body.

    Raises:
        BodyReadError: If the stream fails. The body is not restored.
    """
    if message.body is None:
        return None

    data = read_body(message.body)
    message.body = io.BytesIO(data)
    return data


def contains(data: bytes, value: str) -> bool:
    """Literal, case-sensitive search for value in the body bytes."""
    return value.encode("utf-8") in data


def report_read_failure(error: BodyReadError, matcher: str) -> None:
    """Log and count a body read failure that is being resolved to no match."""
    logger.warning(
        "body.read_failed",
        matcher=matcher,
        error=str(error),
        error_type=type(error.cause).__name__,
    )
    record_body_read_failure(matcher)


def snapshot_and_search(message: HttpMessage, value: str, matcher: str = "body") -> bool:
    """Search a message body for value, restoring the body afterwards.

    Read failures are logged and resolve to False; they are not retried.

    Args:
        message: Request or Response whose body is searched
        value: Substring to search for
        matcher: Matcher kind, used to label logs and metrics

    Returns:
        True if the body is present and contains value.
    """
    try:
        data = snapshot_body(message)
    except BodyReadError as e:
        report_read_failure(e, matcher)
        return False

    if data is None:
        return False
    return contains(data, value)
