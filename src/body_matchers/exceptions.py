"""Custom exceptions for body matchers.

This module defines the exception hierarchy used by the matchers. Only one
error kind is expected at match time, a failure to drain a body stream, and
the matchers resolve it to a "no match" verdict instead of propagating it.

Examples:
    Handling a body read failure outside a matcher::

        from body_matchers.body import snapshot_body
        from body_matchers.exceptions import BodyReadError

        try:
            data = snapshot_body(request)
        except BodyReadError as e:
            logger.warning("body.read_failed", error=str(e))
            data = None

    Building a matcher from configuration::

        from body_matchers.exceptions import UnknownMatcherError
        from body_matchers.matchers import build_matcher

        try:
            matcher = build_matcher(rule["kind"], rule["value"])
        except UnknownMatcherError as e:
            logger.error("rule.invalid", kind=e.kind)
            raise
"""


class MatcherError(Exception):
    """Base exception for all matcher errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        """Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class BodyReadError(MatcherError):
    """Draining a request or response body failed.

    Raised by the snapshot primitives when the underlying stream errors out
    while being read. The stream is left in a consumed, unrestored state.

    Attributes:
        message: Human-readable error description.
        cause: The underlying exception raised by the stream.

    Examples:
        Raising a body read error::

            try:
                data = stream.read()
            except OSError as e:
                raise BodyReadError(f"Error reading body: {e}", cause=e) from e
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        """Initialize the body read error with details.

        Args:
            message: Human-readable error description.
            cause: The underlying exception raised by the stream.
        """
        super().__init__(message)
        self.cause = cause


class UnknownMatcherError(MatcherError):
    """No matcher variant is registered under the requested kind.

    Attributes:
        message: Human-readable error description.
        kind: The kind that was requested.
    """

    def __init__(self, message: str, kind: str) -> None:
        super().__init__(message)
        self.kind = kind
