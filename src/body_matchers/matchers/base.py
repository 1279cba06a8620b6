"""Matcher interface shared by all correlation policies.

Every matcher holds an immutable target string and answers two questions
for the host pipeline:

- match_request(request): called when a request is observed.
- match_response(response): called once the response for that request
  exists. response.request must be the instance given to match_request.

The policies differ only in how the response-side answer relates to the
request-side one.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from body_matchers.config import MatcherConfig
from body_matchers.models import MatcherKind, Request, Response
from body_matchers.observability.logging import get_logger
from body_matchers.observability.metrics import record_correlation_lookup
from body_matchers.storage.base import CorrelationStore
from body_matchers.storage.memory import MemoryCorrelationStore
from body_matchers.utils.headers import get_header

logger = get_logger(__name__)


class RequestMatcher(ABC):
    """Base class for body matchers.

    Attributes:
        kind: The correlation policy implemented by the subclass.
        config: Matcher configuration, fixed at construction.
    """

    kind: ClassVar[MatcherKind]

    def __init__(self, value: str, config: MatcherConfig | None = None) -> None:
        """Initialize the matcher.

        Args:
            value: Substring to search for. Matching is case-sensitive.
            config: Matcher configuration. Defaults to MatcherConfig().
        """
        self._value = value
        self.config = config if config is not None else MatcherConfig()

    @property
    def value(self) -> str:
        return self._value

    @abstractmethod
    def match_request(self, request: Request) -> bool:
        """Evaluate a request. Must be safe on requests without a body."""

    @abstractmethod
    def match_response(self, response: Response) -> bool:
        """Evaluate a response, possibly using the verdict of its request."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r})"


class CorrelatedMatcher(RequestMatcher):
    """A matcher that stores request verdicts for the response side.

    The verdict is stored under a token written into a request header
    (token_header). The store is private to the matcher unless one is
    passed in.
    """

    def __init__(
        self,
        value: str,
        config: MatcherConfig | None = None,
        store: CorrelationStore | None = None,
    ) -> None:
        super().__init__(value, config)
        if store is None:
            store = MemoryCorrelationStore(ttl_seconds=self.config.entry_ttl_seconds)
        self.store = store

    @property
    @abstractmethod
    def token_header(self) -> str:
        """Name of the request header carrying the correlation token."""

    def response_token(self, response: Response) -> str | None:
        """Read the correlation token off the response's originating request."""
        token = get_header(response.request.headers, self.token_header)
        if token is None:
            logger.debug(
                "correlation.missing_token",
                matcher=self.kind.value,
                header=self.token_header,
            )
            record_correlation_lookup(self.kind.value, "no_token")
        return token
