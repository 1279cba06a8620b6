"""Identity-correlated body matcher.

Each request gets a random correlation id (unless it already carries one),
so identical bodies never share an entry. The response side consumes the
entry: a verdict is handed to at most one response lookup, and the store
only holds requests still waiting for their response.
"""

from body_matchers.body import snapshot_and_search
from body_matchers.fingerprint import generate_correlation_id
from body_matchers.matchers.base import CorrelatedMatcher
from body_matchers.models import MatcherKind, Request, Response
from body_matchers.observability.logging import get_logger
from body_matchers.observability.metrics import record_correlation_lookup, record_evaluation
from body_matchers.utils.headers import get_header, set_header

logger = get_logger(__name__)


class RequestIdMatcher(CorrelatedMatcher):
    """Matches on the request body, correlating by a generated id."""

    kind = MatcherKind.REQUEST_ID

    @property
    def token_header(self) -> str:
        return self.config.id_header

    def match_request(self, request: Request) -> bool:
        token = get_header(request.headers, self.token_header)
        if token is None:
            token = generate_correlation_id()
            set_header(request.headers, self.token_header, token)

        verdict = snapshot_and_search(request, self.value, matcher=self.kind.value)
        self.store.put(token, verdict)
        logger.debug(
            "correlation.stored",
            matcher=self.kind.value,
            token=token,
            verdict=verdict,
        )
        record_evaluation(self.kind.value, "request", verdict)
        return verdict

    def match_response(self, response: Response) -> bool:
        """Consume the verdict stored for the originating request.

        A second lookup with the same token returns False.
        """
        token = self.response_token(response)
        if token is None:
            record_evaluation(self.kind.value, "response", False)
            return False

        verdict = self.store.pop(token)
        if verdict is None:
            record_correlation_lookup(self.kind.value, "miss")
            record_evaluation(self.kind.value, "response", False)
            return False

        logger.debug("correlation.consumed", matcher=self.kind.value, token=token)
        record_correlation_lookup(self.kind.value, "hit")
        record_evaluation(self.kind.value, "response", verdict)
        return verdict
