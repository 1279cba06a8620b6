"""Hash-correlated body matcher.

The request verdict is stored under a hash of the request body, and the
hash is written into a request header so the response side can find it.

Behavior:
    - A token already present in the header (set by an upstream hop, or by
      an earlier call on the same request) is trusted and reused as-is.
    - Entries are never removed on read: every response referencing the
      token sees the same verdict.
    - With unique_body_only, a body whose token is already stored is forced
      to a non-match, and the stored verdict is overwritten with False.
    - Hash collisions are not detected; colliding bodies share a verdict.

Examples:
    Routing on request content::

        matcher = RequestHashMatcher("error")
        matcher.match_request(request)    # True, sets X-Request-Hash
        matcher.match_response(response)  # True
"""

from body_matchers.body import contains, report_read_failure, snapshot_body
from body_matchers.exceptions import BodyReadError
from body_matchers.fingerprint import compute_body_hash
from body_matchers.matchers.base import CorrelatedMatcher
from body_matchers.models import MatcherKind, Request, Response
from body_matchers.observability.logging import get_logger
from body_matchers.observability.metrics import record_correlation_lookup, record_evaluation
from body_matchers.utils.headers import get_header, set_header

logger = get_logger(__name__)


class RequestHashMatcher(CorrelatedMatcher):
    """Matches on the request body, correlating by content hash."""

    kind = MatcherKind.REQUEST_HASH

    @property
    def token_header(self) -> str:
        return self.config.hash_header

    def match_request(self, request: Request) -> bool:
        """Evaluate the request body and store the verdict under its hash.

        Requests without a body, or whose body cannot be read, do not match
        and get no token.
        """
        try:
            data = snapshot_body(request)
        except BodyReadError as e:
            report_read_failure(e, self.kind.value)
            record_evaluation(self.kind.value, "request", False)
            return False

        if data is None:
            record_evaluation(self.kind.value, "request", False)
            return False

        token = get_header(request.headers, self.token_header)
        if token is None:
            token = compute_body_hash(data)
            set_header(request.headers, self.token_header, token)

        verdict = contains(data, self.value)

        if not self.config.unique_body_only:
            self.store.put(token, verdict)
        elif not self.store.put_if_absent(token, verdict):
            # Seen before: only the first occurrence may match
            self.store.put(token, False)
            logger.debug("correlation.forced_false", matcher=self.kind.value, token=token)
            record_evaluation(self.kind.value, "request", False)
            return False

        logger.debug(
            "correlation.stored",
            matcher=self.kind.value,
            token=token,
            verdict=verdict,
        )
        record_evaluation(self.kind.value, "request", verdict)
        return verdict

    def match_response(self, response: Response) -> bool:
        """Return the verdict stored for the originating request.

        Returns False when the request carries no token or no verdict was
        stored for it.
        """
        token = self.response_token(response)
        if token is None:
            record_evaluation(self.kind.value, "response", False)
            return False

        stored = self.store.get(token)
        record_correlation_lookup(self.kind.value, "miss" if stored is None else "hit")
        verdict = bool(stored)
        record_evaluation(self.kind.value, "response", verdict)
        return verdict
