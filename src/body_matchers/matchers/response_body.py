"""Response body matcher.

Evaluates the response's own body. Requests never match, since the body
this matcher cares about does not exist yet when the request is observed.
"""

from body_matchers.body import snapshot_and_search
from body_matchers.matchers.base import RequestMatcher
from body_matchers.models import MatcherKind, Request, Response
from body_matchers.observability.metrics import record_evaluation


class ResponseBodyMatcher(RequestMatcher):
    """Matches exchanges whose response body contains the value."""

    kind = MatcherKind.RESPONSE_BODY

    def match_request(self, request: Request) -> bool:
        record_evaluation(self.kind.value, "request", False)
        return False

    def match_response(self, response: Response) -> bool:
        verdict = snapshot_and_search(response, self.value, matcher=self.kind.value)
        record_evaluation(self.kind.value, "response", verdict)
        return verdict
