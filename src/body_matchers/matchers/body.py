"""Plain body matcher.

No correlation state: the response side re-reads the request body and
evaluates it again. A "response match" therefore means "the request that
produced this response contained the value".
"""

from body_matchers.body import snapshot_and_search
from body_matchers.matchers.base import RequestMatcher
from body_matchers.models import MatcherKind, Request, Response
from body_matchers.observability.metrics import record_evaluation


class BodyMatcher(RequestMatcher):
    """Matches exchanges whose request body contains the value."""

    kind = MatcherKind.BODY

    def match_request(self, request: Request) -> bool:
        verdict = snapshot_and_search(request, self.value, matcher=self.kind.value)
        record_evaluation(self.kind.value, "request", verdict)
        return verdict

    def match_response(self, response: Response) -> bool:
        verdict = snapshot_and_search(response.request, self.value, matcher=self.kind.value)
        record_evaluation(self.kind.value, "response", verdict)
        return verdict
