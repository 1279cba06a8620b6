"""Body matcher variants.

Four correlation policies share the RequestMatcher interface:

- BodyMatcher: stateless, the response side re-evaluates the request body
- RequestHashMatcher: request verdict cached under a body hash, retained
- RequestIdMatcher: request verdict cached under a random id, consumed once
- ResponseBodyMatcher: only the response body is evaluated
"""

from body_matchers.config import MatcherConfig
from body_matchers.exceptions import UnknownMatcherError
from body_matchers.matchers.base import CorrelatedMatcher, RequestMatcher
from body_matchers.matchers.body import BodyMatcher
from body_matchers.matchers.request_hash import RequestHashMatcher
from body_matchers.matchers.request_id import RequestIdMatcher
from body_matchers.matchers.response_body import ResponseBodyMatcher
from body_matchers.models import MatcherKind
from body_matchers.storage.base import CorrelationStore

MATCHERS: dict[MatcherKind, type[RequestMatcher]] = {
    MatcherKind.BODY: BodyMatcher,
    MatcherKind.REQUEST_HASH: RequestHashMatcher,
    MatcherKind.REQUEST_ID: RequestIdMatcher,
    MatcherKind.RESPONSE_BODY: ResponseBodyMatcher,
}


def build_matcher(
    kind: MatcherKind | str,
    value: str,
    config: MatcherConfig | None = None,
    store: CorrelationStore | None = None,
) -> RequestMatcher:
    """Create a matcher from its kind.

    Args:
        kind: A MatcherKind or its string value ("body", "request_hash", ...)
        value: Substring to search for
        config: Matcher configuration
        store: Correlation store for correlated kinds. Ignored by the
            stateless kinds.

    Returns:
        A new matcher instance.

    Raises:
        UnknownMatcherError: If kind is not a known matcher kind.

    Example:
        >>> matcher = build_matcher("request_id", "error")
        >>> type(matcher).__name__
        'RequestIdMatcher'
    """
    try:
        matcher_kind = MatcherKind(kind)
    except ValueError as e:
        known = ", ".join(k.value for k in MatcherKind)
        raise UnknownMatcherError(
            f"Unknown matcher kind: {kind!r}. Known kinds are: {known}",
            kind=str(kind),
        ) from e

    matcher_cls = MATCHERS[matcher_kind]
    if issubclass(matcher_cls, CorrelatedMatcher):
        return matcher_cls(value, config=config, store=store)
    return matcher_cls(value, config=config)


__all__ = [
    "MATCHERS",
    "BodyMatcher",
    "CorrelatedMatcher",
    "RequestHashMatcher",
    "RequestIdMatcher",
    "RequestMatcher",
    "ResponseBodyMatcher",
    "build_matcher",
]
