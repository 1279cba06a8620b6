"""
Body content matchers for HTTP traffic pipelines.

This package provides matchers that decide whether an HTTP exchange's body
contains a given string, with four policies for relating the response-side
decision to the request-side one.
"""

from body_matchers.config import MatcherConfig
from body_matchers.exceptions import BodyReadError, MatcherError, UnknownMatcherError
from body_matchers.matchers import (
    BodyMatcher,
    RequestHashMatcher,
    RequestIdMatcher,
    RequestMatcher,
    ResponseBodyMatcher,
    build_matcher,
)
from body_matchers.models import MatcherKind, Request, Response

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BodyMatcher",
    "BodyReadError",
    "MatcherConfig",
    "MatcherError",
    "MatcherKind",
    "Request",
    "RequestHashMatcher",
    "RequestIdMatcher",
    "RequestMatcher",
    "Response",
    "ResponseBodyMatcher",
    "UnknownMatcherError",
    "build_matcher",
]
