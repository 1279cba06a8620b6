"""Utility modules for body matchers."""

from .headers import get_header, set_header

__all__ = [
    "get_header",
    "set_header",
]
