"""Correlation stores for body matchers.

All stores implement the CorrelationStore protocol defined in base.py.

Available Stores:
    - MemoryCorrelationStore: In-memory store with optional TTL
"""

from body_matchers.storage.base import CorrelationStore
from body_matchers.storage.memory import MemoryCorrelationStore

__all__ = [
    "CorrelationStore",
    "MemoryCorrelationStore",
]
