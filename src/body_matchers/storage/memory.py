"""In-memory correlation store with lock-based concurrency control.

This module provides a thread-safe in-memory implementation of the
CorrelationStore protocol. A single threading.Lock guards the record
dictionary, so every operation has exclusive access for its duration.

Expiry:
    - ttl_seconds=None keeps records until they are popped or the store is
      discarded. Tokens whose response never arrives accumulate.
    - With a TTL, expired records are invisible to get(), pop() and
      contains(), and cleanup_expired() reclaims them.

Examples:
    Basic usage::

        from body_matchers.storage.memory import MemoryCorrelationStore

        store = MemoryCorrelationStore(ttl_seconds=600)
        store.put("token-1", True)
        store.get("token-1")   # True
        store.pop("token-1")   # True
        store.pop("token-1")   # None
"""

import threading
from datetime import UTC, datetime, timedelta

from body_matchers.models import CorrelationRecord
from body_matchers.storage.base import CorrelationStore


class MemoryCorrelationStore(CorrelationStore):
    """In-memory correlation store.

    Attributes:
        ttl_seconds: Lifetime of a record, or None for no expiry.
        _store: Dictionary mapping tokens to CorrelationRecord objects.
        _lock: Lock protecting _store.
    """

    def __init__(self, ttl_seconds: int | None = None) -> None:
        if ttl_seconds is not None and ttl_seconds < 1:
            raise ValueError(f"ttl_seconds must be >= 1, got {ttl_seconds}")
        self.ttl_seconds = ttl_seconds
        self._store: dict[str, CorrelationRecord] = {}
        self._lock = threading.Lock()

    def _live_record(self, token: str, now: datetime) -> CorrelationRecord | None:
        # Caller must hold _lock
        record = self._store.get(token)
        if record is None or record.is_expired(now):
            return None
        return record

    def get(self, token: str) -> bool | None:
        with self._lock:
            record = self._live_record(token, datetime.now(UTC))
            return None if record is None else record.verdict

    def _new_record(self, token: str, verdict: bool, now: datetime) -> CorrelationRecord:
        expires_at = None
        if self.ttl_seconds is not None:
            expires_at = now + timedelta(seconds=self.ttl_seconds)
        return CorrelationRecord(
            token=token,
            verdict=verdict,
            created_at=now,
            expires_at=expires_at,
        )

    def put(self, token: str, verdict: bool) -> None:
        """Store the verdict for token, restarting its expiry."""
        record = self._new_record(token, verdict, datetime.now(UTC))
        with self._lock:
            self._store[token] = record

    def put_if_absent(self, token: str, verdict: bool) -> bool:
        """Store the verdict unless a live record exists for token.

        The check and the write happen under one lock acquisition, so among
        concurrent callers for the same token exactly one gets True. An
        expired record counts as absent and is replaced.
        """
        now = datetime.now(UTC)
        with self._lock:
            if self._live_record(token, now) is not None:
                return False
            self._store[token] = self._new_record(token, verdict, now)
            return True

    def pop(self, token: str) -> bool | None:
        with self._lock:
            record = self._store.pop(token, None)
            if record is None or record.is_expired(datetime.now(UTC)):
                return None
            return record.verdict

    def contains(self, token: str) -> bool:
        with self._lock:
            return self._live_record(token, datetime.now(UTC)) is not None

    def cleanup_expired(self) -> int:
        """Remove all records whose expires_at has passed.

        Returns:
            The number of records removed.
        """
        now = datetime.now(UTC)
        with self._lock:
            expired = [token for token, record in self._store.items() if record.is_expired(now)]
            for token in expired:
                del self._store[token]
        return len(expired)

    def __len__(self) -> int:
        """Number of live (unexpired) records."""
        now = datetime.now(UTC)
        with self._lock:
            return sum(1 for record in self._store.values() if not record.is_expired(now))
