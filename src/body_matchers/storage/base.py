"""Correlation store protocol for body matchers.

A correlation store maps a correlation token to the verdict computed for a
request, so that the verdict can be handed to the later response-side query.

The CorrelationStore protocol defines the contract that store backends must
fulfill. The matchers call it synchronously from whatever thread the host
pipeline runs them on.

Examples:
    Implementing a custom store::

        class DictStore:
            def __init__(self) -> None:
                self._data: dict[str, bool] = {}

            def get(self, token: str) -> bool | None:
                return self._data.get(token)

            def put(self, token: str, verdict: bool) -> None:
                self._data[token] = verdict

            def pop(self, token: str) -> bool | None:
                return self._data.pop(token, None)

            def contains(self, token: str) -> bool:
                return token in self._data

            def put_if_absent(self, token: str, verdict: bool) -> bool:
                if token in self._data:
                    return False
                self._data[token] = verdict
                return True

            def cleanup_expired(self) -> int:
                return 0

            def __len__(self) -> int:
                return len(self._data)

Thread Safety and Atomicity Requirements:
    All CorrelationStore implementations MUST guarantee:

    1. **Exclusive access per operation**: each method call is atomic with
       respect to every other call on the same store.

    2. **Consume once**: pop() returns a stored verdict to at most one caller.

    3. **First writer wins**: when several callers race put_if_absent() on
       the same token, exactly one of them gets True.

    4. **Expiration handling**: records past their expiry are treated as
       absent by get(), pop() and contains().
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CorrelationStore(Protocol):
    """Protocol defining the interface for correlation stores."""

    def get(self, token: str) -> bool | None:
        """Return the verdict stored for token, or None if absent.

        Examples:
            >>> store.get("n4bQ...")
            True
        """
        ...

    def put(self, token: str, verdict: bool) -> None:
        """Store (or overwrite) the verdict for token."""
        ...

    def pop(self, token: str) -> bool | None:
        """Remove the entry for token and return its verdict.

        Returns:
            The verdict if an entry existed, None otherwise.
        """
        ...

    def contains(self, token: str) -> bool:
        """Return True if a live entry exists for token."""
        ...

    def put_if_absent(self, token: str, verdict: bool) -> bool:
        """Store verdict only if token has no live entry.

        Returns:
            True if the verdict was stored, False if an entry already existed
            (the existing entry is left untouched).
        """
        ...

    def cleanup_expired(self) -> int:
        """Remove expired entries.

        Returns:
            The number of entries removed.
        """
        ...

    def __len__(self) -> int: ...
