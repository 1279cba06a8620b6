"""Unit tests for the CorrelationStore protocol.

Tests in this module verify that the protocol is runtime checkable and that
a custom store can be plugged into a correlated matcher.
"""

import io

from body_matchers.matchers import RequestIdMatcher
from body_matchers.models import Request, Response
from body_matchers.storage.base import CorrelationStore
from body_matchers.storage.memory import MemoryCorrelationStore


class DictStore:
    """Minimal conforming store without locking or expiry."""

    def __init__(self) -> None:
        self.data: dict[str, bool] = {}

    def get(self, token: str) -> bool | None:
        return self.data.get(token)

    def put(self, token: str, verdict: bool) -> None:
        self.data[token] = verdict

    def pop(self, token: str) -> bool | None:
        return self.data.pop(token, None)

    def contains(self, token: str) -> bool:
        return token in self.data

    def put_if_absent(self, token: str, verdict: bool) -> bool:
        if token in self.data:
            return False
        self.data[token] = verdict
        return True

    def cleanup_expired(self) -> int:
        return 0

    def __len__(self) -> int:
        return len(self.data)


class TestCorrelationStoreProtocol:
    def test_protocol_has_required_methods(self) -> None:
        methods = ("get", "put", "pop", "contains", "put_if_absent", "cleanup_expired", "__len__")
        for name in methods:
            assert hasattr(CorrelationStore, name)

    def test_conforming_class(self) -> None:
        assert isinstance(DictStore(), CorrelationStore)

    def test_memory_store_conforms(self) -> None:
        assert isinstance(MemoryCorrelationStore(), CorrelationStore)

    def test_non_conforming_class(self) -> None:
        class Incomplete:
            def get(self, token: str) -> bool | None:
                return None

        assert not isinstance(Incomplete(), CorrelationStore)

    def test_custom_store_is_used_by_matcher(self) -> None:
        store = DictStore()
        matcher = RequestIdMatcher("error", store=store)
        request = Request(body=io.BytesIO(b"error"))

        assert matcher.match_request(request) is True
        assert list(store.data.values()) == [True]

        assert matcher.match_response(Response(request)) is True
        assert store.data == {}
