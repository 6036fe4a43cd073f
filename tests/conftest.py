"""Pytest configuration for cacheworker tests."""

from collections.abc import Callable, Iterable, Sequence
from datetime import timedelta

import pytest

from cacheworker import BatchScheduler, RemoteFailure, WorkerConfig


class ScriptedInvalidator:
    """In-memory stand-in for the remote cache endpoint.

    A batch fails if it contains a key from ``failing``. Keys listed in
    ``flaky`` fail that many times before they start succeeding.
    Every call is recorded in ``calls``.
    """

    def __init__(
        self,
        failing: Iterable[str] = (),
        flaky: dict[str, int] | None = None,
        message: Callable[[Sequence[str], int], str] | None = None,
    ) -> None:
        self.failing = set(failing)
        self.flaky = dict(flaky or {})
        self.calls: list[tuple[str, ...]] = []
        self.succeeded: list[tuple[str, ...]] = []
        self._message = message or (lambda keys, n: f"Cannot update {', '.join(keys)}")

    async def invalidate(self, keys: Sequence[str]) -> RemoteFailure | None:
        batch = tuple(keys)
        self.calls.append(batch)

        bad = [key for key in batch if key in self.failing]
        for key in batch:
            if self.flaky.get(key, 0) > 0:
                self.flaky[key] -= 1
                bad.append(key)

        if bad:
            return RemoteFailure(message=self._message(bad, len(self.calls)))
        self.succeeded.append(batch)
        return None

    def calls_with(self, key: str) -> int:
        return sum(1 for batch in self.calls if key in batch)


def make_keys(count: int) -> list[str]:
    return [f"de.serlo.org/api/key{i}" for i in range(count)]


@pytest.fixture
def keys() -> list[str]:
    """Twenty-five cache keys."""
    return make_keys(25)


@pytest.fixture
def fast_config() -> WorkerConfig:
    """Configuration without retry delay."""
    return WorkerConfig(page_size=10, max_retries=3, retry_delay=timedelta(0))


@pytest.fixture
def make_scheduler(fast_config: WorkerConfig):
    """Factory for a scheduler backed by a ScriptedInvalidator."""

    def factory(
        config: WorkerConfig | None = None, **kwargs
    ) -> tuple[BatchScheduler, ScriptedInvalidator]:
        invalidator = ScriptedInvalidator(**kwargs)
        return BatchScheduler(invalidator, config or fast_config), invalidator

    return factory


@pytest.fixture
def key_factory() -> Callable[[int], list[str]]:
    """Factory for numbered cache keys."""
    return make_keys
