"""Tests for core entities."""

from datetime import timedelta

import pytest

from cacheworker.core.entities import (
    FailureRecord,
    InvalidationTask,
    RemoteFailure,
    WorkerConfig,
)


class TestWorkerConfig:
    """Tests for WorkerConfig entity."""

    def test_defaults(self) -> None:
        """Test default batching and retry policy."""
        config = WorkerConfig()

        assert config.page_size == 100
        assert config.max_retries == 3
        assert config.retry_delay == timedelta(seconds=1)

    def test_config_is_immutable(self) -> None:
        """Test that configuration cannot be changed after creation."""
        config = WorkerConfig()

        with pytest.raises(AttributeError):
            config.page_size = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"page_size": 0},
            {"page_size": -3},
            {"max_retries": -1},
            {"retry_delay": timedelta(seconds=-1)},
        ],
    )
    def test_invalid_values_rejected(self, kwargs) -> None:
        """Test that out-of-range values raise ValueError."""
        with pytest.raises(ValueError):
            WorkerConfig(**kwargs)

    def test_zero_retries_and_delay_allowed(self) -> None:
        """Test that zero retries and zero delay are valid."""
        config = WorkerConfig(max_retries=0, retry_delay=timedelta(0))

        assert config.max_retries == 0
        assert config.retry_delay == timedelta(0)


class TestInvalidationTask:
    """Tests for InvalidationTask entity."""

    def test_new_task_has_no_attempts(self) -> None:
        task = InvalidationTask(keys=("a", "b"))

        assert task.attempts == 0
        assert len(task) == 2
        assert not task.is_singleton

    def test_singleton(self) -> None:
        assert InvalidationTask(keys=("a",)).is_singleton

    def test_empty_task_rejected(self) -> None:
        with pytest.raises(ValueError):
            InvalidationTask(keys=())


class TestRemoteFailure:
    """Tests for RemoteFailure value object."""

    def test_from_messages_joins_messages(self) -> None:
        """Test that all messages end up in the failure message."""
        failure = RemoteFailure.from_messages(["first", "second"])

        assert failure.message == "first; second"
        assert failure.errors == ("first", "second")
        assert str(failure) == "first; second"

    def test_from_no_messages(self) -> None:
        assert RemoteFailure.from_messages([]).message == "Unknown error"

    def test_from_exception(self) -> None:
        failure = RemoteFailure.from_exception(ConnectionError("connection refused"))

        assert failure.message == "connection refused"

    def test_from_exception_without_message(self) -> None:
        """Test that the exception type is used when it has no message."""
        failure = RemoteFailure.from_exception(TimeoutError())

        assert failure.message == "TimeoutError"


class TestFailureRecord:
    """Tests for FailureRecord value object."""

    def test_message_comes_from_error(self) -> None:
        record = FailureRecord(keys=("a",), error=RemoteFailure(message="boom"))

        assert record.message == "boom"

    def test_records_compare_by_value(self) -> None:
        error = RemoteFailure(message="boom")

        assert FailureRecord(("a",), error) == FailureRecord(("a",), error)
