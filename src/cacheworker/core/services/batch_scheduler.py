"""Batch scheduler - drives cache invalidation through a remote invalidator."""

import asyncio
import logging
from collections.abc import Sequence

from cacheworker.core.entities.failure import FailureRecord, RemoteFailure
from cacheworker.core.entities.task import InvalidationTask
from cacheworker.core.entities.worker_config import WorkerConfig
from cacheworker.core.exceptions import EmptyKeysError
from cacheworker.core.interfaces.remote_invalidator import IRemoteInvalidator
from cacheworker.utils.batching import paginate, split_in_half, unique_keys
from cacheworker.utils.stack import Stack

logger = logging.getLogger(__name__)


class BatchScheduler:
    """Domain service that invalidates keys in pages, narrowing down failures.

    Keys are sent in pages of ``config.page_size``. A failing page is
    bisected until the failing keys are isolated, and a failing single
    key is retried up to ``config.max_retries`` times before it is
    reported.

    Work is kept on a LIFO stack. The second half of a bisected batch is
    pushed last, so it is resolved completely before its first half is
    attempted, and earlier pages are resolved after later ones. The order
    of the returned failures depends on this and is stable.

    A single instance must not run ``update`` concurrently with itself.
    """

    def __init__(
        self,
        invalidator: IRemoteInvalidator,
        config: WorkerConfig | None = None,
    ) -> None:
        """Initialize the scheduler.

        Args:
            invalidator: Sends one batch of keys to the remote cache.
            config: Optional batching and retry policy. Uses defaults if
                not provided.
        """
        self._invalidator = invalidator
        self._config = config or WorkerConfig()

        # Statistics of the last update
        self._requests = 0

    @property
    def config(self) -> WorkerConfig:
        """Get the worker configuration."""
        return self._config

    @property
    def requests(self) -> int:
        """Number of remote requests issued by the last update."""
        return self._requests

    async def update(self, keys: Sequence[str]) -> list[FailureRecord]:
        """Invalidate the given keys in the remote cache.

        Args:
            keys: Cache keys to invalidate, in order. Repeated keys are
                sent once.

        Returns:
            The keys that could not be invalidated, grouped as they were
            last attempted, in the order they were given up on. An empty
            list means every key was invalidated.

        Raises:
            EmptyKeysError: If ``keys`` is empty. No request is sent.
        """
        if not keys:
            raise EmptyKeysError()

        self._requests = 0
        distinct = unique_keys(keys)
        queue: Stack[InvalidationTask] = Stack()
        for page in paginate(distinct, self._config.page_size):
            queue.push(InvalidationTask(keys=page))

        failures: list[FailureRecord] = []
        while not queue.is_empty():
            task = queue.pop()
            error = await self._send(task)
            if error is None:
                continue

            if not task.is_singleton:
                first, second = split_in_half(task.keys)
                logger.debug(
                    "Batch of %d keys failed, bisecting into %d and %d",
                    len(task),
                    len(first),
                    len(second),
                )
                queue.push(InvalidationTask(keys=first))
                queue.push(InvalidationTask(keys=second))
            elif task.attempts < self._config.max_retries:
                await self._wait_before_retry()
                task.attempts += 1
                logger.debug(
                    "Retrying key %s (attempt %d of %d)",
                    task.keys[0],
                    task.attempts,
                    self._config.max_retries,
                )
                queue.push(task)
            else:
                logger.warning(
                    "Giving up on key %s after %d retries: %s",
                    task.keys[0],
                    task.attempts,
                    error,
                )
                failures.append(FailureRecord(keys=task.keys, error=error))

        logger.info(
            "Cache update finished: %d keys, %d requests, %d failures",
            len(distinct),
            self._requests,
            len(failures),
        )
        return failures

    async def _send(self, task: InvalidationTask) -> RemoteFailure | None:
        """Send one task to the remote side.

        Exceptions raised by the invalidator count as failures.

        Args:
            task: The task whose keys are invalidated.

        Returns:
            None on success, the failure otherwise.
        """
        self._requests += 1
        try:
            error = await self._invalidator.invalidate(task.keys)
        except Exception as e:
            logger.warning(
                "Invalidating %d keys raised %s: %s", len(task), type(e).__name__, e
            )
            return RemoteFailure.from_exception(e)
        if error is None:
            logger.debug("Invalidated %d keys", len(task))
        return error

    async def _wait_before_retry(self) -> None:
        delay = self._config.retry_delay.total_seconds()
        if delay > 0:
            await asyncio.sleep(delay)
