"""Runs a complete cache update and reports the outcome."""

import asyncio
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from cacheworker.core.entities.failure import FailureRecord
from cacheworker.core.services.batch_scheduler import BatchScheduler
from cacheworker.infrastructure.auth.service_token import ServiceTokenProvider
from cacheworker.infrastructure.invalidators.graphql import GraphQLRemoteInvalidator
from cacheworker.keys import load_cache_keys
from cacheworker.settings import WorkerSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateReport:
    """Outcome of a cache update run."""

    failures: tuple[FailureRecord, ...] = ()

    @property
    def succeeded(self) -> bool:
        return not self.failures

    @property
    def failed_keys(self) -> list[str]:
        """All keys that could not be invalidated, in report order."""
        return [key for record in self.failures for key in record.keys]


async def run(scheduler: BatchScheduler, keys: Sequence[str]) -> UpdateReport:
    """Update the given keys and log the outcome.

    Args:
        scheduler: Scheduler used for the update.
        keys: Cache keys to update.

    Returns:
        Report of the update.
    """
    logger.info("Updating cache values of %d keys", len(keys))
    logger.debug("Keys: %s", list(keys))

    report = UpdateReport(failures=tuple(await scheduler.update(keys)))
    if report.succeeded:
        logger.info("Cache successfully updated")
    else:
        logger.warning(
            "Cache update was run but the following errors were found: %s",
            "; ".join(
                f"{', '.join(record.keys)}: {record.message}"
                for record in report.failures
            ),
        )
    return report


async def start(settings: WorkerSettings) -> UpdateReport:
    """Build the worker from settings and update all configured keys.

    Args:
        settings: Endpoint, credentials, key file and batching policy.

    Returns:
        Report of the update.
    """
    keys = load_cache_keys(settings.key_file)
    token_provider = ServiceTokenProvider(
        secret=settings.secret,
        service=settings.service,
    )
    async with GraphQLRemoteInvalidator(
        settings.endpoint, token_provider=token_provider
    ) as invalidator:
        scheduler = BatchScheduler(invalidator, settings.worker)
        return await run(scheduler, keys)


def main() -> int:
    """Program entry point.

    Returns:
        0 if every key was updated, 1 otherwise.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = WorkerSettings.from_env()
    report = asyncio.run(start(settings))
    return 0 if report.succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
