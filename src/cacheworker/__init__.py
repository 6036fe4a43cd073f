"""cacheworker - Batch invalidation of remote GraphQL cache entries.

Sends cache keys to a GraphQL ``_updateCache`` mutation in pages. A page
that fails is bisected until the failing keys are isolated, and single
failing keys are retried a bounded number of times. Keys that still fail
are reported, never raised.

Example:
    from datetime import timedelta

    from cacheworker import (
        BatchScheduler,
        GraphQLRemoteInvalidator,
        ServiceTokenProvider,
        WorkerConfig,
    )

    token_provider = ServiceTokenProvider(secret="...", service="cache-worker")
    async with GraphQLRemoteInvalidator(
        "https://api.serlo.org/graphql",
        token_provider=token_provider,
    ) as invalidator:
        scheduler = BatchScheduler(
            invalidator,
            WorkerConfig(page_size=100, max_retries=3),
        )
        failures = await scheduler.update(["de.serlo.org/api/uuid/1"])

    for failure in failures:
        print(failure.keys, failure.message)

Running against the environment:
    SERLO_ORG_HOST=https://api.serlo.org/graphql SECRET=... \\
        python -m cacheworker
"""

from cacheworker.core.entities import (
    FailureRecord,
    InvalidationTask,
    RemoteFailure,
    WorkerConfig,
)
from cacheworker.core.exceptions import (
    CacheWorkerError,
    ConfigurationError,
    EmptyKeysError,
    KeyFileError,
    StackUnderflowError,
)
from cacheworker.core.interfaces import IRemoteInvalidator, ITokenProvider
from cacheworker.core.services import BatchScheduler
from cacheworker.infrastructure import (
    GraphQLRemoteInvalidator,
    ServiceTokenProvider,
)
from cacheworker.keys import load_cache_keys
from cacheworker.runner import UpdateReport, run, start
from cacheworker.settings import WorkerSettings

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "FailureRecord",
    "InvalidationTask",
    "RemoteFailure",
    "WorkerConfig",
    # Exceptions
    "CacheWorkerError",
    "ConfigurationError",
    "EmptyKeysError",
    "KeyFileError",
    "StackUnderflowError",
    # Core interfaces
    "IRemoteInvalidator",
    "ITokenProvider",
    # Core services
    "BatchScheduler",
    # Infrastructure implementations
    "GraphQLRemoteInvalidator",
    "ServiceTokenProvider",
    # Program
    "WorkerSettings",
    "UpdateReport",
    "load_cache_keys",
    "run",
    "start",
]
