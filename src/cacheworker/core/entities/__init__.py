"""Domain entities for cacheworker."""

from cacheworker.core.entities.failure import FailureRecord, RemoteFailure
from cacheworker.core.entities.task import InvalidationTask
from cacheworker.core.entities.worker_config import WorkerConfig

__all__ = [
    "FailureRecord",
    "InvalidationTask",
    "RemoteFailure",
    "WorkerConfig",
]
