"""Core domain layer for cacheworker."""

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

__all__ = [
    # Entities
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
    # Interfaces
    "IRemoteInvalidator",
    "ITokenProvider",
    # Services
    "BatchScheduler",
]
