"""Exceptions raised by cacheworker."""


class CacheWorkerError(Exception):
    """Base class for all cacheworker errors."""

    pass


class EmptyKeysError(CacheWorkerError, ValueError):
    """Raised when an invalidation is requested for zero keys.

    Always raised before any request reaches the remote side.
    """

    def __init__(self, message: str = "At least one cache key is required") -> None:
        super().__init__(message)


class StackUnderflowError(CacheWorkerError):
    """Raised when popping an empty work queue."""

    pass


class KeyFileError(CacheWorkerError):
    """Raised when the static cache key list cannot be loaded."""

    pass


class ConfigurationError(CacheWorkerError):
    """Raised when a required setting is missing or malformed."""

    pass
