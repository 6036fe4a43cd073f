"""Failure value objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RemoteFailure:
    """Normalized outcome of an unsuccessful remote invalidation.

    Transport errors, rejected requests and GraphQL error responses all
    end up in this shape, so callers cannot (and need not) tell them
    apart.
    """

    message: str
    errors: tuple[str, ...] = ()

    @classmethod
    def from_messages(cls, messages: list[str]) -> "RemoteFailure":
        """Create a failure from one or more error messages.

        Args:
            messages: Error messages reported by the remote side.

        Returns:
            A RemoteFailure whose message joins all given messages.
        """
        if not messages:
            return cls(message="Unknown error")
        return cls(message="; ".join(messages), errors=tuple(messages))

    @classmethod
    def from_exception(cls, exc: BaseException) -> "RemoteFailure":
        """Create a failure from a raised exception."""
        detail = str(exc) or type(exc).__name__
        return cls(message=detail, errors=(detail,))

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class FailureRecord:
    """Keys that could not be invalidated, with the last error seen."""

    keys: tuple[str, ...]
    error: RemoteFailure

    @property
    def message(self) -> str:
        return self.error.message
