"""Remote invalidator interface."""

from collections.abc import Sequence
from typing import Protocol

from cacheworker.core.entities.failure import RemoteFailure


class IRemoteInvalidator(Protocol):
    """Contract for sending one batch of keys to the remote cache.

    Implementations must never raise for remote-side problems. Transport
    errors and error responses are returned as a RemoteFailure so the
    scheduler can treat every unsuccessful outcome the same way.
    """

    async def invalidate(self, keys: Sequence[str]) -> RemoteFailure | None:
        """Invalidate a batch of cache keys.

        Args:
            keys: Non-empty, ordered batch of cache keys.

        Returns:
            None on success, a RemoteFailure otherwise.

        Raises:
            EmptyKeysError: If ``keys`` is empty.
        """
        ...
