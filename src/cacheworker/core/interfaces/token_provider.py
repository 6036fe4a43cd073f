"""Token provider interface."""

from typing import Protocol


class ITokenProvider(Protocol):
    """Contract for minting credentials for the remote cache endpoint."""

    def authorization_header(self) -> str | None:
        """Build the value of the Authorization header.

        Returns:
            The header value, or None if requests are sent unauthenticated.
        """
        ...
