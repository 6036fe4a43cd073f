"""GraphQL remote invalidator implementation."""

import logging
from collections.abc import Sequence
from typing import Any

import httpx
from graphql import parse, print_ast

from cacheworker.core.entities.failure import RemoteFailure
from cacheworker.core.exceptions import EmptyKeysError
from cacheworker.core.interfaces.token_provider import ITokenProvider

logger = logging.getLogger(__name__)

UPDATE_CACHE_OPERATION = "_updateCache"

UPDATE_CACHE_MUTATION = print_ast(
    parse(
        """
        mutation _updateCache($keys: [String!]!) {
            _updateCache(keys: $keys)
        }
        """
    )
)


class GraphQLRemoteInvalidator:
    """Invalidates keys through the ``_updateCache`` GraphQL mutation.

    Every outcome other than a response without ``errors`` is returned
    as a RemoteFailure: GraphQL errors, HTTP error statuses, transport
    errors and bodies that are not JSON.
    """

    def __init__(
        self,
        endpoint: str,
        token_provider: ITokenProvider | None = None,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the invalidator.

        Args:
            endpoint: URL of the GraphQL API.
            token_provider: Optional provider of the Authorization header.
            timeout: Request timeout in seconds. Ignored if ``client``
                is given.
            client: Optional preconfigured HTTP client. The invalidator
                only closes clients it created itself.
        """
        self._endpoint = endpoint
        self._token_provider = token_provider
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def build_request_body(self, keys: Sequence[str]) -> dict[str, Any]:
        """Build the JSON body of the mutation request.

        Args:
            keys: Keys to invalidate.

        Returns:
            The GraphQL request body.
        """
        return {
            "query": UPDATE_CACHE_MUTATION,
            "operationName": UPDATE_CACHE_OPERATION,
            "variables": {"keys": list(keys)},
        }

    async def invalidate(self, keys: Sequence[str]) -> RemoteFailure | None:
        """Invalidate a batch of cache keys.

        Args:
            keys: Non-empty, ordered batch of cache keys.

        Returns:
            None on success, a RemoteFailure otherwise.

        Raises:
            EmptyKeysError: If ``keys`` is empty.
        """
        if not keys:
            raise EmptyKeysError()

        try:
            response = await self._client.post(
                self._endpoint,
                json=self.build_request_body(keys),
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", self._endpoint, e)
            return RemoteFailure.from_exception(e)

        try:
            body = response.json()
        except ValueError as e:
            # JSONDecodeError or a body that does not decode as text
            logger.warning(
                "Undecodable response from %s (HTTP %d)",
                self._endpoint,
                response.status_code,
            )
            return RemoteFailure(
                message=f"Invalid JSON response (HTTP {response.status_code}): {e}"
            )

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            return RemoteFailure.from_messages(_error_messages(errors))

        if response.is_error:
            return RemoteFailure(
                message=f"HTTP {response.status_code} {response.reason_phrase}"
            )

        if not isinstance(body, dict):
            return RemoteFailure(message="Unexpected response body")

        return None

    def _headers(self) -> dict[str, str]:
        if self._token_provider is None:
            return {}
        authorization = self._token_provider.authorization_header()
        return {"Authorization": authorization} if authorization else {}

    async def close(self) -> None:
        """Close the HTTP client if owned by this invalidator."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "GraphQLRemoteInvalidator":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()


def _error_messages(errors: Any) -> list[str]:
    """Extract messages from a GraphQL ``errors`` entry."""
    if not isinstance(errors, list):
        return [str(errors)]
    return [
        str(error.get("message", error)) if isinstance(error, dict) else str(error)
        for error in errors
    ]
