"""Infrastructure layer implementations for cacheworker."""

from cacheworker.infrastructure.auth import ServiceTokenProvider
from cacheworker.infrastructure.invalidators import GraphQLRemoteInvalidator

__all__ = [
    "GraphQLRemoteInvalidator",
    "ServiceTokenProvider",
]
