"""Core interfaces (Protocol classes) for cacheworker."""

from cacheworker.core.interfaces.remote_invalidator import IRemoteInvalidator
from cacheworker.core.interfaces.token_provider import ITokenProvider

__all__ = [
    "IRemoteInvalidator",
    "ITokenProvider",
]
