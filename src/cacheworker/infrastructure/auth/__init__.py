"""Credential providers for the remote cache endpoint."""

from cacheworker.infrastructure.auth.service_token import ServiceTokenProvider

__all__ = ["ServiceTokenProvider"]
