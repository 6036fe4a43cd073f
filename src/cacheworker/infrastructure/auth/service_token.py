"""Service token provider backed by PyJWT."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import jwt


class ServiceTokenProvider:
    """Mints short-lived service tokens for the cache endpoint.

    The token is an HS256 JWT signed with a shared secret, issued by the
    calling service, and sent as ``Serlo Service=<token>``. Tokens are
    cached and minted again shortly before they expire.
    """

    def __init__(
        self,
        secret: str | None,
        service: str | None = None,
        audience: str = "api.serlo.org",
        lifetime: timedelta = timedelta(hours=2),
        scheme: str = "Serlo",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the token provider.

        Args:
            secret: Shared secret. Without a secret no header is produced.
            service: Name of the calling service, used as issuer.
            audience: Expected audience of the token.
            lifetime: How long a minted token stays valid.
            scheme: Authorization scheme placed before ``Service=``.
            clock: Optional callable returning the current UTC time.
        """
        self._secret = secret
        self._service = service
        self._audience = audience
        self._lifetime = lifetime
        self._scheme = scheme
        self._clock = clock or (lambda: datetime.now(timezone.utc))

        self._token: str | None = None
        self._expires_at: datetime | None = None

    @property
    def refresh_margin(self) -> timedelta:
        """Time before expiry at which a new token is minted."""
        return min(timedelta(minutes=1), self._lifetime / 2)

    def authorization_header(self) -> str | None:
        """Build the Authorization header value.

        Returns:
            ``"<scheme> Service=<token>"``, or None without a secret.
        """
        if self._secret is None:
            return None
        return f"{self._scheme} Service={self.token()}"

    def token(self) -> str:
        """Return a valid token, minting a new one if needed."""
        now = self._clock()
        if (
            self._token is None
            or self._expires_at is None
            or now >= self._expires_at - self.refresh_margin
        ):
            self._token, self._expires_at = self._mint(now)
        return self._token

    def _mint(self, now: datetime) -> tuple[str, datetime]:
        if self._secret is None:
            raise RuntimeError("Cannot mint a service token without a secret")

        expires_at = now + self._lifetime
        claims: dict[str, object] = {
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "aud": self._audience,
        }
        if self._service:
            claims["iss"] = self._service

        token = jwt.encode(claims, self._secret, algorithm="HS256")
        return token, expires_at
