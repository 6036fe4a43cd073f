"""Environment-driven settings for the cache worker program."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

from cacheworker.core.entities.worker_config import WorkerConfig
from cacheworker.core.exceptions import ConfigurationError

DEFAULT_KEY_FILE = "cache-keys.json"


@dataclass(frozen=True)
class WorkerSettings:
    """Settings needed to run a cache update against a live API.

    Environment variables:
        SERLO_ORG_HOST: GraphQL endpoint (required).
        SERVICE: Service name used as token issuer.
        SECRET: Shared secret for signing tokens.
        PAGINATION: Keys per request (default 100).
        MAX_RETRIES: Retries per failing key (default 3).
        RETRY_DELAY: Seconds between retries (default 1).
        CACHE_KEYS_FILE: JSON file with the keys (default cache-keys.json).
    """

    endpoint: str
    service: str | None = None
    secret: str | None = None
    key_file: Path = Path(DEFAULT_KEY_FILE)
    worker: WorkerConfig = field(default_factory=WorkerConfig)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "WorkerSettings":
        """Read settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            The parsed settings.

        Raises:
            ConfigurationError: If the endpoint is missing or a numeric
                setting is malformed.
        """
        env = os.environ if environ is None else environ

        endpoint = env.get("SERLO_ORG_HOST")
        if not endpoint:
            raise ConfigurationError("SERLO_ORG_HOST is not set")

        defaults = WorkerConfig()
        try:
            worker = WorkerConfig(
                page_size=_int_setting(env, "PAGINATION", defaults.page_size),
                max_retries=_int_setting(env, "MAX_RETRIES", defaults.max_retries),
                retry_delay=timedelta(
                    seconds=_float_setting(
                        env, "RETRY_DELAY", defaults.retry_delay.total_seconds()
                    )
                ),
            )
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        return cls(
            endpoint=endpoint,
            service=env.get("SERVICE") or None,
            secret=env.get("SECRET") or None,
            key_file=Path(env.get("CACHE_KEYS_FILE") or DEFAULT_KEY_FILE),
            worker=worker,
        )


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _float_setting(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
