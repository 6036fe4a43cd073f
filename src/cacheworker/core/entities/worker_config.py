"""Worker configuration entity."""

from dataclasses import dataclass, field
from datetime import timedelta


@dataclass(frozen=True)
class WorkerConfig:
    """Batching and retry policy for a BatchScheduler.

    Attributes:
        page_size: Number of keys per initial batch.
        max_retries: Retries allowed for a single key once its batch
            cannot be bisected any further.
        retry_delay: Pause before each retry of a single key. Set to
            ``timedelta(0)`` in tests.
    """

    page_size: int = 100
    max_retries: int = 3
    retry_delay: timedelta = field(default_factory=lambda: timedelta(seconds=1))

    def __post_init__(self) -> None:
        """Validate the policy values."""
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.max_retries < 0:
            raise ValueError(
                f"max_retries must not be negative, got {self.max_retries}"
            )
        if self.retry_delay < timedelta(0):
            raise ValueError(
                f"retry_delay must not be negative, got {self.retry_delay}"
            )
