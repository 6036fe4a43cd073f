"""Domain services for cacheworker."""

from cacheworker.core.services.batch_scheduler import BatchScheduler

__all__ = [
    "BatchScheduler",
]
