"""Invalidation task entity."""

from dataclasses import dataclass


@dataclass
class InvalidationTask:
    """A batch of keys waiting to be sent to the remote cache.

    Tasks are created for every initial page and for both halves of a
    bisected batch. Only ``attempts`` changes over a task's lifetime.
    """

    keys: tuple[str, ...]
    attempts: int = 0

    def __post_init__(self) -> None:
        if not self.keys:
            raise ValueError("An invalidation task needs at least one key")

    @property
    def is_singleton(self) -> bool:
        """Whether the task can no longer be bisected."""
        return len(self.keys) == 1

    def __len__(self) -> int:
        return len(self.keys)
