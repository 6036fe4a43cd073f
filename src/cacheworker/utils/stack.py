"""LIFO stack used as the scheduler's work queue."""

from typing import Generic, TypeVar

from cacheworker.core.exceptions import StackUnderflowError

T = TypeVar("T")


class Stack(Generic[T]):
    """Minimal last-in, first-out container."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the most recently pushed item.

        Raises:
            StackUnderflowError: If the stack is empty.
        """
        if self.is_empty():
            raise StackUnderflowError("Stack is empty")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items
