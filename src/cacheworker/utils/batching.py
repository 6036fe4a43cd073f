"""Helpers for cutting key lists into batches."""

from collections.abc import Iterable, Iterator, Sequence


def paginate(keys: Sequence[str], page_size: int) -> Iterator[tuple[str, ...]]:
    """Split keys into consecutive pages.

    Args:
        keys: The keys to split, in order.
        page_size: Maximum number of keys per page.

    Yields:
        Tuples of at most ``page_size`` keys. Only the last may be shorter.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    for start in range(0, len(keys), page_size):
        yield tuple(keys[start : start + page_size])


def split_in_half(
    keys: Sequence[str],
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Split a batch into two halves.

    The first half gets the extra key when the count is odd.
    """
    if len(keys) < 2:
        raise ValueError("Cannot split a batch of fewer than two keys")
    middle = (len(keys) + 1) // 2
    return tuple(keys[:middle]), tuple(keys[middle:])


def unique_keys(keys: Iterable[str]) -> list[str]:
    """Drop repeated keys, keeping the first occurrence of each."""
    return list(dict.fromkeys(keys))
