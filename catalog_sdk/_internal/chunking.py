"""Splitting of batch lookups into bounded-size requests."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split items into consecutive groups of at most ``size`` elements.

    Order is preserved and duplicates are kept, so concatenating the chunks
    gives back the original sequence.

    Args:
        items: The sequence to split.
        size: Maximum chunk length, at least 1.

    Returns:
        The chunks in input order. Empty input gives no chunks.

    Raises:
        ValueError: If size is smaller than 1.
    """
    if size < 1:
        raise ValueError(f"chunk size must be at least 1, got {size}")
    return [list(items[start : start + size]) for start in range(0, len(items), size)]
