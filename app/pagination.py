import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def limit_offset(items: Sequence[T] | None, limit: int, offset: int) -> list[T]:
    """
    Returns the window of `items` starting at `offset` holding at most `limit` elements.

    The start index is clamped to the last element, so an offset pointing at the
    last element always yields exactly that element.
    """
    if not items:
        return []

    length = len(items)
    if offset > length - 1:
        return []

    start = min(length - 1, offset)
    end = min(length, offset + limit)
    return list(items[start:end])


def parse_offset(raw: str | None) -> int:
    """
    Coerces a raw `offset` query value to a non-negative int (0 when missing or non-numeric).
    Any finite number is accepted and truncated, so "2.5" -> 2 and "1e1" -> 10.
    """
    if raw is None:
        return 0
    try:
        value = float(raw)
    except ValueError:
        return 0
    if not math.isfinite(value):
        return 0
    return max(int(value), 0)
