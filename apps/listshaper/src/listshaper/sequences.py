"""Small sequence helpers used by the shaping layer."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def categorize(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Partition items by key.

    Buckets appear in first-seen order and keep the source order of their
    members.
    """
    buckets: dict[K, list[T]] = {}
    for item in items:
        buckets.setdefault(key(item), []).append(item)
    return buckets


def remove_object(items: list[Any], obj: Any) -> int | None:
    """Remove the last element equal to obj and return its former index.

    Elements of a different type than obj are never considered equal, so
    ``1`` does not match ``True`` or ``1.0``.
    """
    found: int | None = None
    for index, candidate in enumerate(items):
        if type(candidate) is type(obj) and candidate == obj:
            found = index
    if found is not None:
        del items[found]
    return found
