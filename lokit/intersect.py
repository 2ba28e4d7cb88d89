"""Membership, set-like and exclusion helpers for sequences."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "contains",
    "contains_by",
    "every",
    "every_by",
    "some",
    "some_by",
    "none",
    "none_by",
    "intersect",
    "difference",
    "symmetric_difference",
    "union",
    "without",
    "without_by",
    "without_empty",
    "without_nth",
]

_SCALARS = (bool, int, float, complex, str, bytes)


def _same_kind(collection: Any, items: Iterable[Any]) -> Any:
    """Build a result of the collection's own list or tuple type, else a list."""
    if isinstance(collection, (list, tuple)):
        return type(collection)(items)
    return list(items)


def contains(collection: Iterable[T], element: T) -> bool:
    """Whether ``element`` is present in ``collection``."""
    return any(item == element for item in collection)


def contains_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Whether ``predicate`` holds for some item."""
    return any(predicate(item) for item in collection)


def every(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Whether every item of ``subset`` is in ``collection`` (True if empty)."""
    return all(contains(collection, item) for item in subset)


def every_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Whether ``predicate`` holds for every item (True if empty)."""
    return all(predicate(item) for item in collection)


def some(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Whether at least one item of ``subset`` is in ``collection``."""
    return any(contains(collection, item) for item in subset)


def some_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Whether ``predicate`` holds for at least one item (False if empty)."""
    return any(predicate(item) for item in collection)


def none(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Whether no item of ``subset`` is in ``collection`` (True if empty)."""
    return not some(collection, subset)


def none_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Whether ``predicate`` holds for no item (True if empty)."""
    return not some_by(collection, predicate)


def intersect(list1: Sequence[T], list2: Sequence[T]) -> Any:
    """Items of ``list2`` that also occur in ``list1``, in ``list2`` order."""
    seen = set(list1)
    return _same_kind(list1, (item for item in list2 if item in seen))


def difference(list1: Sequence[T], list2: Sequence[T]) -> tuple[Any, Any]:
    """Items of ``list1`` absent from ``list2``, and items of ``list2`` absent from ``list1``."""
    seen_left = set(list1)
    seen_right = set(list2)
    left = _same_kind(list1, (item for item in list1 if item not in seen_right))
    right = _same_kind(list1, (item for item in list2 if item not in seen_left))
    return left, right


def symmetric_difference(list1: Sequence[T], list2: Sequence[T]) -> list[T]:
    """Items present in exactly one of the two collections."""
    left, right = difference(list(list1), list(list2))
    return left + right


def union(*args: Sequence[T]) -> Any:
    """Distinct items of all collections, in order of first appearance."""
    seen: set[Hashable] = set()
    result = []
    for collection in args:
        for item in collection:
            if item not in seen:
                seen.add(item)
                result.append(item)
    return _same_kind(args[0], result) if args else result


def without(collection: Sequence[T], *args: T) -> Any:
    """The collection with every item equal to one of ``args`` removed."""
    excluded = set(args)
    return _same_kind(collection, (item for item in collection if item not in excluded))


def without_by(
    collection: Iterable[T], iteratee: Callable[[T], Hashable], *args: Hashable
) -> list[T]:
    """Items whose key, given by ``iteratee``, is not among ``args``."""
    excluded = set(args)
    return [item for item in collection if iteratee(item) not in excluded]


def _is_empty_value(item: Any) -> bool:
    return item is None or (isinstance(item, _SCALARS) and not item)


def without_empty(collection: Sequence[T]) -> Any:
    """The collection without None, zero, False and empty strings."""
    return _same_kind(
        collection, (item for item in collection if not _is_empty_value(item))
    )


def without_nth(collection: Sequence[T], *args: int) -> Any:
    """The collection without the items at the given indexes.

    Negative or out-of-range indexes are ignored.
    """
    removed = {n for n in args if 0 <= n < len(collection)}
    return _same_kind(
        collection, (item for i, item in enumerate(collection) if i not in removed)
    )