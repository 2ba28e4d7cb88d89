"""Searching helpers for sequences and mappings."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from datetime import datetime
from typing import Any, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

RandomInt = Callable[[int], int]

__all__ = [
    "index_of",
    "last_index_of",
    "find",
    "find_index_of",
    "find_last_index_of",
    "find_or_else",
    "find_key",
    "find_key_by",
    "find_uniques",
    "find_uniques_by",
    "find_duplicates",
    "find_duplicates_by",
    "min_of",
    "min_index",
    "min_by",
    "min_index_by",
    "earliest",
    "earliest_by",
    "max_of",
    "max_index",
    "max_by",
    "max_index_by",
    "latest",
    "latest_by",
    "first",
    "first_or_empty",
    "first_or",
    "last",
    "last_or_empty",
    "last_or",
    "nth",
    "sample",
    "sample_by",
    "samples",
    "samples_by",
]


def _same_kind(collection: Sequence[Any], items: Iterable[Any]) -> Any:
    """Build a result of the collection's own list or tuple type, else a list."""
    if isinstance(collection, (list, tuple)):
        return type(collection)(items)
    return list(items)


def _reverse_enumerate(collection: Sequence[T]) -> Iterable[tuple[int, T]]:
    return zip(range(len(collection) - 1, -1, -1), reversed(collection))


def index_of(collection: Sequence[T], element: T) -> int:
    """Index of the first occurrence of ``element``, or -1."""
    return next((i for i, item in enumerate(collection) if item == element), -1)


def last_index_of(collection: Sequence[T], element: T) -> int:
    """Index of the last occurrence of ``element``, or -1."""
    return next(
        (i for i, item in _reverse_enumerate(collection) if item == element), -1
    )


def find(
    collection: Iterable[T], predicate: Callable[[T], bool]
) -> tuple[Optional[T], bool]:
    """First item matching ``predicate`` and whether one was found."""
    for item in collection:
        if predicate(item):
            return item, True
    return None, False


def find_index_of(
    collection: Sequence[T], predicate: Callable[[T], bool]
) -> tuple[Optional[T], int, bool]:
    """First matching item, its index and whether it was found (index -1 if not)."""
    for i, item in enumerate(collection):
        if predicate(item):
            return item, i, True
    return None, -1, False


def find_last_index_of(
    collection: Sequence[T], predicate: Callable[[T], bool]
) -> tuple[Optional[T], int, bool]:
    """Last matching item, its index and whether it was found (index -1 if not)."""
    for i, item in _reverse_enumerate(collection):
        if predicate(item):
            return item, i, True
    return None, -1, False


def find_or_else(
    collection: Iterable[T], fallback: T, predicate: Callable[[T], bool]
) -> T:
    """First item matching ``predicate``, or ``fallback``."""
    return next((item for item in collection if predicate(item)), fallback)


def find_key(mapping: Mapping[K, V], value: V) -> tuple[Optional[K], bool]:
    """Key of the first entry whose value equals ``value``."""
    for key, val in mapping.items():
        if val == value:
            return key, True
    return None, False


def find_key_by(
    mapping: Mapping[K, V], predicate: Callable[[K, V], bool]
) -> tuple[Optional[K], bool]:
    """Key of the first entry for which ``predicate(key, value)`` holds."""
    for key, val in mapping.items():
        if predicate(key, val):
            return key, True
    return None, False


def find_uniques(collection: Sequence[T]) -> Any:
    """Items that occur exactly once, in their original order."""
    return find_uniques_by(collection, lambda item: item)


def find_uniques_by(
    collection: Sequence[T], iteratee: Callable[[T], Hashable]
) -> Any:
    """Items whose key occurs exactly once, in their original order."""
    keys = [iteratee(item) for item in collection]
    counts = Counter(keys)
    return _same_kind(
        collection,
        (item for item, key in zip(collection, keys) if counts[key] == 1),
    )


def find_duplicates(collection: Sequence[T]) -> Any:
    """First occurrence of every item that occurs more than once."""
    return find_duplicates_by(collection, lambda item: item)


def find_duplicates_by(
    collection: Sequence[T], iteratee: Callable[[T], Hashable]
) -> Any:
    """First occurrence of every item whose key occurs more than once."""
    keys = [iteratee(item) for item in collection]
    counts = Counter(keys)
    emitted: set[Hashable] = set()
    result = []
    for item, key in zip(collection, keys):
        if counts[key] > 1 and key not in emitted:
            emitted.add(key)
            result.append(item)
    return _same_kind(collection, result)


def _pick_index(
    collection: Sequence[T], better: Callable[[T, T], bool]
) -> tuple[Optional[T], int]:
    if not collection:
        return None, -1
    best, best_index = collection[0], 0
    for i, item in enumerate(collection):
        if i and better(item, best):
            best, best_index = item, i
    return best, best_index


def min_of(collection: Sequence[T]) -> Optional[T]:
    """Smallest item, or None when empty."""
    return min_index(collection)[0]


def min_index(collection: Sequence[T]) -> tuple[Optional[T], int]:
    """Smallest item and its first index, or (None, -1) when empty."""
    return _pick_index(collection, lambda a, b: a < b)


def min_by(collection: Sequence[T], comparison: Callable[[T, T], bool]) -> Optional[T]:
    """Smallest item by ``comparison(item, current_min)``, or None when empty."""
    return min_index_by(collection, comparison)[0]


def min_index_by(
    collection: Sequence[T], comparison: Callable[[T, T], bool]
) -> tuple[Optional[T], int]:
    """Smallest item by ``comparison`` and its index, or (None, -1)."""
    return _pick_index(collection, comparison)


def max_of(collection: Sequence[T]) -> Optional[T]:
    """Greatest item, or None when empty."""
    return max_index(collection)[0]


def max_index(collection: Sequence[T]) -> tuple[Optional[T], int]:
    """Greatest item and its first index, or (None, -1) when empty."""
    return _pick_index(collection, lambda a, b: a > b)


def max_by(collection: Sequence[T], comparison: Callable[[T, T], bool]) -> Optional[T]:
    """Greatest item by ``comparison(item, current_max)``, or None when empty."""
    return max_index_by(collection, comparison)[0]


def max_index_by(
    collection: Sequence[T], comparison: Callable[[T, T], bool]
) -> tuple[Optional[T], int]:
    """Greatest item by ``comparison`` and its index, or (None, -1)."""
    return _pick_index(collection, comparison)


def earliest(*args: datetime) -> Optional[datetime]:
    """Earliest of the given datetimes, or None when none are given."""
    return min_of(args)


def latest(*args: datetime) -> Optional[datetime]:
    """Latest of the given datetimes, or None when none are given."""
    return max_of(args)


def _pick_by_time(
    collection: Sequence[T],
    iteratee: Callable[[T], datetime],
    better: Callable[[datetime, datetime], bool],
) -> Optional[T]:
    if not collection:
        return None
    best = collection[0]
    best_time = iteratee(best)
    for item in collection[1:]:
        item_time = iteratee(item)
        if better(item_time, best_time):
            best, best_time = item, item_time
    return best


def earliest_by(
    collection: Sequence[T], iteratee: Callable[[T], datetime]
) -> Optional[T]:
    """Item with the earliest time given by ``iteratee``, or None when empty."""
    return _pick_by_time(collection, iteratee, lambda a, b: a < b)


def latest_by(
    collection: Sequence[T], iteratee: Callable[[T], datetime]
) -> Optional[T]:
    """Item with the latest time given by ``iteratee``, or None when empty."""
    return _pick_by_time(collection, iteratee, lambda a, b: a > b)


def first(collection: Sequence[T]) -> tuple[Optional[T], bool]:
    """First item and whether the collection was non-empty."""
    if not collection:
        return None, False
    return collection[0], True


def first_or_empty(collection: Sequence[T]) -> Optional[T]:
    """First item, or None when empty."""
    return first(collection)[0]


def first_or(collection: Sequence[T], fallback: T) -> T:
    """First item, or ``fallback`` when empty."""
    item, ok = first(collection)
    return item if ok else fallback  # type: ignore[return-value]


def last(collection: Sequence[T]) -> tuple[Optional[T], bool]:
    """Last item and whether the collection was non-empty."""
    if not collection:
        return None, False
    return collection[-1], True


def last_or_empty(collection: Sequence[T]) -> Optional[T]:
    """Last item, or None when empty."""
    return last(collection)[0]


def last_or(collection: Sequence[T], fallback: T) -> T:
    """Last item, or ``fallback`` when empty."""
    item, ok = last(collection)
    return item if ok else fallback  # type: ignore[return-value]


def nth(collection: Sequence[T], n: int) -> T:
    """Item at index ``n``; negative ``n`` counts from the end.

    Raises IndexError when ``n`` is out of bounds.
    """
    n = int(n)
    length = len(collection)
    if n >= length or -n > length:
        raise IndexError(f"nth: {n} out of slice bounds")
    return collection[n]


def sample(collection: Sequence[T]) -> Optional[T]:
    """Random item, or None when empty."""
    return sample_by(collection, random.randrange)


def sample_by(collection: Sequence[T], random_int: RandomInt) -> Optional[T]:
    """Random item chosen with ``random_int(n)`` returning an index in [0, n)."""
    if not collection:
        return None
    return collection[random_int(len(collection))]


def samples(collection: Sequence[T], count: int) -> Any:
    """Up to ``count`` random items, each position picked at most once."""
    return samples_by(collection, count, random.randrange)


def samples_by(collection: Sequence[T], count: int, random_int: RandomInt) -> Any:
    """Up to ``count`` random distinct positions, picked with ``random_int``."""
    pool = list(collection)
    results = []
    for remaining in range(len(pool), max(len(pool) - count, 0), -1):
        index = random_int(remaining)
        results.append(pool[index])
        pool[index] = pool[remaining - 1]
        pool.pop()
    return _same_kind(collection, results)