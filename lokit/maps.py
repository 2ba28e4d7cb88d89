"""Helpers for reading, filtering and transforming mappings."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any, NamedTuple

__all__ = [
    "Entry",
    "keys",
    "uniq_keys",
    "has_key",
    "values",
    "uniq_values",
    "value_or",
    "pick_by",
    "pick_by_keys",
    "pick_by_values",
    "omit_by",
    "omit_by_keys",
    "omit_by_values",
    "entries",
    "to_pairs",
    "from_entries",
    "from_pairs",
    "invert",
    "assign",
    "chunk_entries",
    "map_keys",
    "map_values",
    "map_entries",
    "map_to_slice",
]


class Entry(NamedTuple):
    """A key/value pair."""

    key: Any
    value: Any


def _same_map(mapping: Any, items: Iterable[tuple[Any, Any]]) -> Any:
    """Build a result of the mapping's own dict type where possible."""
    pairs = list(items)
    if isinstance(mapping, dict) and type(mapping) is not dict:
        try:
            return type(mapping)(pairs)
        except TypeError:
            pass
    return dict(pairs)


def keys(*args: Mapping[Any, Any]) -> list[Any]:
    """All keys of all mappings, duplicates included."""
    return [key for mapping in args for key in mapping]


def uniq_keys(*args: Mapping[Any, Any]) -> list[Any]:
    """Distinct keys of all mappings, in order of first appearance."""
    return list(dict.fromkeys(keys(*args)))


def has_key(mapping: Mapping[Any, Any], key: Any) -> bool:
    """Whether ``key`` is present in ``mapping``."""
    return key in mapping


def values(*args: Mapping[Any, Any]) -> list[Any]:
    """All values of all mappings, duplicates included."""
    return [value for mapping in args for value in mapping.values()]


def uniq_values(*args: Mapping[Any, Hashable]) -> list[Any]:
    """Distinct values of all mappings, in order of first appearance."""
    return list(dict.fromkeys(values(*args)))


def value_or(mapping: Mapping[Any, Any], key: Any, fallback: Any) -> Any:
    """Value at ``key``, or ``fallback`` when the key is absent."""
    return mapping[key] if key in mapping else fallback


def pick_by(mapping: Mapping[Any, Any], predicate: Callable[[Any, Any], bool]) -> Any:
    """Entries for which ``predicate(key, value)`` holds."""
    return _same_map(mapping, ((k, v) for k, v in mapping.items() if predicate(k, v)))


def pick_by_keys(mapping: Mapping[Any, Any], keys: Iterable[Any]) -> Any:
    """Entries whose key is among ``keys``."""
    return _same_map(mapping, ((k, mapping[k]) for k in keys if k in mapping))


def pick_by_values(mapping: Mapping[Any, Any], values: Iterable[Any]) -> Any:
    """Entries whose value is among ``values``."""
    wanted = list(values)
    return _same_map(mapping, ((k, v) for k, v in mapping.items() if v in wanted))


def omit_by(mapping: Mapping[Any, Any], predicate: Callable[[Any, Any], bool]) -> Any:
    """Entries for which ``predicate(key, value)`` does not hold."""
    return _same_map(
        mapping, ((k, v) for k, v in mapping.items() if not predicate(k, v))
    )


def omit_by_keys(mapping: Mapping[Any, Any], keys: Iterable[Any]) -> Any:
    """Entries whose key is not among ``keys``."""
    unwanted = set(keys)
    return _same_map(mapping, ((k, v) for k, v in mapping.items() if k not in unwanted))


def omit_by_values(mapping: Mapping[Any, Any], values: Iterable[Any]) -> Any:
    """Entries whose value is not among ``values``."""
    unwanted = list(values)
    return _same_map(mapping, ((k, v) for k, v in mapping.items() if v not in unwanted))


def entries(mapping: Mapping[Any, Any]) -> list[Entry]:
    """The mapping's key/value pairs."""
    return [Entry(k, v) for k, v in mapping.items()]


def to_pairs(mapping: Mapping[Any, Any]) -> list[Entry]:
    """Alias of :func:`entries`."""
    return entries(mapping)


def from_entries(entries: Iterable[tuple[Any, Any]]) -> dict[Any, Any]:
    """Build a dict from key/value pairs; later pairs win."""
    return {key: value for key, value in entries}


def from_pairs(entries: Iterable[tuple[Any, Any]]) -> dict[Any, Any]:
    """Alias of :func:`from_entries`."""
    return from_entries(entries)


def invert(mapping: Mapping[Any, Hashable]) -> dict[Any, Any]:
    """Swap keys and values; with duplicate values the later key wins."""
    return {value: key for key, value in mapping.items()}


def assign(*args: Mapping[Any, Any]) -> Any:
    """Merge mappings from left to right into a new mapping."""
    merged: dict[Any, Any] = {}
    for mapping in args:
        merged.update(mapping)
    return _same_map(args[0], merged.items()) if args else merged


def chunk_entries(mapping: Mapping[Any, Any], size: int) -> list[dict[Any, Any]]:
    """Split a mapping into dicts of at most ``size`` entries.

    Raises ValueError when ``size`` is not positive.
    """
    if size <= 0:
        raise ValueError("The chunk size must be greater than 0")
    items = list(mapping.items())
    return [dict(items[start:start + size]) for start in range(0, len(items), size)]


def map_keys(
    mapping: Mapping[Any, Any], iteratee: Callable[[Any, Any], Hashable]
) -> dict[Any, Any]:
    """New dict keyed by ``iteratee(value, key)``."""
    return {iteratee(v, k): v for k, v in mapping.items()}


def map_values(
    mapping: Mapping[Any, Any], iteratee: Callable[[Any, Any], Any]
) -> dict[Any, Any]:
    """New dict with values replaced by ``iteratee(value, key)``."""
    return {k: iteratee(v, k) for k, v in mapping.items()}


def map_entries(
    mapping: Mapping[Any, Any], iteratee: Callable[[Any, Any], tuple[Any, Any]]
) -> dict[Any, Any]:
    """New dict of the pairs returned by ``iteratee(key, value)``."""
    return dict(iteratee(k, v) for k, v in mapping.items())


def map_to_slice(
    mapping: Mapping[Any, Any], iteratee: Callable[[Any, Any], Any]
) -> list[Any]:
    """List of ``iteratee(key, value)`` for each entry."""
    return [iteratee(k, v) for k, v in mapping.items()]