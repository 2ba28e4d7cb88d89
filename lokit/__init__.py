"""Helpers for collections, mappings, conditions, errors, channels and concurrency."""

__version__ = "0.1.0"

__all__ = [
    "channel",
    "concurrency",
    "condition",
    "errors",
    "find",
    "func",
    "intersect",
    "maps",
]