"""Function helpers."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

__all__ = ["partial"]


def partial(func: Callable[..., Any], arg1: Any) -> Callable[..., Any]:
    """Return a function that calls ``func`` with ``arg1`` as its first argument."""
    return functools.partial(func, arg1)