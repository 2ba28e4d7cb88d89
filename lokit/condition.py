"""Expression-style conditionals: ternaries, if/else chains and switches."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")

__all__ = [
    "IfElse",
    "SwitchCase",
    "ternary",
    "ternary_f",
    "if_",
    "if_f",
    "switch",
]


def ternary(condition: bool, if_output: T, else_output: T) -> T:
    """``if_output`` when ``condition`` holds, else ``else_output``."""
    return if_output if condition else else_output


def ternary_f(
    condition: bool, if_func: Callable[[], T], else_func: Callable[[], T]
) -> T:
    """Call only the branch selected by ``condition`` and return its result."""
    return if_func() if condition else else_func()


@dataclass
class IfElse(Generic[T]):
    """An if/else-if/else chain; the first satisfied branch wins."""

    result: Optional[T] = None
    done: bool = False

    def else_if(self, condition: bool, result: T) -> IfElse[T]:
        """Take ``result`` if no earlier branch matched and ``condition`` holds."""
        if not self.done and condition:
            self.result, self.done = result, True
        return self

    def else_if_f(self, condition: bool, result_func: Callable[[], T]) -> IfElse[T]:
        """Like :meth:`else_if`, computing the result only when taken."""
        if not self.done and condition:
            self.result, self.done = result_func(), True
        return self

    def else_(self, result: T) -> T:
        """Finish the chain, falling back to ``result``."""
        return self.result if self.done else result  # type: ignore[return-value]

    def else_f(self, result_func: Callable[[], T]) -> T:
        """Finish the chain, calling ``result_func`` only if nothing matched."""
        return self.result if self.done else result_func()  # type: ignore[return-value]


def if_(condition: bool, result: T) -> IfElse[T]:
    """Start an if/else chain."""
    return IfElse(result, True) if condition else IfElse()


def if_f(condition: bool, result_func: Callable[[], T]) -> IfElse[T]:
    """Start an if/else chain whose result is computed only when taken."""
    return IfElse(result_func(), True) if condition else IfElse()


@dataclass
class SwitchCase(Generic[T, R]):
    """A switch expression; the first case equal to the predicate wins."""

    predicate: Any
    result: Optional[R] = None
    done: bool = False

    def case(self, value: Any, result: R) -> SwitchCase[T, R]:
        """Take ``result`` if no earlier case matched and ``value`` equals the predicate."""
        if not self.done and self.predicate == value:
            self.result, self.done = result, True
        return self

    def case_f(self, value: Any, callback: Callable[[], R]) -> SwitchCase[T, R]:
        """Like :meth:`case`, computing the result only when taken."""
        if not self.done and self.predicate == value:
            self.result, self.done = callback(), True
        return self

    def default(self, result: R) -> R:
        """Finish the switch, falling back to ``result``."""
        if not self.done:
            self.result = result
        return self.result  # type: ignore[return-value]

    def default_f(self, callback: Callable[[], R]) -> R:
        """Finish the switch, calling ``callback`` only if no case matched."""
        if not self.done:
            self.result = callback()
        return self.result  # type: ignore[return-value]


def switch(predicate: Any) -> SwitchCase[Any, Any]:
    """Start a switch on ``predicate``."""
    return SwitchCase(predicate)