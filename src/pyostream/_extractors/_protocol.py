from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto


class State(Enum):
    """Position of a source cursor."""

    UNSTARTED = auto()
    """No successful `advance()` yet."""
    ACTIVE = auto()
    """Positioned on an element."""
    EXHAUSTED = auto()
    """`advance()` reported the end; it will keep doing so."""


class Extractor[T](ABC):
    """The pull protocol implemented by every stage of a `Stream`.

    - `advance()` tries to move the cursor to the next element and tells whether one exists.
    - `get()` returns the element at the current cursor position, without moving it.

    `get()` is only meaningful right after an `advance()` that returned `True`.

    It may be called several times for the same position.

    Every adapter wraps one or two upstream extractors and is an extractor itself, so adapters compose freely.
    """

    __slots__ = ()

    @abstractmethod
    def advance(self) -> bool:
        """Move to the next element, returning whether there is one."""
        ...

    @abstractmethod
    def get(self) -> T:
        """Return the current element."""
        ...


class Adapter[T, R](Extractor[R]):
    """An extractor wrapping exactly one upstream extractor."""

    __slots__ = ("source",)

    def __init__(self, source: Extractor[T]) -> None:
        self.source = source

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.source!r})"
