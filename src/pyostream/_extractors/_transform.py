from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import NamedTuple

from .._core import ExtractorStateError, get_config
from ._protocol import Adapter, Extractor
from ._source import source_over


class Enumerated[T](NamedTuple):
    """Represents an item with its associated index in an enumeration."""

    idx: int
    """The index of the item in the enumeration."""
    value: T
    """The value of the item."""

    def __repr__(self) -> str:
        return f"({self.idx}, {self.value.__repr__()})"


class Map[T, R](Adapter[T, R]):
    """Applies **func** to the upstream element each time it is read.

    The result lands in a single slot, overwritten on every `get()`: nothing is cached between reads.
    """

    __slots__ = ("_func", "_value")

    _value: R

    def __init__(self, source: Extractor[T], func: Callable[[T], R]) -> None:
        super().__init__(source)
        self._func = func

    def advance(self) -> bool:
        return self.source.advance()

    def get(self) -> R:
        self._value = self._func(self.source.get())
        return self._value


class FlatMap[T, R](Adapter[T, R]):
    """Yields every element of the iterables produced by **func**, one upstream element at a time.

    The current inner sequence lives in a slot that is replaced wholesale each time an upstream element is pulled.

    Inner sequences may be empty, in which case the next upstream element is pulled right away.
    """

    __slots__ = ("_func", "_inner")

    def __init__(self, source: Extractor[T], func: Callable[[T], Iterable[R]]) -> None:
        super().__init__(source)
        self._func = func
        self._inner: Extractor[R] | None = None

    def advance(self) -> bool:
        while self._inner is None or not self._inner.advance():
            if not self.source.advance():
                return False
            self._inner = source_over(self._func(self.source.get()))
        return True

    def get(self) -> R:
        if get_config().checked and self._inner is None:
            msg = "`get()` called on FlatMap before any inner sequence was pulled"
            raise ExtractorStateError(msg)
        return self._inner.get()  # type: ignore[union-attr]


class Enumerate[T](Adapter[T, Enumerated[T]]):
    """Pairs each element with its position, as an `Enumerated` named tuple.

    The counter is bumped on every `advance()`, successful or not, so the current element is at `counter - 1`.
    """

    __slots__ = ("_counter", "_value")

    _value: Enumerated[T]

    def __init__(self, source: Extractor[T], start: int = 0) -> None:
        super().__init__(source)
        self._counter = start

    def advance(self) -> bool:
        self._counter += 1
        return self.source.advance()

    def get(self) -> Enumerated[T]:
        self._value = Enumerated(self._counter - 1, self.source.get())
        return self._value


class EnumerateTuple[T](Adapter[T, tuple[int, T]]):
    """Same as `Enumerate`, with plain `(index, value)` tuples."""

    __slots__ = ("_counter", "_value")

    _value: tuple[int, T]

    def __init__(self, source: Extractor[T], start: int = 0) -> None:
        super().__init__(source)
        self._counter = start

    def advance(self) -> bool:
        self._counter += 1
        return self.source.advance()

    def get(self) -> tuple[int, T]:
        self._value = (self._counter - 1, self.source.get())
        return self._value


class Inspect[T](Adapter[T, T]):
    """Calls **func** on every element as soon as it is pulled, whether it is read or not."""

    __slots__ = ("_func",)

    def __init__(self, source: Extractor[T], func: Callable[[T], object]) -> None:
        super().__init__(source)
        self._func = func

    def advance(self) -> bool:
        if self.source.advance():
            self._func(self.source.get())
            return True
        return False

    def get(self) -> T:
        return self.source.get()


class Spy[T](Adapter[T, T]):
    """Calls **func** on the element each time it is read with `get()`."""

    __slots__ = ("_func",)

    def __init__(self, source: Extractor[T], func: Callable[[T], object]) -> None:
        super().__init__(source)
        self._func = func

    def advance(self) -> bool:
        return self.source.advance()

    def get(self) -> T:
        value = self.source.get()
        self._func(value)
        return value
