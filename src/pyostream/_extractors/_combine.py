from __future__ import annotations

from ._protocol import Extractor


class Chain[T](Extractor[T]):
    """Yields all elements of **first**, then all elements of **second**.

    The switch happens the first time **first** reports exhaustion, and is never undone: **first** is not polled again.
    """

    __slots__ = ("_on_first", "first", "second")

    def __init__(self, first: Extractor[T], second: Extractor[T]) -> None:
        self.first = first
        self.second = second
        self._on_first = True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.first!r}, {self.second!r})"

    @property
    def on_first(self) -> bool:
        return self._on_first

    def advance(self) -> bool:
        if self._on_first:
            if self.first.advance():
                return True
            self._on_first = False
        return self.second.advance()

    def get(self) -> T:
        if self._on_first:
            return self.first.get()
        return self.second.get()


class Zip[T, U](Extractor[tuple[T, U]]):
    """Yields pairs of elements from **left** and **right**, until either side ends.

    **right** is not advanced when **left** is already exhausted.
    """

    __slots__ = ("_value", "left", "right")

    _value: tuple[T, U]

    def __init__(self, left: Extractor[T], right: Extractor[U]) -> None:
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.left!r}, {self.right!r})"

    def advance(self) -> bool:
        return self.left.advance() and self.right.advance()

    def get(self) -> tuple[T, U]:
        self._value = (self.left.get(), self.right.get())
        return self._value
