from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto

from ._protocol import Adapter, Extractor


class Filter[T](Adapter[T, T]):
    """Pulls upstream until an element satisfies **predicate**."""

    __slots__ = ("_predicate",)

    def __init__(self, source: Extractor[T], predicate: Callable[[T], bool]) -> None:
        super().__init__(source)
        self._predicate = predicate

    def advance(self) -> bool:
        while self.source.advance():
            if self._predicate(self.source.get()):
                return True
        return False

    def get(self) -> T:
        return self.source.get()


class Skip[T](Adapter[T, T]):
    """Discards the first **count** upstream elements on the first `advance()`.

    The remaining count only goes down; once it reaches zero, the adapter is a plain pass-through.
    """

    __slots__ = ("_remaining",)

    def __init__(self, source: Extractor[T], count: int) -> None:
        super().__init__(source)
        self._remaining = count

    def advance(self) -> bool:
        while self._remaining > 0:
            self._remaining -= 1
            if not self.source.advance():
                return False
        return self.source.advance()

    def get(self) -> T:
        return self.source.get()


class SkipMode(Enum):
    SKIPPING = auto()
    PASSING = auto()
    DRAINED = auto()


class SkipWhile[T](Adapter[T, T]):
    """Discards elements while **predicate** holds, then lets everything through.

    The mode only moves forward:

    - `SKIPPING` -> `PASSING` on the first element failing the predicate, which is yielded.
    - `SKIPPING` -> `DRAINED` if upstream ends while still skipping. The adapter is then empty for good.
    """

    __slots__ = ("_mode", "_predicate")

    def __init__(self, source: Extractor[T], predicate: Callable[[T], bool]) -> None:
        super().__init__(source)
        self._predicate = predicate
        self._mode = SkipMode.SKIPPING

    @property
    def mode(self) -> SkipMode:
        return self._mode

    def advance(self) -> bool:
        match self._mode:
            case SkipMode.PASSING:
                return self.source.advance()
            case SkipMode.DRAINED:
                return False
            case SkipMode.SKIPPING:
                while self.source.advance():
                    if not self._predicate(self.source.get()):
                        self._mode = SkipMode.PASSING
                        return True
                self._mode = SkipMode.DRAINED
                return False

    def get(self) -> T:
        return self.source.get()


class Take[T](Adapter[T, T]):
    """Yields at most **count** elements.

    Once the budget is spent, `advance()` returns `False` without polling upstream anymore.
    """

    __slots__ = ("_remaining",)

    def __init__(self, source: Extractor[T], count: int) -> None:
        super().__init__(source)
        self._remaining = count

    def advance(self) -> bool:
        if self._remaining > 0:
            self._remaining -= 1
            return self.source.advance()
        return False

    def get(self) -> T:
        return self.source.get()


class TakeWhile[T](Adapter[T, T]):
    """Yields elements while **predicate** holds.

    The first element failing the predicate, or the end of upstream, closes the adapter for good.
    """

    __slots__ = ("_predicate", "_taking")

    def __init__(self, source: Extractor[T], predicate: Callable[[T], bool]) -> None:
        super().__init__(source)
        self._predicate = predicate
        self._taking = True

    def advance(self) -> bool:
        self._taking = (
            self._taking
            and self.source.advance()
            and bool(self._predicate(self.source.get()))
        )
        return self._taking

    def get(self) -> T:
        return self.source.get()
