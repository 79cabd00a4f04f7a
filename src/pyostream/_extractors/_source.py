from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .._core import ExtractorStateError, get_config
from ._protocol import Extractor, State


def _check_positioned(extractor: Extractor[object], state: State) -> None:
    if state is not State.ACTIVE:
        msg = f"`get()` called on {extractor.__class__.__name__} in state {state.name}"
        raise ExtractorStateError(msg)


class SequenceSource[T](Extractor[T]):
    """Cursor between **begin** and **end** over a borrowed `Sequence`.

    The sequence is never copied, the cursor only stores indices.

    **begin** and **end** follow slice semantics, and are clamped to the sequence length at construction.

    Args:
        data (Sequence[T]): The sequence to read from.
        begin (int | None): First index to read. Defaults to the start of **data**.
        end (int | None): Index to stop before. Defaults to the end of **data**.
    """

    __slots__ = ("_current", "_data", "_end", "_next", "_state")

    def __init__(
        self, data: Sequence[T], begin: int | None = None, end: int | None = None
    ) -> None:
        self._data = data
        start, self._end, _ = slice(begin, end).indices(len(data))
        self._next = start
        self._current = start
        self._state = State.UNSTARTED

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().source_repr(self._data, self._next, self._end)})"

    @property
    def state(self) -> State:
        return self._state

    def advance(self) -> bool:
        if self._next < self._end:
            self._current = self._next
            self._next += 1
            self._state = State.ACTIVE
            return True
        self._state = State.EXHAUSTED
        return False

    def get(self) -> T:
        if get_config().checked:
            _check_positioned(self, self._state)
        return self._data[self._current]


class IterableSource[T](Extractor[T]):
    """Cursor over any iterable, read through the Python iterator protocol.

    Used for re-iterable collections that are not sequences (sets, mappings, views...), and for the inner sequences produced by `FlatMap`, which the source then owns.

    Args:
        data (Iterable[T]): The iterable to read from.
    """

    __slots__ = ("_current", "_iterator", "_kind", "_state")

    _current: T

    def __init__(self, data: Iterable[T]) -> None:
        self._iterator: Iterator[T] = iter(data)
        self._kind = data.__class__.__name__
        self._state = State.UNSTARTED

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(<{self._kind}>)"

    @property
    def state(self) -> State:
        return self._state

    def advance(self) -> bool:
        if self._state is State.EXHAUSTED:
            return False
        try:
            self._current = next(self._iterator)
        except StopIteration:
            self._state = State.EXHAUSTED
            return False
        self._state = State.ACTIVE
        return True

    def get(self) -> T:
        if get_config().checked:
            _check_positioned(self, self._state)
        return self._current


def source_over[T](data: Iterable[T]) -> Extractor[T]:
    """Build the cheapest source able to read **data**."""
    if isinstance(data, Sequence):
        return SequenceSource(data)
    return IterableSource(data)
