from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Concatenate, overload

import cytoolz as cz

from ._core import Owner, StreamMovedError, renamed
from ._extractors import (
    Chain,
    Enumerate,
    Enumerated,
    EnumerateTuple,
    Extractor,
    Filter,
    FlatMap,
    Inspect,
    Map,
    SequenceSource,
    Skip,
    SkipWhile,
    Spy,
    Take,
    TakeWhile,
    Zip,
    source_over,
)
from ._results import NONE, Option, Some


def _check_count(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)
    return value


class Stream[T](Owner[Extractor[T]], Iterator[T]):
    """A lazy, single-pass pipeline over a borrowed sequence.

    A `Stream` exclusively owns one `Extractor`, the last stage of a chain of adapters pulling from a source.

    - Intermediate operations (`map`, `filter`, `take`...) only build a new adapter around the current one. Nothing is pulled.
    - Single-step operations (`next`, `nth`) pull just what they need.
    - Terminal operations (`collect`, `fold`, `count`...) pull until the chain is exhausted.

    Intermediate operations move the extractor into the returned `Stream`.

    The original `Stream` is left empty, and using it again raises `StreamMovedError`.

    This avoids two streams pulling from the same chain, or running the same side effects twice.

    Once exhausted, a `Stream` cannot be reset: terminal operations then return their empty result.

    Create one with `pyostream.from_()` or `Stream.from_()`.

    Args:
        extractor (Extractor[T]): The extractor to own.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        if self._inner is None:
            return f"{self.__class__.__name__}(<moved>)"
        return f"{self.__class__.__name__}({self._inner!r})"

    def __next__(self) -> T:
        extractor = self._borrow()
        if extractor.advance():
            return extractor.get()
        raise StopIteration

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Stream[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Stream[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Stream[U]:
        """Create a `Stream` borrowing a sequence, or over unpacked values.

        Sequences (`list`, `tuple`, `range`, `str`...) are read by index, without any copy.

        Other re-iterable collections (`set`, `dict`, views...) are read through a fresh iterator.

        One-shot iterators and generators are refused: the stream would consume a value it does not own.

        Collect them into a sequence first.

        Args:
            data (Iterable[U] | U): The sequence to borrow, or a single value.
            *more_data (U): Additional values. If given, the stream reads the tuple of all the values.

        Returns:
            Stream[U]: A new Stream positioned before the first element.

        Raises:
            TypeError: If **data** is an `Iterator`.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_([1, 2, 3])
        Stream(SequenceSource([1, 2, 3]))
        >>> ps.from_(1, 2, 3).collect()
        [1, 2, 3]
        >>> ps.from_(x for x in range(3))
        Traceback (most recent call last):
            ...
        TypeError: cannot borrow a generator: collect it into a sequence first

        ```
        """
        if more_data or not cz.itertoolz.isiterable(data):
            return Stream(SequenceSource((data, *more_data)))
        if isinstance(data, Iterator):
            msg = f"cannot borrow a {data.__class__.__name__}: collect it into a sequence first"
            raise TypeError(msg)
        return Stream(source_over(data))  # pyright: ignore[reportUnknownArgumentType]

    # intermediate ------------------------------------------------------

    def map[R](self, func: Callable[[T], R]) -> Stream[R]:
        """Apply a function to each element of the stream.

        The function runs each time an element is read, not when it is pulled.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Stream[R]: A stream of transformed elements.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_([1, 2]).map(lambda x: x + 1).collect()
        [2, 3]
        >>> ps.from_([1, 2]).map(str).collect()
        ['1', '2']

        ```
        """
        return Stream(Map(self._release(), func))

    def flat_map[R](self, func: Callable[[T], Iterable[R]]) -> Stream[R]:
        """Map each element to an iterable, and yield the elements of those iterables in order.

        The iterables returned by **func** are owned by the stream, so generators are accepted here.

        Args:
            func (Callable[[T], Iterable[R]]): Function returning an iterable for each element.

        Returns:
            Stream[R]: A stream of the elements of every produced iterable.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_([1, 2, 3]).flat_map(range).collect()
        [0, 0, 1, 0, 1, 2]
        >>> ps.from_(["ab", "", "c"]).flat_map(lambda s: (c.upper() for c in s)).collect()
        ['A', 'B', 'C']

        ```
        """
        return Stream(FlatMap(self._release(), func))

    def flatten[U](self: Stream[Iterable[U]]) -> Stream[U]:
        """Remove one level of nesting.

        Returns:
            Stream[U]: A stream of the elements of each inner iterable.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_([[1, 2], [], [3]]).flatten().collect()
        [1, 2, 3]

        ```
        """
        return self.flat_map(cz.functoolz.identity)

    def filter(self, predicate: Callable[[T], bool]) -> Stream[T]:
        """Keep only the elements satisfying **predicate**, in their original order.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            Stream[T]: A stream of the matching elements.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_(range(10)).filter(lambda x: x % 3 == 0).collect()
        [0, 3, 6, 9]

        ```
        """
        return Stream(Filter(self._release(), predicate))

    def skip(self, n: int) -> Stream[T]:
        """Drop the first **n** elements.

        Args:
            n (int): Number of elements to skip.

        Returns:
            Stream[T]: A stream of the elements after the first **n**.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_((1, 2, 3)).skip(1).collect()
        [2, 3]
        >>> ps.from_((1, 2, 3)).skip(5).collect()
        []

        ```
        """
        return Stream(Skip(self._release(), _check_count("n", n)))

    def skip_while(self, predicate: Callable[[T], bool]) -> Stream[T]:
        """Drop elements while **predicate** holds, then yield everything else.

        Once an element fails the predicate, it is never evaluated again.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            Stream[T]: A stream starting at the first element failing the predicate.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_((1, 2, 0, 3)).skip_while(lambda x: x > 0).collect()
        [0, 3]

        ```
        """
        return Stream(SkipWhile(self._release(), predicate))

    def take(self, n: int) -> Stream[T]:
        """Yield at most the first **n** elements.

        Args:
            n (int): Number of elements to take.

        Returns:
            Stream[T]: A stream of at most **n** elements.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import pyostream as ps
        >>> data = [1, 2, 3]
        >>> ps.from_(data).take(2).collect()
        [1, 2]
        >>> ps.from_(data).take(5).collect()
        [1, 2, 3]

        ```
        """
        return Stream(Take(self._release(), _check_count("n", n)))

    def take_while(self, predicate: Callable[[T], bool]) -> Stream[T]:
        """Yield elements while **predicate** holds.

        The first element failing the predicate ends the stream for good, even if later ones would satisfy it.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            Stream[T]: A stream of the leading elements satisfying the predicate.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_((1, 2, 0, 3)).take_while(lambda x: x > 0).collect()
        [1, 2]

        ```
        """
        return Stream(TakeWhile(self._release(), predicate))

    def inspect(self, func: Callable[[T], object]) -> Stream[T]:
        """Call **func** on each element as soon as it is pulled.

        This happens even for elements that are never read, for example the ones discarded by `nth()`.

        See `spy()` to observe elements only when they are read.

        Args:
            func (Callable[[T], object]): Function called for its side effects.

        Returns:
            Stream[T]: The same elements.

        Example:
        ```python
        >>> import pyostream as ps
        >>> seen = []
        >>> stream = ps.from_([1, 2, 3]).inspect(seen.append)
        >>> seen
        []
        >>> stream.nth(1)
        Some(2)
        >>> seen
        [1, 2]

        ```
        """
        return Stream(Inspect(self._release(), func))

    def spy(self, func: Callable[[T], object]) -> Stream[T]:
        """Call **func** on each element when it is read.

        Elements that are pulled but never read, like the ones discarded by `nth()`, are not observed.

        Args:
            func (Callable[[T], object]): Function called for its side effects.

        Returns:
            Stream[T]: The same elements.

        Example:
        ```python
        >>> import pyostream as ps
        >>> seen = []
        >>> ps.from_([1, 2, 3]).spy(seen.append).nth(1)
        Some(2)
        >>> seen
        [2]

        ```
        """
        return Stream(Spy(self._release(), func))

    def enumerate(self, start: int = 0) -> Stream[Enumerated[T]]:
        """Pair each element with its index, as `Enumerated` named tuples.

        Args:
            start (int): Index of the first element. Defaults to 0.

        Returns:
            Stream[Enumerated[T]]: A stream of (index, value) pairs.

        Raises:
            ValueError: If **start** is negative.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_(["a", "b"]).enumerate().collect()
        [(0, 'a'), (1, 'b')]
        >>> ps.from_(["a", "b"]).enumerate(1).map(lambda e: e.idx).collect()
        [1, 2]

        ```
        """
        return Stream(Enumerate(self._release(), _check_count("start", start)))

    def enumerate_tuple(self, start: int = 0) -> Stream[tuple[int, T]]:
        """Pair each element with its index, as plain tuples.

        Args:
            start (int): Index of the first element. Defaults to 0.

        Returns:
            Stream[tuple[int, T]]: A stream of (index, value) tuples.

        Raises:
            ValueError: If **start** is negative.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_("xy").enumerate_tuple(10).collect()
        [(10, 'x'), (11, 'y')]

        ```
        """
        return Stream(EnumerateTuple(self._release(), _check_count("start", start)))

    def chain(self, other: Stream[T] | Iterable[T]) -> Stream[T]:
        """Yield the elements of this stream, then the elements of **other**.

        If **other** is a `Stream`, its extractor is moved as well.

        Args:
            other (Stream[T] | Iterable[T]): A stream, or a sequence to borrow.

        Returns:
            Stream[T]: A stream of both sets of elements.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_((1, 2)).chain([3, 4]).collect()
        [1, 2, 3, 4]
        >>> ps.from_((1, 2)).chain(ps.from_("ab").map(str.upper)).collect()
        [1, 2, 'A', 'B']

        ```
        """
        tail = other if isinstance(other, Stream) else Stream.from_(other)
        return Stream(Chain(*self._release_with(tail)))

    def zip[U](self, other: Stream[U] | Iterable[U]) -> Stream[tuple[T, U]]:
        """Yield pairs of elements from this stream and **other**, stopping at the shortest.

        If **other** is a `Stream`, its extractor is moved as well.

        When this stream ends first, **other** is not pulled again.

        Args:
            other (Stream[U] | Iterable[U]): A stream, or a sequence to borrow.

        Returns:
            Stream[tuple[T, U]]: A stream of pairs.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_("abc").zip(range(2)).collect()
        [('a', 0), ('b', 1)]

        ```
        """
        right = other if isinstance(other, Stream) else Stream.from_(other)
        return Stream(Zip(*self._release_with(right)))

    def _release_with[U](self, other: Stream[U]) -> tuple[Extractor[T], Extractor[U]]:
        head = self._borrow()
        if head is other._borrow():
            msg = "a Stream cannot be combined with itself"
            raise StreamMovedError(msg)
        return self._release(), other._release()

    # single step -------------------------------------------------------

    def next(self) -> Option[T]:
        """Pull and read exactly one element.

        Returns:
            Option[T]: `Some` of the next element, or `NONE` if the stream is exhausted.

        Example:
        ```python
        >>> import pyostream as ps
        >>> stream = ps.from_([1, 2])
        >>> stream.next(), stream.next(), stream.next()
        (Some(1), Some(2), NONE)

        ```
        """
        extractor = self._borrow()
        if extractor.advance():
            return Some(extractor.get())
        return NONE

    def nth(self, n: int) -> Option[T]:
        """Discard **n** elements, then pull and read the next one.

        Discarded elements are pulled but never read, and are gone for good.

        Calling `nth()` again continues right after the element it returned.

        Args:
            n (int): Number of elements to discard first.

        Returns:
            Option[T]: `Some` of the element, or `NONE` if the stream ended before.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import pyostream as ps
        >>> stream = ps.from_(range(100))
        >>> stream.nth(12)
        Some(12)
        >>> stream.nth(20)
        Some(33)
        >>> stream.nth(100)
        NONE

        ```
        """
        remaining = _check_count("n", n)
        extractor = self._borrow()
        while remaining and extractor.advance():
            remaining -= 1
        return self.next()

    # terminal ----------------------------------------------------------

    def _drain(self) -> Iterator[T]:
        extractor = self._borrow()

        def _gen() -> Iterator[T]:
            while extractor.advance():
                yield extractor.get()

        return _gen()

    def last(self) -> Option[T]:
        """Consume the stream, returning its last element.

        Every element is read, so `spy()` observers see all of them.

        Returns:
            Option[T]: `Some` of the last element, or `NONE` if the stream was exhausted.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_([1, 2, 3]).last()
        Some(3)
        >>> ps.from_([]).last()
        NONE

        ```
        """
        extractor = self._borrow()
        if not extractor.advance():
            return NONE
        value = extractor.get()
        while extractor.advance():
            value = extractor.get()
        return Some(value)

    def for_each[**P](
        self,
        func: Callable[Concatenate[T, P], Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Consume the stream by calling **func** on each remaining element.

        Args:
            func (Callable[Concatenate[T, P], Any]): Function to apply to each element.
            *args (P.args): Positional arguments for the function.
            **kwargs (P.kwargs): Keyword arguments for the function.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_([1, 2, 3]).for_each(lambda x, y: print(x + y), 10)
        11
        12
        13

        ```
        """
        for v in self._drain():
            func(v, *args, **kwargs)

    def count(self) -> int:
        """Consume the stream, counting the remaining elements.

        Returns:
            int: The number of elements pulled.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_(range(100)).filter(lambda x: x % 2 == 0).count()
        50

        ```
        """
        extractor = self._borrow()
        total = 0
        while extractor.advance():
            total += 1
        return total

    def any(self, predicate: Callable[[T], bool]) -> bool:
        """Test if any remaining element satisfies **predicate**.

        Stops right after the first match, leaving the rest of the stream available.

        When there is no match, the whole stream is consumed.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            bool: True if an element matched, False otherwise.

        Example:
        ```python
        >>> import pyostream as ps
        >>> stream = ps.from_(range(100))
        >>> stream.any(lambda x: x > 50)
        True
        >>> stream.next()
        Some(52)
        >>> stream.any(lambda x: x < 50)
        False
        >>> stream.any(lambda x: True)
        False

        ```
        """
        for v in self._drain():
            if predicate(v):
                return True
        return False

    def all(self, predicate: Callable[[T], bool]) -> bool:
        """Test if every remaining element satisfies **predicate**.

        Stops right after the first failure. A `True` result always means the whole stream was consumed.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each element.

        Returns:
            bool: False if an element failed the predicate, True otherwise.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_(range(100)).all(lambda x: x >= 0)
        True
        >>> ps.from_(range(100)).all(lambda x: x < 99)
        False

        ```
        """
        for v in self._drain():
            if not predicate(v):
                return False
        return True

    def fold[U](self, init: U, func: Callable[[U, T], U]) -> U:
        """Consume the stream, combining its elements into an accumulator.

        Args:
            init (U): Initial value of the accumulator.
            func (Callable[[U, T], U]): Function returning the new accumulator from the current one and an element.

        Returns:
            U: The final accumulator, which is **init** for an exhausted stream.

        Example:
        ```python
        >>> import pyostream as ps
        >>> ps.from_(range(100)).fold(0, lambda acc, x: acc + x)
        4950
        >>> ps.from_("abc").fold("", lambda acc, c: c + acc)
        'cba'

        ```
        """
        acc = init
        for v in self._drain():
            acc = func(acc, v)
        return acc

    @overload
    def collect(self) -> list[T]: ...
    @overload
    def collect[C](self, collector: Callable[[Iterable[T]], C]) -> C: ...
    def collect(self, collector: Callable[[Iterable[T]], Any] = list) -> Any:  # noqa: ANN401
        """Consume the stream into a container.

        The **collector** receives an iterable over the remaining elements, in order.

        This can be directly `list`, `tuple`, `set`, `collections.deque`, or any `Callable` accepting an `Iterable[T]`.

        Args:
            collector (Callable[[Iterable[T]], Any]): Function|type building the container. Defaults to `list`.

        Returns:
            Any: The container built by **collector**.

        Example:
        ```python
        >>> import pyostream as ps
        >>> from collections import deque
        >>> ps.from_(range(3)).collect()
        [0, 1, 2]
        >>> ps.from_(range(3)).collect(tuple)
        (0, 1, 2)
        >>> ps.from_(range(3)).collect(deque)
        deque([0, 1, 2])

        ```
        """
        return collector(self._drain())

    # old spellings -----------------------------------------------------

    @renamed("flat_map")
    def flatMap[R](self, func: Callable[[T], Iterable[R]]) -> Stream[R]:  # noqa: N802
        return self.flat_map(func)

    @renamed("skip_while")
    def skipWhile(self, predicate: Callable[[T], bool]) -> Stream[T]:  # noqa: N802
        return self.skip_while(predicate)

    @renamed("take_while")
    def takeWhile(self, predicate: Callable[[T], bool]) -> Stream[T]:  # noqa: N802
        return self.take_while(predicate)

    @renamed("enumerate_tuple")
    def enumerateTuple(self, start: int = 0) -> Stream[tuple[int, T]]:  # noqa: N802
        return self.enumerate_tuple(start)

    @renamed("for_each")
    def forEach[**P](  # noqa: N802
        self,
        func: Callable[Concatenate[T, P], Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        return self.for_each(func, *args, **kwargs)


from_ = Stream.from_
