from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Self

from ._errors import StreamMovedError


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do x.into(f) instead of f(x), hence keeping a functional chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import pyostream as ps
        >>> def evens(stream: ps.Stream[int]) -> list[int]:
        ...     return stream.filter(lambda x: x % 2 == 0).collect()
        >>> ps.from_(range(7)).into(evens)
        [0, 2, 4, 6]

        ```
        """
        return func(self, *args, **kwargs)


class Owner[T](ABC, Pipeable):
    """Base class for wrappers that exclusively own a single value.

    The owned value can be moved out exactly once with `_release()`.

    After that, the wrapper is left empty and every access through `_borrow()` raises `StreamMovedError`.

    Args:
        data (T): The value to own.
    """

    _inner: T | None

    __slots__ = ("_inner",)

    def __init__(self, data: T) -> None:
        self._inner = data

    def _borrow(self) -> T:
        if self._inner is None:
            msg = f"this {self.__class__.__name__} was moved into another {self.__class__.__name__} and cannot be used anymore"
            raise StreamMovedError(msg)
        return self._inner

    def _release(self) -> T:
        inner = self._borrow()
        self._inner = None
        return inner

    def is_moved(self) -> bool:
        """Check if the owned value was moved out of this wrapper.

        Returns:
            bool: True if the wrapper is empty, False otherwise.

        Example:
        ```python
        >>> import pyostream as ps
        >>> stream = ps.from_([1, 2, 3])
        >>> doubled = stream.map(lambda x: x * 2)
        >>> stream.is_moved(), doubled.is_moved()
        (True, False)

        ```
        """
        return self._inner is None
