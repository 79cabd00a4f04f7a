from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never

if TYPE_CHECKING:
    from typing import TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """The result of a lookup that may find nothing.

    An `Option` is either `Some(value)`, holding exactly one value, or `NONE`.

    `Some(None)` is a present value and is never equal to `NONE`.

    Example:
    ```python
    >>> import pyostream as ps
    >>> ps.from_([None]).next()
    Some(None)
    >>> ps.from_([]).next()
    NONE

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Returns:
            `True` if the option is a `Some` variant, `False` otherwise.

        Example:
            ```python
            >>> import pyostream as ps
            >>> ps.Some(2).is_some()
            True
            >>> ps.NONE.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is `NONE`.

        Returns:
            `True` if the option is the `NoneOption` variant, `False` otherwise.

        Example:
            ```python
            >>> import pyostream as ps
            >>> ps.Some(2).is_none()
            False
            >>> ps.NONE.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> import pyostream as ps
            >>> ps.from_("car").next().unwrap()
            'c'
            >>> ps.from_("").next().unwrap()
            Traceback (most recent call last):
                ...
            pyostream._results._option.OptionUnwrapError: called `unwrap` on a `NONE`

            ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value.
        Raises an exception with a provided message if the value is `NONE`.

        Args:
            msg: The message to include in the exception if the option is `NONE`.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
            ```python
            >>> import pyostream as ps
            >>> ps.from_([4, 5]).last().expect("stream should not be empty")
            5
            >>> ps.from_([]).last().expect("stream should not be empty")
            Traceback (most recent call last):
                ...
            pyostream._results._option.OptionUnwrapError: stream should not be empty (called `expect` on a `NONE`)

            ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `NONE`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Args:
            default: The value to return if the option is `NONE`.

        Returns:
            The contained `Some` value or the provided default.

        Example:
            ```python
            >>> import pyostream as ps
            >>> ps.from_(range(10)).nth(3).unwrap_or(-1)
            3
            >>> ps.from_(range(10)).nth(30).unwrap_or(-1)
            -1

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from a function.

        Args:
            f: A function that returns a default value if the option is `NONE`.

        Returns:
            The contained `Some` value or the result of the function.

        Example:
            ```python
            >>> import pyostream as ps
            >>> k = 10
            >>> ps.Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> ps.NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_some() else f()

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """
        Returns `True` if the option is `Some` and its value satisfies **predicate**.

        Args:
            predicate: The function to test the `Some` value with.

        Returns:
            `False` for `NONE`, otherwise the result of the predicate.

        Example:
            ```python
            >>> import pyostream as ps
            >>> ps.Some(2).is_some_and(lambda x: x > 1)
            True
            >>> ps.NONE.is_some_and(lambda x: x > 1)
            False

            ```
        """
        return self.is_some() and predicate(self.unwrap())

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving `NONE` untouched.

        Args:
            f: The function to apply to the `Some` value.

        Returns:
            A new `Option` with the mapped value if `Some`, otherwise `NONE`.

        Example:
            ```python
            >>> import pyostream as ps
            >>> ps.Some("Hello, World!").map(len)
            Some(13)
            >>> ps.NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """
        Returns `NONE` if the option is `NONE` or its value does not satisfy **predicate**.

        Args:
            predicate: The function to test the `Some` value with.

        Returns:
            The original option if the predicate holds, otherwise `NONE`.

        Example:
            ```python
            >>> import pyostream as ps
            >>> ps.Some(4).filter(lambda x: x % 2 == 0)
            Some(4)
            >>> ps.Some(3).filter(lambda x: x % 2 == 0)
            NONE

            ```
        """
        if self.is_some() and predicate(self.unwrap()):
            return self
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls a function if the option is `Some`, otherwise returns `NONE`.
        Some languages call this operation flatmap.

        Args:
            f: The function to call with the `Some` value.

        Returns:
            The result of the function if `Some`, otherwise `NONE`.

        Example:
            ```python
            >>> import pyostream as ps
            >>> def first_char(word: str) -> ps.Option[str]:
            ...     return ps.from_(word).next()
            >>> ps.from_(["abc", "de"]).next().and_then(first_char)
            Some('a')
            >>> ps.from_(["", "de"]).next().and_then(first_char)
            NONE

            ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise calls a function and returns the result.

        Args:
            f: The function to call if the option is `NONE`.

        Returns:
            The original `Option` if it is `Some`, otherwise the result of the function.

        Example:
            ```python
            >>> import pyostream as ps
            >>> ps.Some("barbarians").or_else(lambda: ps.Some("vikings"))
            Some('barbarians')
            >>> ps.NONE.or_else(lambda: ps.Some("vikings"))
            Some('vikings')

            ```
        """
        return self if self.is_some() else f()


@dataclass(slots=True)
class Some[T](Option[T]):
    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` for `Some`."""
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `False` for `Some`."""
        return False

    def unwrap(self) -> T:
        """
        Returns the contained value.

        Returns:
            The contained value.
        """
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        """Returns `False` for `NONE`."""
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` for `NONE`."""
        return True

    def unwrap(self) -> Never:
        """
        Raises `OptionUnwrapError` because there is no value.

        Raises:
            OptionUnwrapError: Always, since `NONE` contains no value.
        """
        raise OptionUnwrapError("called `unwrap` on a `NONE`")


NONE: Option[Any] = NoneOption()
