from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Final

from ._format import seq_repr

CHECKED_ENV_VAR: Final = "PYOSTREAM_CHECKED"


@dataclass(slots=True, frozen=True)
class StreamConfig:
    """Process-wide settings of pyostream.

    Args:
        checked (bool): Enable precondition checks in extractors. `get()` without a current element then raises `ExtractorStateError`.
        repr_items (int): Maximum number of upcoming source elements shown by `repr()`.
    """

    checked: bool = False
    repr_items: int = 5

    def __post_init__(self) -> None:
        if self.repr_items < 0:
            msg = f"repr_items must be >= 0, got {self.repr_items}"
            raise ValueError(msg)

    def source_repr(self, data: Sequence[Any], start: int, stop: int) -> str:
        return seq_repr(data, start, stop, self.repr_items)


def _from_env() -> StreamConfig:
    return StreamConfig(checked=os.environ.get(CHECKED_ENV_VAR, "") not in ("", "0"))


_CONFIG: StreamConfig = _from_env()


def get_config() -> StreamConfig:
    """Get the current configuration.

    Returns:
        StreamConfig: The active configuration.

    Example:
    ```python
    >>> import pyostream as ps
    >>> ps.get_config().repr_items
    5

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> StreamConfig:  # noqa: ANN401
    """Replace fields of the current configuration.

    Args:
        **changes (Any): Fields of `StreamConfig` to replace.

    Returns:
        StreamConfig: The previous configuration, so it can be restored.

    Example:
    ```python
    >>> import pyostream as ps
    >>> previous = ps.set_config(repr_items=2)
    >>> ps.from_([1, 2, 3])
    Stream(SequenceSource([1, 2, ...]))
    >>> _ = ps.set_config(repr_items=previous.repr_items)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = replace(_CONFIG, **changes)
    return previous


@contextmanager
def config_context(**changes: Any) -> Iterator[StreamConfig]:  # noqa: ANN401
    """Temporarily replace fields of the current configuration.

    The previous configuration is restored on exit, even if an exception was raised.

    Args:
        **changes (Any): Fields of `StreamConfig` to replace.

    Yields:
        StreamConfig: The configuration active inside the block.

    Example:
    ```python
    >>> import pyostream as ps
    >>> with ps.config_context(checked=True) as config:
    ...     config.checked
    True
    >>> ps.get_config().checked
    False

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = set_config(**changes)
    try:
        yield _CONFIG
    finally:
        _CONFIG = previous
