import warnings
from collections.abc import Callable
from functools import wraps


def renamed[**P, R](new_name: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Mark a method as an old spelling of **new_name**.

    Calling it emits a `DeprecationWarning` pointing at the caller, then runs the wrapped function.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        owner = func.__qualname__.rpartition(".")[0]
        msg = f"`{func.__qualname__}` is deprecated, use `{owner}.{new_name}` instead"

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            warnings.warn(msg, DeprecationWarning, stacklevel=2)
            return func(*args, **kwargs)

        return wrapper

    return decorator
