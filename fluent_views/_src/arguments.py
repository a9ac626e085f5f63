import operator
from collections.abc import Callable, Iterable
from typing import Any, Optional, SupportsIndex

from .errors import InvalidArgumentError, NullArgumentError, TypeMismatchError


def require_source(source: Optional[Iterable[Any]], name: str, /) -> Iterable[Any]:
    if source is None:
        raise NullArgumentError(f"the {name} must not be None")
    elif not isinstance(source, Iterable):
        raise TypeMismatchError(f"expected an iterable for the {name}, got {source!r}")
    return source


def require_callable(function: Optional[Callable[..., Any]], name: str, /) -> Callable[..., Any]:
    if function is None:
        raise NullArgumentError(f"the {name} must not be None")
    elif not callable(function):
        raise TypeMismatchError(f"expected a callable for the {name}, got {function!r}")
    return function


def require_count(count: Optional[int], name: str, /) -> int:
    if count is None:
        raise NullArgumentError(f"the {name} must not be None")
    elif isinstance(count, int):
        pass
    elif isinstance(count, SupportsIndex):
        count = operator.index(count)
    else:
        raise TypeError(f"could not interpret the {name} as an integer, got {count!r}")
    if count < 0:
        raise InvalidArgumentError(f"the {name} must not be negative, got {count!r}")
    return count
