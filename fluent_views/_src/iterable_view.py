from collections.abc import Iterable
from typing import Final, Generic, TypeVar

from .arguments import require_source
from .cursor import IteratorCursor
from .viewable import Viewable

T = TypeVar("T")

Self = TypeVar("Self", bound="IterableView")


class IterableView(Viewable[T], Generic[T]):
    """
    Turns a plain Python iterable into a viewable.

    Containers such as lists, tuples and ranges replay on every cursor.
    One-shot iterators such as generators are only traversed once, and
    every later cursor comes back empty.
    """
    _iterable: Final[Iterable[T]]

    __slots__ = {
        "_iterable":
            "The wrapped iterable.",
    }

    def __init__(self: Self, iterable: Iterable[T], /) -> None:
        self._iterable = require_source(iterable, "iterable")

    def __repr__(self: Self, /) -> str:
        return f"{type(self).__name__}({self._iterable!r})"

    def cursor(self: Self, /) -> IteratorCursor[T]:
        return IteratorCursor(iter(self._iterable))
