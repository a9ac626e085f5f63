import operator
from collections.abc import Iterable
from typing import Final, Generic, TypeVar

from .arguments import require_count, require_source
from .cursor import Cursor
from .errors import ExhaustedError
from .viewable import Viewable, cursor_of

T = TypeVar("T")

Self = TypeVar("Self", bound="BoundedView")


class BoundedCursor(Cursor[T], Generic[T]):
    _count: int
    _cursor: Final[Cursor[T]]
    _max_count: Final[int]

    __slots__ = {
        "_count":
            "The number of elements emitted so far.",
        "_cursor":
            "The inner cursor.",
        "_max_count":
            "The most elements that may be emitted.",
    }

    def __init__(self: "BoundedCursor[T]", cursor: Cursor[T], max_count: int, /) -> None:
        self._count = 0
        self._cursor = cursor
        self._max_count = max_count

    def __length_hint__(self: "BoundedCursor[T]", /) -> int:
        return min(self._max_count - self._count, operator.length_hint(self._cursor))

    def advance(self: "BoundedCursor[T]", /) -> T:
        if self._count >= self._max_count:
            raise ExhaustedError(f"cannot advance past the bound of {self._max_count!r} elements")
        element = self._cursor.advance()
        self._count += 1
        return element

    def has_more(self: "BoundedCursor[T]", /) -> bool:
        return self._count < self._max_count and self._cursor.has_more()


class BoundedView(Viewable[T], Generic[T]):
    _max_count: Final[int]
    _source: Final[Iterable[T]]

    __slots__ = {
        "_max_count":
            "The most elements that may be emitted.",
        "_source":
            "The bounded sequence.",
    }

    def __init__(self: Self, source: Iterable[T], max_count: int, /) -> None:
        self._source = require_source(source, "source")
        self._max_count = require_count(max_count, "max count")

    def __repr__(self: Self, /) -> str:
        return f"{self._source!r}.limit({self._max_count!r})"

    def cursor(self: Self, /) -> BoundedCursor[T]:
        return BoundedCursor(cursor_of(self._source), self._max_count)
