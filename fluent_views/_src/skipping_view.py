import operator
from collections.abc import Iterable
from typing import Final, Generic, TypeVar

from .arguments import require_count, require_source
from .cursor import Cursor
from .viewable import Viewable, cursor_of

T = TypeVar("T")

Self = TypeVar("Self", bound="SkippingView")


class SkippingCursor(Cursor[T], Generic[T]):
    """Drops the first elements of the inner cursor as soon as it is created."""
    _cursor: Final[Cursor[T]]

    __slots__ = {
        "_cursor":
            "The inner cursor.",
    }

    def __init__(self: "SkippingCursor[T]", cursor: Cursor[T], skip_count: int, /) -> None:
        self._cursor = cursor
        # A short inner sequence just leaves nothing behind.
        for _ in range(skip_count):
            if not cursor.has_more():
                break
            cursor.advance()

    def __length_hint__(self: "SkippingCursor[T]", /) -> int:
        return operator.length_hint(self._cursor)

    def advance(self: "SkippingCursor[T]", /) -> T:
        return self._cursor.advance()

    def has_more(self: "SkippingCursor[T]", /) -> bool:
        return self._cursor.has_more()


class SkippingView(Viewable[T], Generic[T]):
    _skip_count: Final[int]
    _source: Final[Iterable[T]]

    __slots__ = {
        "_skip_count":
            "The number of leading elements to drop.",
        "_source":
            "The skipped sequence.",
    }

    def __init__(self: Self, source: Iterable[T], skip_count: int, /) -> None:
        self._source = require_source(source, "source")
        self._skip_count = require_count(skip_count, "skip count")

    def __repr__(self: Self, /) -> str:
        return f"{self._source!r}.skip({self._skip_count!r})"

    def cursor(self: Self, /) -> SkippingCursor[T]:
        return SkippingCursor(cursor_of(self._source), self._skip_count)
