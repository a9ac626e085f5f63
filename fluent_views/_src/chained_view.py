import operator
from collections.abc import Iterable
from typing import Generic, Optional, TypeVar

from .arguments import require_source
from .cursor import Cursor
from .viewable import Viewable, cursor_of

T = TypeVar("T")

Self = TypeVar("Self", bound="ChainedView")


class ChainedCursor(Cursor[T], Generic[T]):
    """
    Traverses the first sequence, then the second.

    The second cursor is only requested once the first one runs out.
    """
    _cursor: Cursor[T]
    _second: Optional[Iterable[T]]

    __slots__ = {
        "_cursor":
            "The cursor of the active side.",
        "_second":
            "The sequence still to be traversed, if any.",
    }

    def __init__(self: "ChainedCursor[T]", first: Iterable[T], second: Optional[Iterable[T]], /) -> None:
        self._cursor = cursor_of(first)
        self._second = second

    def __length_hint__(self: "ChainedCursor[T]", /) -> int:
        if self._second is None:
            return operator.length_hint(self._cursor)
        return operator.length_hint(self._cursor) + operator.length_hint(self._second)

    def advance(self: "ChainedCursor[T]", /) -> T:
        self.has_more()
        return self._cursor.advance()

    def has_more(self: "ChainedCursor[T]", /) -> bool:
        if self._cursor.has_more():
            return True
        elif self._second is None:
            return False
        self._cursor = cursor_of(self._second)
        self._second = None
        return self._cursor.has_more()


class ChainedView(Viewable[T], Generic[T]):
    _first: Iterable[T]
    _second: Optional[Iterable[T]]

    __slots__ = {
        "_first":
            "The sequence traversed first.",
        "_second":
            "The sequence traversed second, or None.",
    }

    def __init__(self: Self, first: Iterable[T], second: Optional[Iterable[T]] = None, /) -> None:
        self._first = require_source(first, "first sequence")
        self._second = None if second is None else require_source(second, "second sequence")

    def __repr__(self: Self, /) -> str:
        return f"{self._first!r}.append({self._second!r})"

    def cursor(self: Self, /) -> ChainedCursor[T]:
        return ChainedCursor(self._first, self._second)
