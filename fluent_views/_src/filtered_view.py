from collections.abc import Callable, Iterable
from typing import Any, Final, Generic, TypeVar, Union

from .arguments import require_callable, require_source
from .cursor import EXHAUSTED, Cursor
from .errors import ExhaustedError
from .viewable import Viewable, cursor_of

T = TypeVar("T")

Self = TypeVar("Self", bound="FilteredView")


class FilteredCursor(Cursor[T], Generic[T]):
    """
    Yields the inner elements accepted by the predicate.

    The next accepted element is always searched for ahead of time, so
    `has_more()` can answer without consuming anything.
    """
    _cursor: Final[Cursor[T]]
    _next: Union[T, Any]
    _predicate: Final[Callable[[T], bool]]

    __slots__ = {
        "_cursor":
            "The inner cursor.",
        "_next":
            "The next accepted element, if one was found.",
        "_predicate":
            "Decides which elements are kept.",
    }

    def __init__(self: "FilteredCursor[T]", cursor: Cursor[T], predicate: Callable[[T], bool], /) -> None:
        self._cursor = cursor
        self._predicate = predicate
        self._scan()

    def _scan(self: "FilteredCursor[T]", /) -> None:
        cursor = self._cursor
        predicate = self._predicate
        while cursor.has_more():
            element = cursor.advance()
            if predicate(element):
                self._next = element
                return
        self._next = EXHAUSTED

    def advance(self: "FilteredCursor[T]", /) -> T:
        element = self._next
        if element is EXHAUSTED:
            raise ExhaustedError("cannot advance an exhausted cursor")
        self._scan()
        return element

    def has_more(self: "FilteredCursor[T]", /) -> bool:
        return self._next is not EXHAUSTED


class FilteredView(Viewable[T], Generic[T]):
    _predicate: Final[Callable[[T], bool]]
    _source: Final[Iterable[T]]

    __slots__ = {
        "_predicate":
            "Decides which elements are kept.",
        "_source":
            "The filtered sequence.",
    }

    def __init__(self: Self, source: Iterable[T], predicate: Callable[[T], bool], /) -> None:
        self._source = require_source(source, "source")
        self._predicate = require_callable(predicate, "predicate")

    def __repr__(self: Self, /) -> str:
        return f"{self._source!r}.filter({self._predicate!r})"

    def cursor(self: Self, /) -> FilteredCursor[T]:
        return FilteredCursor(cursor_of(self._source), self._predicate)
