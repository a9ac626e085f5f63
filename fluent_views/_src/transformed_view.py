import operator
from collections.abc import Callable, Iterable
from typing import Final, Generic, TypeVar

from .arguments import require_callable, require_source
from .cursor import Cursor
from .viewable import Viewable, cursor_of

S = TypeVar("S")
T = TypeVar("T")

Self = TypeVar("Self", bound="TransformedView")


class TransformedCursor(Cursor[T], Generic[S, T]):
    _cursor: Final[Cursor[S]]
    _transform: Final[Callable[[S], T]]

    __slots__ = {
        "_cursor":
            "The inner cursor.",
        "_transform":
            "Maps each inner element to the emitted element.",
    }

    def __init__(self: "TransformedCursor[S, T]", cursor: Cursor[S], transform: Callable[[S], T], /) -> None:
        self._cursor = cursor
        self._transform = transform

    def __length_hint__(self: "TransformedCursor[S, T]", /) -> int:
        return operator.length_hint(self._cursor)

    def advance(self: "TransformedCursor[S, T]", /) -> T:
        return self._transform(self._cursor.advance())

    def has_more(self: "TransformedCursor[S, T]", /) -> bool:
        return self._cursor.has_more()


class TransformedView(Viewable[T], Generic[S, T]):
    _source: Final[Iterable[S]]
    _transform: Final[Callable[[S], T]]

    __slots__ = {
        "_source":
            "The transformed sequence.",
        "_transform":
            "Maps each inner element to the emitted element.",
    }

    def __init__(self: Self, source: Iterable[S], transform: Callable[[S], T], /) -> None:
        self._source = require_source(source, "source")
        self._transform = require_callable(transform, "transform")

    def __repr__(self: Self, /) -> str:
        return f"{self._source!r}.transform({self._transform!r})"

    def cursor(self: Self, /) -> TransformedCursor[S, T]:
        return TransformedCursor(cursor_of(self._source), self._transform)
