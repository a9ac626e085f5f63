from collections.abc import Iterable
from typing import Any, Final, Generic, TypeVar

from .arguments import require_source
from .cursor import Cursor
from .filtered_view import FilteredCursor
from .viewable import Viewable, cursor_of

T = TypeVar("T")

Self = TypeVar("Self", bound="UniqueView")


class UniqueCursor(FilteredCursor[T], Generic[T]):
    """
    Yields each distinct inner element once, in first-occurrence order.

    Every emitted element is remembered for the lifetime of the cursor.
    Hashable elements are looked up in a set, unhashable ones (lists,
    dicts, ...) are compared with `==` against the unhashable elements
    seen so far.
    """
    _seen: Final[set[Any]]
    _seen_unhashable: Final[list[Any]]

    __slots__ = {
        "_seen":
            "Every hashable element emitted so far.",
        "_seen_unhashable":
            "Every unhashable element emitted so far.",
    }

    def __init__(self: "UniqueCursor[T]", cursor: Cursor[T], /) -> None:
        self._seen = set()
        self._seen_unhashable = []
        super().__init__(cursor, self._is_unseen)

    def _is_unseen(self: "UniqueCursor[T]", element: T, /) -> bool:
        try:
            if element in self._seen:
                return False
        except TypeError:
            if element in self._seen_unhashable:
                return False
            self._seen_unhashable.append(element)
            return True
        self._seen.add(element)
        return True


class UniqueView(Viewable[T], Generic[T]):
    _source: Final[Iterable[T]]

    __slots__ = {
        "_source":
            "The deduplicated sequence.",
    }

    def __init__(self: Self, source: Iterable[T], /) -> None:
        self._source = require_source(source, "source")

    def __repr__(self: Self, /) -> str:
        return f"{self._source!r}.unique()"

    def cursor(self: Self, /) -> UniqueCursor[T]:
        return UniqueCursor(cursor_of(self._source))
