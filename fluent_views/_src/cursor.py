import operator
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, Final, Generic, TypeVar, Union

from .cursor_protocol import CursorProtocol
from .errors import ExhaustedError

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="Cursor")

# Marks a lookahead slot that has nothing left to offer.
EXHAUSTED: Final[Any] = object()
# Marks a lookahead slot that has not been filled yet.
UNFETCHED: Final[Any] = object()


class Cursor(CursorProtocol[T_co], ABC, Generic[T_co]):
    """
    A single-use, stateful traversal over a sequence.

    `has_more()` may be asked any number of times without moving the
    cursor, and `advance()` returns the next element or raises an
    `ExhaustedError`. Cursors are also plain Python iterators.
    """

    __slots__ = ()

    def __iter__(self: Self, /) -> Self:
        return self

    def __next__(self: Self, /) -> T_co:
        if not self.has_more():
            raise StopIteration
        return self.advance()

    @abstractmethod
    def advance(self: Self, /) -> T_co:
        raise NotImplementedError("advance is a required method for cursors")

    @abstractmethod
    def has_more(self: Self, /) -> bool:
        raise NotImplementedError("has_more is a required method for cursors")


class IteratorCursor(Cursor[T], Generic[T]):
    """Adapts a Python iterator to the cursor protocol with one element of lookahead."""
    _iterator: Final[Iterator[T]]
    _pending: Union[T, Any]

    __slots__ = {
        "_iterator":
            "The adapted iterator.",
        "_pending":
            "The element fetched by the last availability check.",
    }

    def __init__(self: "IteratorCursor[T]", iterator: Iterator[T], /) -> None:
        assert isinstance(iterator, Iterator)
        self._iterator = iterator
        self._pending = UNFETCHED

    def __length_hint__(self: "IteratorCursor[T]", /) -> int:
        if self._pending is EXHAUSTED:
            return 0
        elif self._pending is UNFETCHED:
            return operator.length_hint(self._iterator)
        else:
            return operator.length_hint(self._iterator) + 1

    def advance(self: "IteratorCursor[T]", /) -> T:
        if not self.has_more():
            raise ExhaustedError("cannot advance an exhausted cursor")
        element = self._pending
        self._pending = UNFETCHED
        return element

    def has_more(self: "IteratorCursor[T]", /) -> bool:
        if self._pending is UNFETCHED:
            self._pending = next(self._iterator, EXHAUSTED)
        return self._pending is not EXHAUSTED
