from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Generic, Optional, TypeVar

from .cursor import Cursor, IteratorCursor
from .errors import NullArgumentError, TypeMismatchError

T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="Viewable")


class Viewable(Iterable[T_co], ABC, Generic[T_co]):
    """
    A sequence that can hand out fresh cursors on demand.

    A viewable never changes while it is traversed: all traversal state
    lives in the cursors it produces, so every call to `cursor()` starts
    over from the beginning.
    """

    __slots__ = ()

    def __iter__(self: Self, /) -> Cursor[T_co]:
        return self.cursor()

    @abstractmethod
    def cursor(self: Self, /) -> Cursor[T_co]:
        raise NotImplementedError("cursor is a required method for viewables")


def cursor_of(source: Optional[Iterable[T_co]], /) -> Cursor[T_co]:
    """Returns a fresh cursor over any viewable or plain iterable."""
    if source is None:
        raise NullArgumentError("cannot traverse None")
    elif isinstance(source, Viewable):
        return source.cursor()
    elif isinstance(source, Iterable):
        return IteratorCursor(iter(source))
    else:
        raise TypeMismatchError(f"expected an iterable, got {source!r}")
