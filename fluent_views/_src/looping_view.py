import logging
from collections.abc import Iterable
from typing import Final, Generic, TypeVar

from .arguments import require_source
from .cursor import Cursor
from .errors import ExhaustedError
from .viewable import Viewable, cursor_of

T = TypeVar("T")

Self = TypeVar("Self", bound="LoopingView")

logger = logging.getLogger(__name__)


class LoopingCursor(Cursor[T], Generic[T]):
    """
    Repeats the inner sequence forever by starting a fresh inner cursor
    each time the current one runs out.

    A cycle that produces no elements ends the loop for good, so looping
    over an empty sequence is itself empty instead of spinning.
    """
    _cursor: Cursor[T]
    _cycle_empty: bool
    _exhausted: bool
    _source: Final[Iterable[T]]

    __slots__ = {
        "_cursor":
            "The inner cursor for the current cycle.",
        "_cycle_empty":
            "Whether the current cycle has not produced an element yet.",
        "_exhausted":
            "Whether an empty cycle ended the loop.",
        "_source":
            "The repeated sequence.",
    }

    def __init__(self: "LoopingCursor[T]", source: Iterable[T], /) -> None:
        self._source = source
        self._cursor = cursor_of(source)
        self._cycle_empty = True
        self._exhausted = False

    def advance(self: "LoopingCursor[T]", /) -> T:
        if not self.has_more():
            raise ExhaustedError("cannot advance a loop over an empty sequence")
        self._cycle_empty = False
        return self._cursor.advance()

    def has_more(self: "LoopingCursor[T]", /) -> bool:
        while not self._exhausted:
            if self._cursor.has_more():
                return True
            elif self._cycle_empty:
                logger.debug("loop over %r produced an empty cycle, stopping", self._source)
                self._exhausted = True
            else:
                self._cursor = cursor_of(self._source)
                self._cycle_empty = True
        return False


class LoopingView(Viewable[T], Generic[T]):
    _source: Final[Iterable[T]]

    __slots__ = {
        "_source":
            "The repeated sequence.",
    }

    def __init__(self: Self, source: Iterable[T], /) -> None:
        self._source = require_source(source, "source")

    def __repr__(self: Self, /) -> str:
        return f"{self._source!r}.loop()"

    def cursor(self: Self, /) -> LoopingCursor[T]:
        return LoopingCursor(self._source)
