import logging
import operator
from collections.abc import Callable, Iterable, MutableSet
from typing import Any, Final, Generic, Optional, SupportsIndex, Type, TypeVar, Union

from .arguments import require_callable, require_source
from .bounded_view import BoundedView
from .chained_view import ChainedView
from .cursor import Cursor
from .errors import NullArgumentError, OutOfRangeError, TypeMismatchError
from .filtered_view import FilteredView
from .iterable_view import IterableView
from .looping_view import LoopingView
from .skipping_view import SkippingView
from .transformed_view import TransformedView
from .unique_view import UniqueView
from .viewable import Viewable, cursor_of

T = TypeVar("T")
U = TypeVar("U")

Self = TypeVar("Self", bound="FluentView")

SEPARATOR = ", "

logger = logging.getLogger(__name__)


class FluentView(Viewable[T], Generic[T]):
    """
    Builds lazy pipelines over a sequence.

    Every chaining method returns a new `FluentView` wrapping a view of
    this one, and nothing is pulled from the source until the result is
    traversed. Each traversal starts from the beginning with fresh
    cursors, so a pipeline can be consumed any number of times as long
    as its source can.

    Traversing an infinite pipeline (e.g. after `loop()`) to completion
    never terminates; bound it with `limit()` first.

    Example:
        >>> of(range(1, 11)).transform(str).filter(lambda s: int(s) % 2 == 0).limit(3).to_list()
        ['2', '4', '6']
    """
    _source: Final[Iterable[T]]

    __slots__ = {
        "_source":
            "The wrapped sequence.",
    }

    def __init__(self: Self, source: Iterable[T], /) -> None:
        self._source = require_source(source, "source")

    def __contains__(self: Self, element: Any, /) -> bool:
        return self.contains(element)

    def __repr__(self: Self, /) -> str:
        if isinstance(self._source, Viewable) and not isinstance(self._source, IterableView):
            return repr(self._source)
        else:
            return f"{type(self).__name__}.of({self._source!r})"

    def __str__(self: Self, /) -> str:
        return "[" + SEPARATOR.join([str(x) for x in self]) + "]"

    @classmethod
    def of(cls: Type[Self], iterable: Iterable[T], /) -> "FluentView[T]":
        """Wraps an iterable, returning it unchanged if it already is a fluent view."""
        if isinstance(iterable, FluentView):
            return iterable
        else:
            return cls(iterable)

    @classmethod
    def of_elements(cls: Type[Self], *elements: T) -> "FluentView[T]":
        return cls(elements)

    # Chaining operations.

    def append(self: Self, other: Optional[Iterable[T]], /) -> "FluentView[T]":
        """Traverses `other` after this view. `None` appends nothing."""
        return FluentView(ChainedView(self, other))

    def append_elements(self: Self, *elements: T) -> "FluentView[T]":
        return self.append(elements)

    def eval(self: Self, /) -> "FluentView[T]":
        """
        Traverses this view once and returns a view over a copy of the
        elements, detached from the original source.
        """
        elements = self.to_list()
        logger.debug("froze %d elements of %r", len(elements), self)
        return FluentView(IterableView(elements))

    def filter(self: Self, predicate: Callable[[T], bool], /) -> "FluentView[T]":
        return FluentView(FilteredView(self, predicate))

    def limit(self: Self, max_count: int, /) -> "FluentView[T]":
        return FluentView(BoundedView(self, max_count))

    def loop(self: Self, /) -> "FluentView[T]":
        return FluentView(LoopingView(self))

    def skip(self: Self, skip_count: int, /) -> "FluentView[T]":
        return FluentView(SkippingView(self, skip_count))

    def transform(self: Self, transform: Callable[[T], U], /) -> "FluentView[U]":
        return FluentView(TransformedView(self, transform))

    def unique(self: Self, /) -> "FluentView[T]":
        """Drops repeated elements by value, keeping the first occurrence."""
        return FluentView(UniqueView(self))

    # Consuming operations.

    def all_match(self: Self, predicate: Callable[[T], bool], /) -> bool:
        predicate = require_callable(predicate, "predicate")
        return all(predicate(x) for x in self)

    def any_match(self: Self, predicate: Callable[[T], bool], /) -> bool:
        predicate = require_callable(predicate, "predicate")
        return any(predicate(x) for x in self)

    def contains(self: Self, element: Any, /) -> bool:
        return any(x is element or x == element for x in self)

    def copy_into(self: Self, collection: Any, /) -> None:
        """Adds every element to `collection` using its `add` or `append` method."""
        if collection is None:
            raise NullArgumentError("the collection must not be None")
        elif isinstance(collection, MutableSet):
            add = collection.add
        elif callable(getattr(collection, "append", None)):
            add = collection.append
        elif callable(getattr(collection, "add", None)):
            add = collection.add
        else:
            raise TypeMismatchError(f"expected a collection with an append or add method, got {collection!r}")
        for element in self:
            add(element)

    def count(self: Self, /) -> int:
        return sum(1 for _ in self)

    def cursor(self: Self, /) -> Cursor[T]:
        return cursor_of(self._source)

    def get(self: Self, index: int, /) -> T:
        if isinstance(index, int):
            pass
        elif isinstance(index, SupportsIndex):
            index = operator.index(index)
        else:
            raise TypeError(f"could not interpret the index as an integer, got {index!r}")
        if index < 0:
            raise OutOfRangeError(f"index must not be negative, got {index!r}")
        for i, element in enumerate(self):
            if i == index:
                return element
        raise OutOfRangeError(f"index {index!r} is out of range")

    def is_empty(self: Self, /) -> bool:
        return not self.cursor().has_more()

    def to_array(self: Self, element_type: Union[Type[T], tuple[Type[T], ...]], /) -> tuple[T, ...]:
        """Returns the elements as a tuple, checking that each is an instance of `element_type`."""
        if element_type is None:
            raise NullArgumentError("the element type must not be None")
        elif not isinstance(element_type, (type, tuple)):
            raise TypeError(f"expected a type for the element type, got {element_type!r}")
        result = []
        for element in self:
            if not isinstance(element, element_type):
                raise TypeMismatchError(f"expected elements of type {element_type!r}, got {element!r}")
            result.append(element)
        return (*result,)

    def to_list(self: Self, /) -> list[T]:
        return [*self]


def of(iterable: Iterable[T], /) -> FluentView[T]:
    return FluentView.of(iterable)


def of_elements(*elements: T) -> FluentView[T]:
    return FluentView.of_elements(*elements)
