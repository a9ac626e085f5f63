"""
Lazy, composable views over Python iterables. Filtering, bounding,
skipping, looping, transforming, deduplicating and chaining views can be
stacked arbitrarily deep, and nothing is pulled from the source until a
consumer asks for it. Every traversal of a view starts over with fresh
cursors, so one pipeline can be consumed many times.
"""
from . import abc
from ._src.bounded_view import BoundedView
from ._src.chained_view import ChainedView
from ._src.errors import (
    ExhaustedError,
    FluentViewError,
    InvalidArgumentError,
    NullArgumentError,
    OutOfRangeError,
    TypeMismatchError,
)
from ._src.filtered_view import FilteredView
from ._src.fluent_view import FluentView, of, of_elements
from ._src.iterable_view import IterableView
from ._src.looping_view import LoopingView
from ._src.skipping_view import SkippingView
from ._src.transformed_view import TransformedView
from ._src.unique_view import UniqueView
from ._src.viewable import cursor_of

__all__ = [
    "abc",
    "BoundedView",
    "ChainedView",
    "ExhaustedError",
    "FilteredView",
    "FluentView",
    "FluentViewError",
    "InvalidArgumentError",
    "IterableView",
    "LoopingView",
    "NullArgumentError",
    "OutOfRangeError",
    "SkippingView",
    "TransformedView",
    "TypeMismatchError",
    "UniqueView",
    "cursor_of",
    "of",
    "of_elements",
]

__version__ = "1.0.0"
