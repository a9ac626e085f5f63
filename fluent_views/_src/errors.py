__all__ = [
    "FluentViewError",
    "NullArgumentError",
    "InvalidArgumentError",
    "ExhaustedError",
    "OutOfRangeError",
    "TypeMismatchError",
]


class FluentViewError(Exception):
    """Base class for every error raised by fluent views."""


class NullArgumentError(FluentViewError, TypeError):
    """A required sequence, predicate, or transform was None."""


class InvalidArgumentError(FluentViewError, ValueError):
    """A bound or skip count was negative."""


class ExhaustedError(FluentViewError, LookupError):
    """A cursor was advanced past its last element."""


class OutOfRangeError(FluentViewError, IndexError):
    """An index was not reached before the sequence ran out."""


class TypeMismatchError(FluentViewError, TypeError):
    """An element or container does not have the expected type."""
