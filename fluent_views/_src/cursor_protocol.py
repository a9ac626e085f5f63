from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)

Self = TypeVar("Self", bound="CursorProtocol")


@runtime_checkable
class CursorProtocol(Protocol[T_co]):

    __slots__ = ()

    def has_more(self: Self, /) -> bool: ...
    def advance(self: Self, /) -> T_co: ...
