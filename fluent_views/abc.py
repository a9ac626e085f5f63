from ._src.cursor import Cursor
from ._src.cursor_protocol import CursorProtocol
from ._src.viewable import Viewable

__all__ = [
    "Cursor",
    "CursorProtocol",
    "Viewable",
]
