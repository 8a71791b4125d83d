"""Chat client subsystem package.

Contains the transport, connection state, observer registry, read-loop
dispatcher and the TCPChatClient facade that ties them together.
"""

from .client import TCPChatClient  # noqa: F401
from .connection_state import ConnectionState, ConnectionStateManager  # noqa: F401
from .dispatcher import ReaderState, ResponseDispatcher  # noqa: F401
from .listener import ChatListener  # noqa: F401
from .registry import EventHandler, ObserverRegistry  # noqa: F401
from .transport import LineTransport  # noqa: F401

__all__ = [
    "ChatListener",
    "ConnectionState",
    "ConnectionStateManager",
    "EventHandler",
    "LineTransport",
    "ObserverRegistry",
    "ReaderState",
    "ResponseDispatcher",
    "TCPChatClient",
]
