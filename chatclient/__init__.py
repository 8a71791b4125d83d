"""Client for a minimal line oriented chat protocol."""

from .chat import ChatListener, TCPChatClient  # noqa: F401
from .config import ClientConfig  # noqa: F401

__all__ = ["ChatListener", "ClientConfig", "TCPChatClient"]
