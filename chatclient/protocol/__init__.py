"""Wire protocol: outbound command builders, inbound parser and event types."""

from . import commands  # noqa: F401
from .models import (  # noqa: F401
    ChatEvent,
    CommandError,
    Disconnected,
    LoginResult,
    Message,
    MessageError,
    SupportedCommands,
    UserList,
)
from .parser import KNOWN_VERBS, parse_event, split_verb  # noqa: F401

__all__ = [
    "ChatEvent",
    "CommandError",
    "Disconnected",
    "KNOWN_VERBS",
    "LoginResult",
    "Message",
    "MessageError",
    "SupportedCommands",
    "UserList",
    "commands",
    "parse_event",
    "split_verb",
]
