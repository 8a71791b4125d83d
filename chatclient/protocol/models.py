"""Typed events produced from inbound server lines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoginResult:
    success: bool
    error_message: str = ""


@dataclass(frozen=True, slots=True)
class Disconnected:
    pass


@dataclass(frozen=True, slots=True)
class UserList:
    usernames: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Message:
    is_private: bool
    sender: str
    text: str


@dataclass(frozen=True, slots=True)
class MessageError:
    text: str


@dataclass(frozen=True, slots=True)
class CommandError:
    text: str


@dataclass(frozen=True, slots=True)
class SupportedCommands:
    commands: tuple[str, ...]


ChatEvent = (
    LoginResult
    | Disconnected
    | UserList
    | Message
    | MessageError
    | CommandError
    | SupportedCommands
)

__all__ = [
    "ChatEvent",
    "CommandError",
    "Disconnected",
    "LoginResult",
    "Message",
    "MessageError",
    "SupportedCommands",
    "UserList",
]
