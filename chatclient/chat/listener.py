"""Listener base class with one hook per event type.

Subclass ``ChatListener`` and override the hooks you care about; the
instance itself is a valid observer for ``TCPChatClient.add_listener``.
"""

from __future__ import annotations

from ..protocol.models import (
    ChatEvent,
    CommandError,
    Disconnected,
    LoginResult,
    Message,
    MessageError,
    SupportedCommands,
    UserList,
)


class ChatListener:
    def __call__(self, event: ChatEvent) -> None:
        if isinstance(event, LoginResult):
            self.on_login_result(event.success, event.error_message)
        elif isinstance(event, Disconnected):
            self.on_disconnect()
        elif isinstance(event, UserList):
            self.on_user_list(list(event.usernames))
        elif isinstance(event, Message):
            self.on_message_received(event)
        elif isinstance(event, MessageError):
            self.on_message_error(event.text)
        elif isinstance(event, CommandError):
            self.on_command_error(event.text)
        elif isinstance(event, SupportedCommands):
            self.on_supported_commands(list(event.commands))

    def on_login_result(self, success: bool, error_message: str) -> None:
        """Login finished, successfully or not."""

    def on_disconnect(self) -> None:
        """The connection was closed, by either side."""

    def on_user_list(self, usernames: list[str]) -> None:
        """The server sent the list of connected users."""

    def on_message_received(self, message: Message) -> None:
        """A public or private chat message arrived."""

    def on_message_error(self, error_message: str) -> None:
        """The server could not deliver our message."""

    def on_command_error(self, error_message: str) -> None:
        """The server did not understand our command."""

    def on_supported_commands(self, commands: list[str]) -> None:
        """The server answered a help request."""
