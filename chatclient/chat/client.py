"""Chat client facade used by console or GUI front-ends."""

from __future__ import annotations

import logging

from ..constants import CHAT_READER_JOIN_TIMEOUT
from ..logs.logger import logger
from ..protocol import commands
from ..protocol.models import Disconnected
from .connection_state import ConnectionStateManager
from .dispatcher import ResponseDispatcher
from .registry import EventHandler, ObserverRegistry
from .transport import LineTransport


class TCPChatClient:
    """Client for the line based chat protocol.

    One instance talks to one server at a time. Events from the server are
    delivered to the registered listeners on the reader thread started by
    ``start_listen_thread``; every send happens on the caller's thread.
    """

    def __init__(self) -> None:
        self.registry = ObserverRegistry()
        self.state = ConnectionStateManager()
        self.transport = self._new_transport()
        self.dispatcher: ResponseDispatcher | None = None
        self.username: str | None = None

    def _new_transport(self) -> LineTransport:
        transport = LineTransport(self.state)
        transport.on_disconnect = self._on_disconnect
        return transport

    def connect(self, host: str, port: int) -> bool:
        """Connect to a chat server.

        Args:
            host: Host name or IP address of the chat server.
            port: TCP port of the chat server.

        Returns:
            True on success; on failure ``get_last_error()`` explains why.
        """
        if self.transport.is_active:
            # The live transport rejects it and records the error
            return self.transport.connect(host, port)
        self.transport = self._new_transport()
        if not self.transport.connect(host, port):
            return False
        self.dispatcher = ResponseDispatcher(self.transport, self.registry)
        return True

    def disconnect(self) -> None:
        """Close the connection. Safe to call repeatedly and from any thread."""
        self.transport.disconnect()

    def is_connection_active(self) -> bool:
        return self.state.is_active

    def get_last_error(self) -> str:
        """Return the last error message, or "" if there has been none."""
        return self.state.last_error

    def start_listen_thread(self) -> bool:
        """Start reading server commands in a background thread.

        Returns:
            False if there is no connection or its reader already ran.
        """
        if self.dispatcher is None:
            logger.log_event(
                "client", "listen_without_connection", level=logging.WARNING,
                user=self.username,
            )
            return False
        return self.dispatcher.start()

    def wait_for_reader(self, timeout: float | None = CHAT_READER_JOIN_TIMEOUT) -> bool:
        if self.dispatcher is None:
            return True
        return self.dispatcher.join(timeout)

    # ------------------------- Outbound commands ------------------------- #
    def _send_command(self, command: str) -> bool:
        return self.transport.send_line(command)

    def try_login(self, username: str) -> None:
        """Send a login request followed by a user list refresh."""
        self.username = username
        logger.log_event("client", "login_attempt", user=username)
        self._send_command(commands.login(username))
        self.refresh_user_list()

    def send_public_message(self, message: str) -> bool:
        return self._send_command(commands.public_message(message))

    def send_private_message(self, recipient: str, message: str) -> bool:
        # Silently skipped while disconnected
        if not self.is_connection_active():
            return False
        return self._send_command(commands.private_message(recipient, message))

    def refresh_user_list(self) -> bool:
        return self._send_command(commands.users())

    def ask_supported_commands(self) -> bool:
        return self._send_command(commands.help())

    # ------------------------- Listeners ------------------------- #
    def add_listener(self, listener: EventHandler) -> None:
        self.registry.subscribe(listener)

    def remove_listener(self, listener: EventHandler) -> None:
        self.registry.unsubscribe(listener)

    def _on_disconnect(self) -> None:
        logger.log_event("client", "disconnected", user=self.username)
        self.registry.publish(Disconnected())
