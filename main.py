#!/usr/bin/env python3
"""
Console front-end for the line chat client

Connection settings come from CHAT_HOST, CHAT_PORT and CHAT_USERNAME.
"""

import logging
import sys
from typing import TextIO

from pydantic import ValidationError

from chatclient.chat.listener import ChatListener
from chatclient.chat.client import TCPChatClient
from chatclient.config import ClientConfig
from chatclient.logs.logger import logger
from chatclient.protocol.models import Message

HELP_TEXT = (
    "Commands: /login <name>, /privmsg <user> <text>, /users, /help, /quit. "
    "Anything else is sent as a public message (/joke asks for a joke)."
)


class ConsoleListener(ChatListener):
    """Prints server events to the console."""

    def __init__(self, out: TextIO = sys.stdout) -> None:
        self.out = out

    def _print(self, text: str) -> None:
        print(text, file=self.out, flush=True)

    def on_login_result(self, success: bool, error_message: str) -> None:
        self._print("✅ Logged in" if success else f"❌ Login failed: {error_message}")

    def on_disconnect(self) -> None:
        self._print("🔌 Disconnected from server, press Enter to exit")

    def on_user_list(self, usernames: list[str]) -> None:
        self._print(f"👥 Users: {', '.join(usernames) or '(none)'}")

    def on_message_received(self, message: Message) -> None:
        marker = " (private)" if message.is_private else ""
        self._print(f"💬 {message.sender}{marker}: {message.text}")

    def on_message_error(self, error_message: str) -> None:
        self._print(f"⚠️ Message not delivered: {error_message}")

    def on_command_error(self, error_message: str) -> None:
        self._print(f"⚠️ Command error: {error_message}")

    def on_supported_commands(self, commands: list[str]) -> None:
        self._print(f"ℹ️ Server supports: {' '.join(commands)}")


def handle_input(client: TCPChatClient, line: str) -> bool:
    """Act on one line typed by the user.

    Returns:
        False when the session should end.
    """
    line = line.rstrip("\r\n")
    if not line:
        return True
    command, _, rest = line.partition(" ")
    if command == "/quit":
        return False
    if command == "/login":
        if rest.strip():
            client.try_login(rest.strip())
        else:
            print("Usage: /login <name>")
    elif command == "/privmsg":
        recipient, _, text = rest.partition(" ")
        if recipient and text:
            client.send_private_message(recipient, text)
        else:
            print("Usage: /privmsg <user> <text>")
    elif command == "/users":
        client.refresh_user_list()
    elif command == "/help":
        print(HELP_TEXT)
        client.ask_supported_commands()
    else:
        client.send_public_message(line)
    return True


def run(config: ClientConfig, stdin: TextIO = sys.stdin) -> int:
    logger.log_event("app", "start", host=config.host, port=config.port)
    client = TCPChatClient()
    client.add_listener(ConsoleListener())
    if not client.connect(config.host, config.port):
        logger.log_event(
            "app", "connect_failed", level=logging.ERROR,
            host=config.host, port=config.port, error=client.get_last_error(),
        )
        return 1
    client.start_listen_thread()
    if config.username:
        client.try_login(config.username)
    print(HELP_TEXT)
    try:
        for line in stdin:
            if not client.is_connection_active() or not handle_input(client, line):
                break
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.WARNING)
    finally:
        client.disconnect()
        client.wait_for_reader()
        logger.log_event("app", "shutdown")
    return 0


def main() -> int:
    try:
        config = ClientConfig.from_env()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
