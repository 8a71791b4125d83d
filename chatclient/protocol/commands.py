"""Outbound command builders.

Each function returns one protocol line without its terminator. Arguments
are passed through verbatim after the verb, so message text may contain
further spaces.
"""

from __future__ import annotations

from ..constants import JOKE_COMMAND_TEXT


def _require_text(name: str, value: str | None) -> str:
    if value is None:
        raise TypeError(f"{name} must not be None")
    return value


def login(username: str) -> str:
    return f"login {_require_text('username', username)}"


def public_message(text: str) -> str:
    """Build a public chat message; the literal ``/joke`` asks for a joke."""
    text = _require_text("text", text)
    if text == JOKE_COMMAND_TEXT:
        return "joke"
    return f"msg {text}"


def private_message(recipient: str, text: str) -> str:
    recipient = _require_text("recipient", recipient)
    return f"privmsg {recipient} {_require_text('text', text)}"


def users() -> str:
    return "users"


def help() -> str:  # noqa: A001 - mirrors the wire verb
    return "help"


__all__ = ["help", "login", "private_message", "public_message", "users"]
