"""Inbound line parsing utilities."""

from __future__ import annotations

from collections.abc import Callable

from ..errors.internal import ParsingError
from .models import (
    ChatEvent,
    CommandError,
    LoginResult,
    Message,
    MessageError,
    SupportedCommands,
    UserList,
)


def split_verb(line: str) -> tuple[str, str]:
    """Split a line into its verb and the remaining text.

    The rest is an empty string when the line holds no space.
    """
    verb, _, rest = line.partition(" ")
    return verb, rest


def _split_list(rest: str) -> tuple[str, ...]:
    return tuple(token for token in rest.split(" ") if token)


def _build_message(is_private: bool, line: str, rest: str) -> Message:
    sender, sep, text = rest.partition(" ")
    if not sender or not sep:
        raise ParsingError(
            "Message line lacks sender or text",
            data={"line": line},
        )
    return Message(is_private=is_private, sender=sender, text=text)


_BUILDERS: dict[str, Callable[[str, str], ChatEvent]] = {
    "loginok": lambda _line, _rest: LoginResult(success=True, error_message=""),
    "loginerr": lambda _line, rest: LoginResult(success=False, error_message=rest),
    "msgerr": lambda _line, rest: MessageError(text=rest),
    "cmderr": lambda _line, rest: CommandError(text=rest),
    "supported": lambda _line, rest: SupportedCommands(commands=_split_list(rest)),
    "users": lambda _line, rest: UserList(usernames=_split_list(rest)),
    "msg": lambda line, rest: _build_message(False, line, rest),
    "privmsg": lambda line, rest: _build_message(True, line, rest),
}

KNOWN_VERBS = frozenset(_BUILDERS)


def parse_event(line: str) -> ChatEvent | None:
    """Turn one server line into an event.

    Returns None for verbs the client does not know. Raises ParsingError when
    a known verb is followed by text of the wrong shape.
    """
    verb, rest = split_verb(line)
    builder = _BUILDERS.get(verb)
    if builder is None:
        return None
    return builder(line, rest)


__all__ = ["KNOWN_VERBS", "parse_event", "split_verb"]
