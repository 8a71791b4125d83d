"""Centralized internal error hierarchy.

These exceptions give semantic categories to failures inside the client.
Transport and parsing failures are raised at their boundary and resolved by
the owning component into return values or observer events; they never
escape to callers of the public client API.

Classes:
  ChatClientError  – Base for all internal errors.
  NetworkError     – Connection, send or receive failures on the socket.
  ParsingError     – A server line that does not match its verb's shape.
"""

from __future__ import annotations

from collections.abc import Mapping


class ChatClientError(Exception):
    """Base class for all internal client errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(ChatClientError):
    """Exception raised for network or transport layer errors.

    Covers name resolution failures, refused connections, resets and any
    other socket level problem.
    """


class ParsingError(ChatClientError):
    """Exception raised when a server line cannot be parsed for its verb.

    The offending line is available as ``data["line"]``.
    """


__all__ = [
    "ChatClientError",
    "NetworkError",
    "ParsingError",
]
