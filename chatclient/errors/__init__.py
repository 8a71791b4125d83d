"""Error hierarchy and error logging helpers."""

from .handling import classify_error, log_error  # noqa: F401
from .internal import ChatClientError, NetworkError, ParsingError  # noqa: F401

__all__ = [
    "ChatClientError",
    "NetworkError",
    "ParsingError",
    "classify_error",
    "log_error",
]
