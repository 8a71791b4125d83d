from __future__ import annotations

import logging

from ..logs.logger import logger
from .internal import ChatClientError, NetworkError, ParsingError


def classify_error(error: BaseException) -> str:
    """Map an exception to the error category used in log events."""
    if isinstance(error, NetworkError | OSError):
        return "network"
    if isinstance(error, ParsingError):
        return "parsing"
    if isinstance(error, ChatClientError):
        return "internal"
    return "unknown"


def log_error(
    message: str,
    error: BaseException,
    context: dict[str, object] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Logs an error message with the associated exception details.

    The error is categorized (network, parsing, internal or unknown) and
    logged as an ``error/<category>`` event carrying the exception type and
    any structured data attached to a ChatClientError.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
        level: Logging level, ERROR unless the caller expects the failure.
    """
    fields: dict[str, object] = dict(context or {})
    if isinstance(error, ChatClientError):
        for key, value in error.data.items():
            fields.setdefault(key, value)
    logger.log_event(
        "error",
        classify_error(error),
        level=level,
        human=f"{message}: {error}",
        error_type=type(error).__name__,
        **fields,
    )
