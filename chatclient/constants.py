"""
Configuration constants for the line chat client

This module contains the configurable constants used throughout the client.
Each numeric constant can be overridden by setting an environment variable
with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Server endpoint defaults (used when CHAT_HOST / CHAT_PORT are not configured)
CHAT_DEFAULT_HOST = os.getenv("CHAT_DEFAULT_HOST", "localhost")
CHAT_DEFAULT_PORT = _get_env_int("CHAT_DEFAULT_PORT", 1300)

# Seconds allowed for the TCP handshake; reads block without timeout afterwards
CHAT_CONNECT_TIMEOUT = _get_env_float("CHAT_CONNECT_TIMEOUT", 10.0)

# Seconds to wait for the reader thread when tearing a session down
CHAT_READER_JOIN_TIMEOUT = _get_env_float("CHAT_READER_JOIN_TIMEOUT", 2.0)

# Wire encoding and line terminator for outbound commands
LINE_ENCODING = "utf-8"
LINE_TERMINATOR = "\n"

# Public message text that is sent as the bare "joke" command
JOKE_COMMAND_TEXT = "/joke"
