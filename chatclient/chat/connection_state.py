"""Connection state and last-error tracking."""

from __future__ import annotations

import threading
from enum import Enum


class ConnectionState(Enum):
    """Enumeration of connection states."""

    DISCONNECTED = "disconnected"
    CONNECTED = "connected"


class ConnectionStateManager:
    """Tracks whether the connection is active and the most recent error.

    ``is_active`` is the value every other component checks before sending
    or reading. The last error is overwritten, never accumulated.

    Attributes:
        state (ConnectionState): Current connection state.
    """

    def __init__(self) -> None:
        self.state = ConnectionState.DISCONNECTED
        self._last_error: str | None = None
        self._lock = threading.Lock()

    @property
    def is_active(self) -> bool:
        return self.state is ConnectionState.CONNECTED

    def mark_connected(self) -> None:
        with self._lock:
            self.state = ConnectionState.CONNECTED

    def mark_disconnected(self) -> bool:
        """Move to DISCONNECTED.

        Returns:
            bool: True if the state changed, False if already disconnected.
        """
        with self._lock:
            if self.state is ConnectionState.DISCONNECTED:
                return False
            self.state = ConnectionState.DISCONNECTED
            return True

    def record_error(self, message: str) -> None:
        with self._lock:
            self._last_error = message

    def clear_error(self) -> None:
        with self._lock:
            self._last_error = None

    @property
    def last_error(self) -> str:
        """Most recent error message, or an empty string if there is none."""
        return self._last_error or ""
