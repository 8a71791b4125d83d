"""Background read loop: parse server lines and publish events."""

from __future__ import annotations

import logging
import threading
from enum import Enum, auto

from ..errors.handling import log_error
from ..errors.internal import ParsingError
from ..logs.logger import logger
from ..protocol.parser import parse_event
from .registry import ObserverRegistry
from .transport import LineTransport


class ReaderState(Enum):
    IDLE = auto()
    READING = auto()
    STOPPED = auto()


class ResponseDispatcher:
    """Runs one read loop for one connection.

    The loop reads lines until the transport reports end of stream, turns
    each line into an event and publishes it. STOPPED is terminal; a new
    connection gets a new dispatcher.
    """

    def __init__(
        self,
        transport: LineTransport,
        registry: ObserverRegistry,
        name: str = "chat-reader",
    ) -> None:
        self.transport = transport
        self.registry = registry
        self.name = name
        self.state = ReaderState.IDLE
        self._thread: threading.Thread | None = None
        self._state_lock = threading.Lock()

    def start(self) -> bool:
        """Start the read loop on a daemon thread.

        Returns:
            bool: False if the loop was already started (or has finished).
        """
        with self._state_lock:
            if self.state is not ReaderState.IDLE:
                logger.log_event(
                    "dispatcher", "already_started", level=logging.WARNING,
                    state=self.state.name,
                )
                return False
            self.state = ReaderState.READING
            self._thread = threading.Thread(target=self.run, name=self.name, daemon=True)
        self._thread.start()
        logger.log_event("dispatcher", "started", level=logging.DEBUG, thread=self.name)
        return True

    def run(self) -> None:
        try:
            while self.transport.is_active:
                # read_line() closes the transport at end of stream, which
                # publishes Disconnected from this thread.
                line = self.transport.read_line()
                if line is None:
                    break
                self.process_line(line)
        except Exception as e:  # noqa: BLE001
            logger.log_event(
                "dispatcher",
                "loop_error",
                level=logging.ERROR,
                thread=self.name,
                error=str(e),
                error_type=type(e).__name__,
            )
        finally:
            try:
                self.transport.disconnect()
            except Exception as e:  # noqa: BLE001
                self._log_listener_error("Disconnected", e)
            self.state = ReaderState.STOPPED
            logger.log_event("dispatcher", "stopped", level=logging.DEBUG, thread=self.name)

    def process_line(self, line: str) -> None:
        """Parse one line and publish its event; never raises."""
        logger.log_event("dispatcher", "raw_line", level=logging.DEBUG, line=line)
        try:
            event = parse_event(line)
        except ParsingError as e:
            log_error("Dropped malformed line", e, level=logging.WARNING)
            return
        if event is None:
            logger.log_event("dispatcher", "unknown_verb", level=logging.DEBUG, line=line)
            return
        try:
            self.registry.publish(event)
        except Exception as e:  # noqa: BLE001
            self._log_listener_error(type(event).__name__, e)

    @staticmethod
    def _log_listener_error(event_name: str, error: Exception) -> None:
        logger.log_event(
            "dispatcher",
            "listener_error",
            level=logging.ERROR,
            event=event_name,
            error=str(error),
            error_type=type(error).__name__,
        )

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the read loop thread.

        Returns:
            bool: True if the thread has finished (or was never started).
        """
        thread = self._thread
        if thread is None or thread is threading.current_thread():
            return thread is None
        thread.join(timeout)
        return not thread.is_alive()

    @property
    def is_running(self) -> bool:
        return self.state is ReaderState.READING
