"""Line oriented TCP transport for one chat server connection."""

from __future__ import annotations

import logging
import socket
import threading
from collections.abc import Callable
from typing import TextIO

from ..constants import CHAT_CONNECT_TIMEOUT, LINE_ENCODING, LINE_TERMINATOR
from ..errors.handling import log_error
from ..errors.internal import NetworkError
from ..logs.logger import logger
from .connection_state import ConnectionStateManager


class LineTransport:
    """Owns the socket to a single server and moves whole lines over it.

    Attributes:
        state (ConnectionStateManager): Connected flag and last error.
        on_disconnect (Callable[[], None] | None): Invoked once, by whichever
            thread actually closes the connection.
    """

    def __init__(
        self,
        state: ConnectionStateManager | None = None,
        connect_timeout: float = CHAT_CONNECT_TIMEOUT,
    ) -> None:
        self.state = state or ConnectionStateManager()
        self.connect_timeout = connect_timeout
        self.on_disconnect: Callable[[], None] | None = None
        self.host: str | None = None
        self.port: int | None = None
        self._sock: socket.socket | None = None
        self._reader: TextIO | None = None
        self._lock = threading.Lock()
        self._send_lock = threading.Lock()

    @property
    def is_active(self) -> bool:
        return self._sock is not None and self.state.is_active

    def connect(self, host: str, port: int) -> bool:
        """Open a TCP connection to host:port.

        Returns:
            bool: True on success. Failures are logged and recorded as the
            last error, never raised.
        """
        with self._lock:
            if self._sock is not None:
                self.state.record_error("Already connected")
                logger.log_event(
                    "transport", "already_connected", level=logging.WARNING,
                    host=self.host, port=self.port,
                )
                return False
            logger.log_event(
                "transport", "connecting", level=logging.DEBUG, host=host, port=port
            )
            try:
                sock = socket.create_connection((host, port), timeout=self.connect_timeout)
            except (OSError, UnicodeError) as e:
                # UnicodeError: host name rejected by the idna codec
                err = NetworkError(
                    f"Could not connect to {host}:{port}: {e}",
                    data={"host": host, "port": port},
                )
                self.state.record_error(str(err))
                log_error("Connect failed", err, level=logging.WARNING)
                return False
            # Reads block until data arrives or the socket is shut down.
            sock.settimeout(None)
            self._sock = sock
            self._reader = sock.makefile(
                "r", encoding=LINE_ENCODING, errors="replace", newline="\n"
            )
            self.host, self.port = host, port
            self.state.clear_error()
            self.state.mark_connected()
        logger.log_event("transport", "connected", host=host, port=port)
        return True

    def disconnect(self) -> bool:
        """Close the connection if it is open.

        Only the first caller tears the socket down and runs ``on_disconnect``;
        every other call, concurrent or later, returns False immediately.
        """
        with self._lock:
            sock, reader = self._sock, self._reader
            if sock is None:
                return False
            self._sock = None
            self._reader = None
            self.state.mark_disconnected()

        try:
            # Wakes a reader thread blocked in recv().
            sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass  # peer already gone
        try:
            if reader is not None:
                reader.close()
            sock.close()
        except OSError as e:
            log_error("Socket close failed", e, level=logging.WARNING)
        logger.log_event("transport", "disconnected", host=self.host, port=self.port)

        if self.on_disconnect is not None:
            self.on_disconnect()
        return True

    def send_line(self, text: str) -> bool:
        """Write one line to the server.

        Returns:
            bool: False when the connection is closed or the write failed.
        """
        sock = self._sock
        if sock is None or not self.is_active:
            logger.log_event(
                "transport", "send_on_closed", level=logging.WARNING, line=text
            )
            return False
        data = (text + LINE_TERMINATOR).encode(LINE_ENCODING)
        try:
            with self._send_lock:
                sock.sendall(data)
        except OSError as e:
            self.state.record_error(f"Send failed: {e}")
            log_error("Send failed", e, context={"line": text}, level=logging.WARNING)
            return False
        logger.log_event("transport", "sent", level=logging.DEBUG, line=text)
        return True

    def read_line(self) -> str | None:
        """Block until a full line arrives.

        Returns:
            str | None: The line without its terminator, or None once the
            stream has ended. A None result leaves the transport disconnected.
        """
        reader = self._reader
        line = ""
        if reader is not None:
            try:
                line = reader.readline()
            except (OSError, ValueError) as e:
                # ValueError: the file was closed under us by disconnect().
                if self.is_active:
                    self.state.record_error(f"Read failed: {e}")
                    log_error("Read failed", e, level=logging.WARNING)
                line = ""
        if not line:
            if self.is_active:
                logger.log_event("transport", "stream_closed", host=self.host, port=self.port)
            self.disconnect()
            return None
        return line.rstrip("\r\n")
