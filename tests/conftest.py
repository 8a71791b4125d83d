import queue
import socket
import threading

import pytest

from chatclient.protocol.models import ChatEvent


class FakeChatServer:
    """Loopback TCP server that accepts a single client.

    Lines written by the client are collected in ``received``; tests push
    server lines with ``send`` and end the stream with ``close_client``.
    """

    def __init__(self) -> None:
        self._listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._listener.bind(("127.0.0.1", 0))
        self._listener.listen(1)
        self.host, self.port = self._listener.getsockname()
        self.received: queue.Queue[str] = queue.Queue()
        self._conn: socket.socket | None = None
        self._accepted = threading.Event()
        self._thread = threading.Thread(target=self._serve, daemon=True)
        self._thread.start()

    def _serve(self) -> None:
        try:
            conn, _ = self._listener.accept()
        except OSError:
            return
        self._conn = conn
        self._accepted.set()
        reader = conn.makefile("r", encoding="utf-8", newline="\n")
        try:
            for line in reader:
                self.received.put(line.rstrip("\n"))
        except (OSError, ValueError):
            pass
        finally:
            reader.close()

    def wait_connected(self, timeout: float = 2.0) -> None:
        assert self._accepted.wait(timeout), "client never connected"

    def send(self, *lines: str) -> None:
        self.wait_connected()
        assert self._conn is not None
        self._conn.sendall("".join(f"{line}\n" for line in lines).encode("utf-8"))

    def send_raw(self, data: bytes) -> None:
        self.wait_connected()
        assert self._conn is not None
        self._conn.sendall(data)

    def next_line(self, timeout: float = 2.0) -> str:
        return self.received.get(timeout=timeout)

    def close_client(self) -> None:
        conn = self._conn
        if conn is None:
            return
        try:
            conn.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        conn.close()

    def stop(self) -> None:
        self.close_client()
        self._listener.close()
        self._thread.join(2.0)


class EventRecorder:
    """Observer that stores every event and lets tests wait for them."""

    def __init__(self) -> None:
        self.events: list[ChatEvent] = []
        self._cond = threading.Condition()

    def __call__(self, event: ChatEvent) -> None:
        with self._cond:
            self.events.append(event)
            self._cond.notify_all()

    def of_type(self, event_type: type) -> list[ChatEvent]:
        with self._cond:
            return [e for e in self.events if isinstance(e, event_type)]

    def wait_for(self, count: int, event_type: type | None = None, timeout: float = 2.0) -> bool:
        def ready() -> bool:
            if event_type is None:
                return len(self.events) >= count
            return len([e for e in self.events if isinstance(e, event_type)]) >= count

        with self._cond:
            return self._cond.wait_for(ready, timeout)


@pytest.fixture
def chat_server():
    server = FakeChatServer()
    yield server
    server.stop()


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def closed_port():
    """A loopback port with nothing listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
