"""Observer registry for incoming chat events."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from ..protocol.models import ChatEvent

EventHandler = Callable[[ChatEvent], Any]


class ObserverRegistry:
    """Ordered set of event handlers.

    Handlers are called synchronously, in registration order, on the thread
    that publishes. There is no isolation between handlers: an exception
    raised by one propagates to the publisher and the handlers after it do
    not see that event.
    """

    def __init__(self) -> None:
        self._observers: list[EventHandler] = []
        self._lock = threading.Lock()

    def subscribe(self, observer: EventHandler) -> None:
        if observer is None or not callable(observer):
            raise TypeError("observer must be callable")
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)

    def unsubscribe(self, observer: EventHandler) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def publish(self, event: ChatEvent) -> None:
        # Snapshot so handlers may (un)subscribe during delivery
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            observer(event)

    def __len__(self) -> int:
        return len(self._observers)

    def __contains__(self, observer: object) -> bool:
        return observer in self._observers
