"""In-process diagnostics channel for extension load faults.

The host decides how to show these messages; the channel only keeps the most
recent ones and forwards each report to registered subscribers.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Callable, Deque, List

from symbol_autoloader.autoload.models import FaultInfo

_log = logging.getLogger(__name__)

Subscriber = Callable[[FaultInfo], None]


class DiagnosticsChannel:
    def __init__(self, limit: int = 200):
        self._faults: Deque[FaultInfo] = deque(maxlen=max(1, limit))
        self._subscribers: List[Subscriber] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: Subscriber) -> None:
        if not callable(callback):
            raise TypeError("diagnostics subscriber must be callable")
        with self._lock:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        with self._lock:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

    def report(self, fault: FaultInfo) -> None:
        with self._lock:
            self._faults.append(fault)
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(fault)
            except Exception:
                _log.exception("diagnostics subscriber failed for %s", fault.name)

    def recent(self) -> List[FaultInfo]:
        with self._lock:
            return list(self._faults)

    def clear(self) -> None:
        with self._lock:
            self._faults.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._faults)
