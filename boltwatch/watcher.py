"""Periodic polling of a statistics collector."""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import timedelta
from typing import Any


class Watcher:
    """Calls a collector at a fixed interval and hands its results on.

    ``collector`` is called with no arguments. Its result goes to
    ``on_update``; an exception it raises goes to ``on_error``.
    """

    def __init__(self, collector: Callable[[], Any], interval: timedelta) -> None:
        if interval <= timedelta(0):
            raise ValueError("watcher interval must be positive")
        self.collector = collector
        self.interval = interval
        self.on_update: Callable[[Any], None] | None = None
        self.on_error: Callable[[Exception], None] | None = None

    def poll(self) -> None:
        """Collect once and report the result or the error."""
        try:
            result = self.collector()
        except Exception as exc:  # noqa: BLE001 - errors are handed to on_error
            if self.on_error is not None:
                self.on_error(exc)
            return
        if self.on_update is not None:
            self.on_update(result)

    def start(self, stop_event: threading.Event) -> None:
        """Poll at once, then every interval until ``stop_event`` is set."""
        seconds = self.interval.total_seconds()
        self.poll()
        while not stop_event.wait(seconds):
            self.poll()