"""Cooperative cancellation for batch runs."""

from __future__ import annotations

import threading


class CancellationToken:
    """Flag checked by the reconciler between channels.

    Safe to set from another thread or a signal handler; an in-flight
    fetch or update is never interrupted.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    def reset(self) -> None:
        self._event.clear()
