"""SIGINT handling for cooperative cancellation."""

from __future__ import annotations

import asyncio
import logging
import signal
from collections.abc import Iterator
from contextlib import contextmanager

from modelsync.engine.cancellation import CancellationToken

_LOG = logging.getLogger(__name__)


@contextmanager
def stop_on_interrupt(token: CancellationToken) -> Iterator[None]:
    """Turn Ctrl-C into a stop request honoured between channels.

    Must be entered while an event loop is running.
    """
    loop = asyncio.get_running_loop()

    def _request_stop() -> None:
        _LOG.warning("Stop requested; finishing the current channel")
        token.cancel()

    try:
        loop.add_signal_handler(signal.SIGINT, _request_stop)
    except (NotImplementedError, RuntimeError):
        yield
        return
    try:
        yield
    finally:
        loop.remove_signal_handler(signal.SIGINT)
