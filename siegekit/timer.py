"""A timer that stops a run after a fixed number of seconds."""

from __future__ import annotations

import threading
import time
from typing import Callable

__all__ = ["siege_timer"]


def siege_timer(
    seconds: float,
    handler: Callable[[], object],
    cancel: threading.Event | None = None,
) -> bool:
    """Block for ``seconds`` plus one, then call ``handler``.

    Setting ``cancel`` before the deadline ends the wait without calling
    the handler. Returns True if the handler was called.
    """
    if cancel is None:
        cancel = threading.Event()
    deadline = time.monotonic() + seconds + 1
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        if cancel.wait(remaining):
            return False
    handler()
    return True