import signal
import sys
import threading
from contextlib import contextmanager
from typing import Iterator


class CancellationToken:
    """A flag a long-running loop polls to stop early and keep its results."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


@contextmanager
def interrupt_handler(token: CancellationToken) -> Iterator[CancellationToken]:
    """
    Cancel ``token`` on Ctrl+C instead of raising KeyboardInterrupt.

    The previous SIGINT handler is restored on exit. Must be entered from the
    main thread, as required by :func:`signal.signal`.
    """

    def _handle(signum, frame):
        token.cancel()
        print(
            "\nCtrl+C detected, finishing the current image and saving...",
            file=sys.stderr,
        )

    previous = signal.signal(signal.SIGINT, _handle)
    try:
        yield token
    finally:
        signal.signal(signal.SIGINT, previous)
