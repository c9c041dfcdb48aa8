"""
Single-slot handoff between the poller thread and the caller.

The poller is the only writer. A new outcome replaces any outcome the caller
has not read yet, so the caller always sees the freshest prediction and never
works through a backlog. Reading clears the slot: an outcome is handed out at
most once.
"""

import threading
from dataclasses import dataclass
from typing import List, Optional

from open_notify.errors import LOADING
from open_notify.spots import Spot


@dataclass(frozen=True)
class Outcome:
    """Result of one poll: either a list of spots or an error message."""

    spots: Optional[List[Spot]] = None
    error: Optional[str] = None

    @classmethod
    def delivered(cls, spots: List[Spot]) -> "Outcome":
        return cls(spots=list(spots))

    @classmethod
    def failed(cls, message: str) -> "Outcome":
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def loading(self) -> bool:
        """True for the sentinel published before the first successful fetch."""
        return self.error == LOADING


class Slot:
    """One-place mailbox with overwrite-on-full semantics."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._outcome: Optional[Outcome] = None

    def put(self, outcome: Outcome) -> None:
        with self._cond:
            self._outcome = outcome
            self._cond.notify_all()

    def take(self) -> Optional[Outcome]:
        with self._cond:
            outcome, self._outcome = self._outcome, None
            return outcome

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until an unread outcome is present or the timeout expires."""
        with self._cond:
            return self._cond.wait_for(lambda: self._outcome is not None, timeout)


class Handle:
    """
    Caller side of a running poller.

    Returned by init(); pass it to update() or call try_take() directly.
    Closing the handle stops the poller thread.
    """

    def __init__(self, slot: Slot, poller):
        self._slot = slot
        self._poller = poller

    def try_take(self) -> Optional[Outcome]:
        """
        Non-blocking read.

        Returns:
            None if nothing was published since the last read, else the most
            recent outcome (never one that was already returned)
        """
        return self._slot.take()

    update = try_take

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._slot.wait(timeout)

    @property
    def running(self) -> bool:
        return self._poller.running

    def close(self) -> None:
        """Stop the poller and wait for its thread to finish."""
        self._poller.stop()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
