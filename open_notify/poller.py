"""
Background Poller

Runs the fetch / decode / publish / sleep cycle on its own thread and writes
every outcome into a Slot read through a Handle.

Until the first successful fetch every outcome is the "loading..." sentinel;
the underlying cause of a failed tick is only logged. After that, failures
are published with their own message. One-shot pollers skip the masking.
The poller never raises into the caller: only stop() ends it, or the first
delivery in one-shot mode.
"""

import threading
from typing import Callable, List, Optional

from open_notify import api
from open_notify.client import ObservatoryParameters, OpenNotifyClient
from open_notify.config import config
from open_notify.errors import LOADING, SpottingError
from open_notify.handoff import Handle, Outcome, Slot
from open_notify.logging_config import get_logger
from open_notify.spots import Spot, above_elevation

logger = get_logger(__name__)

FetchFn = Callable[[ObservatoryParameters], bytes]
DecodeFn = Callable[[bytes], List[Spot]]


class Poller:
    """
    Periodically fetches ISS spotting predictions for one ground station.

    Args:
        params: Ground station to poll
        interval: Seconds between ticks. 0 selects one-shot mode with the
            short one-shot cadence.
        fetch: Fetch client callable (default: OpenNotifyClient().fetch)
        decode: Response decoder (default: api.decode)
        once: Stop right after the first successful delivery
        loading_until_success: Publish failures before the first success as
            the loading sentinel. One-shot requests turn this off so the
            first genuine error reaches the caller.
    """

    def __init__(
        self,
        params: ObservatoryParameters,
        interval: float,
        fetch: Optional[FetchFn] = None,
        decode: Optional[DecodeFn] = None,
        once: bool = False,
        loading_until_success: bool = True,
    ):
        if interval < 0:
            raise ValueError(f"poll interval must be >= 0, got {interval}")

        self.params = params
        self.once = once or interval == 0
        self.interval = interval if interval > 0 else config.ONE_SHOT_INTERVAL
        self.loading_until_success = loading_until_success
        self.ticks = 0

        self._client = None
        if fetch is None:
            self._client = OpenNotifyClient()
            fetch = self._client.fetch
        self._fetch = fetch
        self._decode = decode or api.decode
        self._slot = Slot()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._succeeded = False

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def succeeded(self) -> bool:
        """Whether any tick has delivered spots yet."""
        return self._succeeded

    def start(self) -> Handle:
        """Publish the loading sentinel, spawn the thread and return the handle."""
        if self._thread is not None:
            raise RuntimeError("poller already started")

        self._slot.put(Outcome.failed(LOADING))
        self._thread = threading.Thread(
            target=self._run,
            name=f"open-notify-poller({self.params.latitude},{self.params.longitude})",
            daemon=True,
        )
        self._thread.start()
        return Handle(self._slot, self)

    def stop(self) -> None:
        """
        Signal the thread to stop and wait until it has finished.

        Safe to call repeatedly and while a fetch is in flight; in that case
        this waits for the fetch to return. Outcomes already published stay
        readable.
        """
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def tick(self) -> Outcome:
        """Run one fetch-decode cycle and return its outcome without publishing."""
        self.ticks += 1
        try:
            raw = self._fetch(self.params)
            spots = above_elevation(self._decode(raw), self.params.min_elevation)
        except SpottingError as e:
            return self._failure(e.message)
        except Exception as e:
            logger.exception(f"Unexpected error during tick {self.ticks}")
            return self._failure(f"unexpected error: {e}")

        self._succeeded = True
        logger.debug(f"Tick {self.ticks} delivered {len(spots)} spots")
        return Outcome.delivered(spots)

    def _failure(self, message: str) -> Outcome:
        logger.warning(f"Tick {self.ticks} failed: {message}")
        if self.loading_until_success and not self._succeeded:
            return Outcome.failed(LOADING)
        return Outcome.failed(message)

    def _run(self) -> None:
        logger.info(
            f"Poller started for lat={self.params.latitude} lon={self.params.longitude} "
            f"alt={self.params.altitude} every {self.interval}s"
        )
        try:
            while not self._stop.is_set():
                outcome = self.tick()
                if self._stop.is_set():
                    break
                self._slot.put(outcome)
                if outcome.ok and self.once:
                    break
                self._stop.wait(self.interval)
        finally:
            if self._client is not None:
                self._client.close()
            logger.info(f"Poller stopped after {self.ticks} ticks")
