"""
ISS Spotting API

Continuous updates:

    handle = init(52.520008, 13.404954, 0.0)
    while True:
        outcome = update(handle)
        if outcome is None:
            pass                      # nothing new since the last call
        elif outcome.ok:
            print(find_current(outcome.spots))
        else:
            print(outcome.error)      # "loading..." until the first fetch
        time.sleep(1)

One-shot request (awaitable; see open_notify.blocking for the blocking one):

    spots = await spot(52.520008, 13.404954, 0.0)
"""

import asyncio
from typing import Generator, List, Optional

from open_notify.client import ObservatoryParameters
from open_notify.config import config
from open_notify.errors import SpottingError
from open_notify.handoff import Handle, Outcome
from open_notify.logging_config import get_logger
from open_notify.poller import DecodeFn, FetchFn, Poller
from open_notify.spots import Spot

logger = get_logger(__name__)


def init(
    latitude: float,
    longitude: float,
    altitude: float = 0.0,
    min_elevation: int = config.MIN_ELEVATION,
    poll_interval: Optional[float] = None,
    fetch: Optional[FetchFn] = None,
    decode: Optional[DecodeFn] = None,
) -> Handle:
    """
    Start a background thread that fetches ISS spotting predictions
    from open-notify periodically.

    Parameters
    ----------
    latitude : float
        Latitude of the ground station in decimal degrees, -90..90
    longitude : float
        Longitude of the ground station in decimal degrees, -180..180
    altitude : float
        Altitude of the ground station in metres, 0..10000
    min_elevation : int
        Passes reporting a lower peak elevation (degrees) are dropped
    poll_interval : float, optional
        Seconds between fetches (default: OPEN_NOTIFY_POLL_MINUTES).
        0 stops the thread after the first successful update.
    fetch, decode : callable, optional
        Replacement fetch client and response decoder

    Returns
    -------
    Handle
        Pass it to update() to receive the latest spotting outcome.
        Close it to stop the thread.
    """
    params = ObservatoryParameters(
        latitude=latitude,
        longitude=longitude,
        altitude=altitude,
        min_elevation=min_elevation,
    )
    if poll_interval is None:
        poll_interval = config.poll_interval
    return Poller(params, poll_interval, fetch=fetch, decode=decode).start()


def update(handle: Handle) -> Optional[Outcome]:
    """
    Get the latest spotting outcome the background thread has fetched.

    Returns
    -------
    None
        No update since the previous call
    Outcome
        ``outcome.spots`` on success, otherwise ``outcome.error``: the
        "loading..." sentinel before the first success, or the HTTP/JSON
        error message of the latest tick (e.g. "500 Internal Server Error")

    Notes
    -----
    Handles from ``init()`` report every failure before the first successful
    fetch as "loading..."; the cause is only logged. An HTTP or JSON error
    message reaches the caller only after one fetch has succeeded. The
    one-shot ``spot()`` and ``blocking.spot()`` do not mask failures and
    raise ``SpottingError`` on the first genuine error.
    """
    return handle.update()


def _start_once(
    latitude: float,
    longitude: float,
    altitude: float,
    min_elevation: int,
    fetch: Optional[FetchFn],
    decode: Optional[DecodeFn],
) -> Handle:
    params = ObservatoryParameters(
        latitude=latitude,
        longitude=longitude,
        altitude=altitude,
        min_elevation=min_elevation,
    )
    poller = Poller(
        params,
        config.ONE_SHOT_INTERVAL,
        fetch=fetch,
        decode=decode,
        once=True,
        loading_until_success=False,
    )
    return poller.start()


def _await_final(handle: Handle) -> Generator[None, None, List[Spot]]:
    """
    Drain the handle until a final outcome arrives.

    Yields whenever there is nothing final to act on yet; the driver decides
    how to suspend before the next check. Returns the delivered spots or
    raises SpottingError for a genuine failure. The loading sentinel is never
    final.
    """
    while True:
        outcome = handle.try_take()
        if outcome is not None:
            if outcome.ok:
                return outcome.spots
            if not outcome.loading:
                raise SpottingError(outcome.error)
        yield


def run_blocking(handle: Handle, retry_delay: float = config.RETRY_DELAY) -> List[Spot]:
    """Drive _await_final by blocking on the slot; always stops the poller."""
    steps = _await_final(handle)
    try:
        while True:
            try:
                next(steps)
            except StopIteration as done:
                return done.value
            handle.wait(retry_delay)
    finally:
        handle.close()


async def run_async(handle: Handle, retry_delay: float = config.RETRY_DELAY) -> List[Spot]:
    """Drive _await_final with cooperative sleeps; always stops the poller."""
    steps = _await_final(handle)
    try:
        while True:
            try:
                next(steps)
            except StopIteration as done:
                return done.value
            await asyncio.sleep(retry_delay)
    finally:
        # joining the thread may wait on an in-flight fetch
        await asyncio.to_thread(handle.close)


async def spot(
    latitude: float,
    longitude: float,
    altitude: float = 0.0,
    min_elevation: int = config.MIN_ELEVATION,
    fetch: Optional[FetchFn] = None,
    decode: Optional[DecodeFn] = None,
) -> List[Spot]:
    """
    Fetch ISS spotting predictions once and stop the thread right after.

    Parameters are the same as for init().

    Returns
    -------
    list of Spot
        Upcoming spotting events

    Raises
    ------
    SpottingError
        The first HTTP or JSON error message, e.g. "500 Internal Server Error"
    """
    handle = _start_once(latitude, longitude, altitude, min_elevation, fetch, decode)
    spots = await run_async(handle)
    logger.info(f"One-shot request returned {len(spots)} spots")
    return spots
