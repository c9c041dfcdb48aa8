"""Synchronous variants of the one-shot spotting request."""

from typing import List, Optional

from open_notify.config import config
from open_notify.poller import DecodeFn, FetchFn
from open_notify.spots import Spot
from open_notify.spotting import _start_once, run_blocking


def spot(
    latitude: float,
    longitude: float,
    altitude: float = 0.0,
    min_elevation: int = config.MIN_ELEVATION,
    fetch: Optional[FetchFn] = None,
    decode: Optional[DecodeFn] = None,
) -> List[Spot]:
    """
    Fetch ISS spotting predictions once, stop the thread and return them.

    Blocks the calling thread until the first successful update or the first
    error. Raises SpottingError with the error message on failure.
    """
    handle = _start_once(latitude, longitude, altitude, min_elevation, fetch, decode)
    return run_blocking(handle)
