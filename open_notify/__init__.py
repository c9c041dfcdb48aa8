"""
open-notify ISS Spotting Package

Polls the open-notify service for predicted passes of the International
Space Station over a ground station and tells whether it is visible now.

Modules:
    spotting: init() / update() continuous polling and the awaitable spot()
    blocking: blocking one-shot spot()
    poller: background fetch / decode / publish thread
    handoff: single-slot outcome exchange between poller and caller
    client: HTTP fetch client
    api: response models and decoder
    spots: Spot values and visibility queries
"""

from open_notify.errors import LOADING, DecodeError, SpottingError, TransportError
from open_notify.handoff import Handle, Outcome
from open_notify.spots import DayTime, Spot, find_current, find_upcoming, is_visible
from open_notify.spotting import init, spot, update
from open_notify import blocking

__version__ = "1.0.0"

__all__ = [
    "LOADING",
    "DayTime",
    "DecodeError",
    "Handle",
    "Outcome",
    "Spot",
    "SpottingError",
    "TransportError",
    "blocking",
    "find_current",
    "find_upcoming",
    "init",
    "is_visible",
    "spot",
    "update",
]
