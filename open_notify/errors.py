"""
Error types for ISS spotting requests.

Every failure the poller can observe is turned into one of these exceptions
inside a tick and then published to the caller as a failed outcome carrying
the exception message.
"""

from typing import Optional

# Error message every caller sees until the first successful fetch
LOADING = "loading..."


class SpottingError(Exception):
    """Base class for failures while fetching ISS spotting predictions."""

    @property
    def message(self) -> str:
        return str(self)


class TransportError(SpottingError):
    """Network failure or non-200 response from the open-notify service."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(SpottingError):
    """Response body could not be decoded into spotting events."""
