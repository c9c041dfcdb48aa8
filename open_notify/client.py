"""
open-notify HTTP Client

Performs one GET request against the open-notify ISS pass endpoint for a
ground station and returns the raw response body. Network failures and
non-200 responses are reported as TransportError.
"""

from http import HTTPStatus
from typing import Optional

import requests
from pydantic import BaseModel, ConfigDict, Field

from open_notify.config import (
    ALTITUDE_RANGE_M,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    config,
)
from open_notify.errors import TransportError
from open_notify.logging_config import get_logger

logger = get_logger(__name__)


class ObservatoryParameters(BaseModel):
    """Ground station being polled. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=LATITUDE_RANGE[0], le=LATITUDE_RANGE[1])
    longitude: float = Field(ge=LONGITUDE_RANGE[0], le=LONGITUDE_RANGE[1])
    altitude: float = Field(default=0.0, ge=ALTITUDE_RANGE_M[0], le=ALTITUDE_RANGE_M[1])
    min_elevation: int = config.MIN_ELEVATION


def build_url(params: ObservatoryParameters, base_url: Optional[str] = None) -> str:
    """Pass prediction URL for a ground station."""
    base_url = (base_url or config.API_BASE).rstrip('/')
    return (
        f"{base_url}{config.PASS_PATH}"
        f"?lat={params.latitude}&lon={params.longitude}&altitude={params.altitude}"
    )


def _status_text(response: requests.Response) -> str:
    reason = response.reason
    if not reason:
        try:
            reason = HTTPStatus(response.status_code).phrase
        except ValueError:
            reason = "Unknown Status"
    return f"{response.status_code} {reason}"


class OpenNotifyClient:
    """
    Fetches ISS pass predictions from open-notify.

    Args:
        base_url: Service base URL (default: OPEN_NOTIFY_API_BASE)
        timeout: Optional request timeout in seconds. None waits forever,
            which stalls the polling cadence while the request hangs.
        session: Optional requests session to reuse
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = config.FETCH_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url or config.API_BASE
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.setdefault("User-Agent", config.USER_AGENT)

    def fetch(self, params: ObservatoryParameters) -> bytes:
        """
        Issue one GET request for the given ground station.

        Returns:
            Raw response body

        Raises:
            TransportError: Connection failed or the server did not answer 200
        """
        url = build_url(params, self.base_url)
        logger.debug("fetching pass predictions", url=url)

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"request to {url} failed: {e}") from e

        if response.status_code != HTTPStatus.OK:
            raise TransportError(_status_text(response), status_code=response.status_code)

        return response.content

    def close(self) -> None:
        self.session.close()
