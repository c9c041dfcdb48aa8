"""
open-notify Wire Format

Pydantic models for the JSON document returned by the open-notify ISS pass
endpoint, and the decoder that turns a raw response body into Spot values.

Example response:
    {
      "message": "success",
      "request": {"altitude": 100, "datetime": 1465865209, "latitude": 52.52,
                  "longitude": 13.40, "passes": 5},
      "response": [{"duration": 348, "risetime": 1465929209}, ...]
    }
"""

from datetime import timedelta
from typing import List, Optional, Union

from pydantic import BaseModel, ValidationError

from open_notify.errors import DecodeError
from open_notify.spots import Spot, from_utc_timestamp


class Pass(BaseModel):
    """One predicted pass as reported by the service"""
    duration: int
    risetime: int
    max_elevation: Optional[float] = None

    def to_spot(self) -> Spot:
        return Spot(
            risetime=from_utc_timestamp(self.risetime),
            duration=timedelta(seconds=self.duration),
            max_elevation=self.max_elevation,
        )


class Request(BaseModel):
    """Echo of the request parameters"""
    altitude: float
    datetime: int
    latitude: float
    longitude: float
    passes: int


class OpenNotifyResponse(BaseModel):
    """Top-level response document"""
    message: str
    request: Request
    response: List[Pass]


def decode(raw: Union[bytes, str]) -> List[Spot]:
    """
    Decode a raw open-notify response body.

    Args:
        raw: Response body as returned by the fetch client

    Returns:
        List of spots in the order reported by the service

    Raises:
        DecodeError: Body is not valid JSON or does not match the schema
    """
    try:
        document = OpenNotifyResponse.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"invalid open-notify response: {e}") from e

    return [p.to_spot() for p in document.response]
