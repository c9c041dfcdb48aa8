"""
ISS Spotting Events

A Spot is one predicted visibility window of the ISS over a ground station.
This module also provides the "is it visible now" queries over a list of
spots, optionally restricted to night time with a DayTime window.

All datetimes handed out are timezone-aware and expressed in local time.
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict


def from_utc_timestamp(timestamp: int) -> datetime:
    """Convert a UNIX timestamp (UTC seconds) to an aware local datetime."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).astimezone()


def local_now() -> datetime:
    return datetime.now(timezone.utc).astimezone()


class DayTime(BaseModel):
    """Sunrise and sunset of one day at the ground station."""

    model_config = ConfigDict(frozen=True)

    sunrise: datetime
    sunset: datetime

    @classmethod
    def from_utc(cls, sunrise_utc: int, sunset_utc: int) -> "DayTime":
        return cls(
            sunrise=from_utc_timestamp(sunrise_utc),
            sunset=from_utc_timestamp(sunset_utc),
        )

    def at_night(self, moment: datetime) -> bool:
        return moment < self.sunrise or moment > self.sunset


class Spot(BaseModel):
    """Predicted ISS pass: rise time, duration and optional peak elevation."""

    model_config = ConfigDict(frozen=True)

    risetime: datetime
    duration: timedelta
    max_elevation: Optional[float] = None

    @property
    def settime(self) -> datetime:
        return self.risetime + self.duration

    def spottable(self, now: Optional[datetime] = None) -> timedelta:
        """Time left until the ISS rises (negative once it has risen)."""
        return self.risetime - (now or local_now())

    def is_spottable(self, now: Optional[datetime] = None) -> bool:
        now = now or local_now()
        return self.risetime <= now < self.settime

    def at_night(self, daytime: DayTime) -> bool:
        return daytime.at_night(self.risetime)

    def clears(self, min_elevation: int) -> bool:
        """
        Check the pass against a minimum elevation threshold.

        Passes without a reported elevation cannot be judged and are kept.
        """
        if self.max_elevation is None:
            return True
        return self.max_elevation >= min_elevation


def above_elevation(spots: Iterable[Spot], min_elevation: int) -> List[Spot]:
    return [spot for spot in spots if spot.clears(min_elevation)]


def find_upcoming(
    spots: Iterable[Spot],
    daytime: Optional[DayTime] = None,
    now: Optional[datetime] = None,
) -> Optional[Spot]:
    """
    Find the first spot that has not risen yet.

    Args:
        spots: Spotting events in chronological order
        daytime: If given, only passes rising at night qualify
        now: Reference time (default: now)

    Returns:
        The next upcoming spot, or None
    """
    now = now or local_now()
    for spot in spots:
        if spot.risetime > now:
            if daytime is None or spot.at_night(daytime):
                return spot
    return None


def find_current(
    spots: Iterable[Spot],
    daytime: Optional[DayTime] = None,
    now: Optional[datetime] = None,
) -> Optional[Spot]:
    """
    Find the spot in progress at the reference time.

    Args:
        spots: Spotting events in chronological order
        daytime: If given, a pass in progress during the day does not count
        now: Reference time (default: now)

    Returns:
        The spot currently in progress, or None
    """
    now = now or local_now()
    for spot in spots:
        if spot.is_spottable(now):
            if daytime is None or spot.at_night(daytime):
                return spot
            return None
    return None


def is_visible(
    spots: Iterable[Spot],
    daytime: Optional[DayTime] = None,
    now: Optional[datetime] = None,
) -> bool:
    """True if the ISS is spottable right now from the polled location."""
    return find_current(spots, daytime, now) is not None
