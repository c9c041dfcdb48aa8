"""
Tests for Spot values and visibility queries

Run with:
    python -m pytest tests/test_spots.py -v
"""

import unittest
from datetime import datetime, timedelta, timezone

from open_notify.spots import (
    DayTime,
    Spot,
    above_elevation,
    find_current,
    find_upcoming,
    from_utc_timestamp,
    is_visible,
)

NOON = datetime(2024, 6, 21, 12, 0, tzinfo=timezone.utc)


def make_spot(offset_minutes, duration_minutes=6, max_elevation=None):
    return Spot(
        risetime=NOON + timedelta(minutes=offset_minutes),
        duration=timedelta(minutes=duration_minutes),
        max_elevation=max_elevation,
    )


class TestSpot(unittest.TestCase):
    """Test Spot values."""

    def test_is_spottable_window(self):
        """Test the half-open visibility window."""
        spot = make_spot(0, duration_minutes=5)

        self.assertFalse(spot.is_spottable(NOON - timedelta(seconds=1)))
        self.assertTrue(spot.is_spottable(NOON))
        self.assertTrue(spot.is_spottable(NOON + timedelta(minutes=4, seconds=59)))
        self.assertFalse(spot.is_spottable(NOON + timedelta(minutes=5)))

    def test_spottable_counts_down(self):
        """Test time remaining until rise."""
        spot = make_spot(30)

        self.assertEqual(spot.spottable(NOON), timedelta(minutes=30))
        self.assertLess(spot.spottable(NOON + timedelta(hours=1)), timedelta(0))

    def test_spot_is_immutable(self):
        """Test that spots cannot be changed."""
        spot = make_spot(0)

        with self.assertRaises(Exception):
            spot.duration = timedelta(minutes=1)

    def test_clears_elevation(self):
        """Test the elevation threshold check."""
        self.assertTrue(make_spot(0, max_elevation=90.0).clears(90))
        self.assertFalse(make_spot(0, max_elevation=89.9).clears(90))
        self.assertTrue(make_spot(0).clears(90))

    def test_above_elevation(self):
        """Test filtering a list by elevation."""
        spots = [make_spot(0, max_elevation=20.0), make_spot(90, max_elevation=60.0)]

        self.assertEqual(above_elevation(spots, 45), [spots[1]])

    def test_from_utc_timestamp(self):
        """Test conversion of a unix timestamp."""
        moment = from_utc_timestamp(0)

        self.assertEqual(moment, datetime(1970, 1, 1, tzinfo=timezone.utc))
        self.assertIsNotNone(moment.tzinfo)


class TestDayTime(unittest.TestCase):
    """Test the day/night window."""

    def setUp(self):
        self.daytime = DayTime(
            sunrise=NOON - timedelta(hours=7), sunset=NOON + timedelta(hours=9)
        )

    def test_at_night(self):
        """Test times before sunrise and after sunset."""
        self.assertFalse(self.daytime.at_night(NOON))
        self.assertTrue(self.daytime.at_night(NOON - timedelta(hours=8)))
        self.assertTrue(self.daytime.at_night(NOON + timedelta(hours=10)))

    def test_from_utc(self):
        """Test construction from unix timestamps."""
        daytime = DayTime.from_utc(1718942400, 1718996400)

        self.assertLess(daytime.sunrise, daytime.sunset)
        self.assertEqual(daytime.sunrise.timestamp(), 1718942400)


class TestQueries(unittest.TestCase):
    """Test visibility queries over a list of spots."""

    def setUp(self):
        self.spots = [make_spot(-120), make_spot(-2), make_spot(600), make_spot(700)]
        self.daytime = DayTime(
            sunrise=NOON - timedelta(hours=7), sunset=NOON + timedelta(hours=9)
        )

    def test_find_current(self):
        """Test finding the spot in progress."""
        self.assertEqual(find_current(self.spots, now=NOON), self.spots[1])

    def test_find_current_none(self):
        """Test a time between passes."""
        self.assertIsNone(find_current(self.spots, now=NOON + timedelta(hours=1)))

    def test_find_current_during_day_is_filtered(self):
        """Test that a pass during the day is not current."""
        self.assertIsNone(find_current(self.spots, self.daytime, NOON))

    def test_find_upcoming(self):
        """Test finding the next spot."""
        self.assertEqual(find_upcoming(self.spots, now=NOON), self.spots[2])

    def test_find_upcoming_at_night(self):
        """Test that upcoming spots during the day are skipped."""
        # 600 min after noon is 22:00, past sunset
        self.assertEqual(find_upcoming(self.spots, self.daytime, NOON), self.spots[2])
        self.assertIsNone(
            find_upcoming(self.spots[:2], self.daytime, NOON - timedelta(hours=3))
        )

    def test_is_visible(self):
        """Test visibility without a day/night filter."""
        self.assertTrue(is_visible(self.spots, now=NOON))
        self.assertFalse(is_visible(self.spots, now=NOON + timedelta(hours=2)))
        self.assertFalse(is_visible([], now=NOON))

    def test_is_visible_takes_daytime_before_now(self):
        """Test that is_visible takes daytime before now."""
        # same argument order as find_current
        self.assertFalse(is_visible(self.spots, self.daytime, NOON))
        self.assertEqual(
            is_visible(self.spots, self.daytime, NOON),
            find_current(self.spots, self.daytime, NOON) is not None,
        )
        self.assertTrue(is_visible(self.spots, None, NOON))


if __name__ == "__main__":
    unittest.main()
