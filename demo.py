"""
ISS Spotting Demonstration

This script demonstrates the two ways of querying open-notify for ISS passes:
- One-shot request: fetch once, stop the background thread, print the passes
- Continuous updates: poll in the background and report whether the ISS is
  visible right now, receiving every new prediction exactly once

Usage:
    python demo.py [--lat LAT] [--lon LON] [--alt ALT] [--watch SECONDS] [--verbose]

Arguments:
    --lat, --lon, --alt: Ground station (default: Berlin)
    --watch: Keep polling for this many seconds after the one-shot request
    --verbose: Enable debug logging
"""

import argparse
import logging
import time
from typing import List

from open_notify import blocking, find_current, find_upcoming, init, update
from open_notify.errors import SpottingError
from open_notify.logging_config import configure_logging, get_logger
from open_notify.spots import Spot

logger = get_logger(__name__)

# Berlin, Germany
BERLIN_LAT = 52.520008
BERLIN_LON = 13.404954


def report_spots(spots: List[Spot]) -> None:
    """
    Log the upcoming and current passes.

    Parameters
    ----------
    spots : list of Spot
        Spotting events returned by open-notify
    """
    logger.info(f"Received {len(spots)} passes")
    for spot in spots:
        logger.info(
            f"  rise {spot.risetime:%Y-%m-%d %H:%M:%S %Z}, "
            f"duration {int(spot.duration.total_seconds())} s"
        )

    current = find_current(spots)
    if current is not None:
        logger.info(f"ISS is visible now, until {current.settime:%H:%M:%S}")

    upcoming = find_upcoming(spots)
    if upcoming is not None:
        logger.info(f"Next pass in {upcoming.spottable()}")


def demonstrate_one_shot(lat: float, lon: float, alt: float) -> bool:
    logger.info(f"One-shot request for lat={lat} lon={lon} alt={alt}")
    try:
        spots = blocking.spot(lat, lon, alt)
    except SpottingError as e:
        logger.error(f"One-shot request failed: {e}")
        return False

    report_spots(spots)
    return True


def demonstrate_updates(lat: float, lon: float, alt: float, seconds: float) -> None:
    logger.info(f"Polling for {seconds:.0f} s")
    deadline = time.monotonic() + seconds

    with init(lat, lon, alt) as handle:
        while time.monotonic() < deadline:
            outcome = update(handle)
            if outcome is None:
                pass
            elif outcome.ok:
                report_spots(outcome.spots)
            else:
                logger.warning(f"Update: {outcome.error}")
            handle.wait(1.0)


def main():
    """Main demonstration entry point."""
    parser = argparse.ArgumentParser(description="ISS Spotting Demonstration")
    parser.add_argument("--lat", type=float, default=BERLIN_LAT, help="Latitude in degrees")
    parser.add_argument("--lon", type=float, default=BERLIN_LON, help="Longitude in degrees")
    parser.add_argument("--alt", type=float, default=0.0, help="Altitude in metres")
    parser.add_argument(
        "--watch", type=float, default=0.0, help="Seconds of continuous polling"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    logger.info("ISS Spotting Demonstration")
    logger.info("=" * 60)

    demonstrate_one_shot(args.lat, args.lon, args.alt)

    if args.watch > 0:
        logger.info("")
        demonstrate_updates(args.lat, args.lon, args.alt, args.watch)

    logger.info("=" * 60)
    logger.info("Demonstration complete")


if __name__ == "__main__":
    main()
