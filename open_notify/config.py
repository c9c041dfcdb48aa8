"""
open-notify Configuration and Constants

This module contains the service endpoint and polling defaults used throughout
the package. Every value can be overridden through an environment variable.

Polling defaults:
    The open-notify pass predictions change slowly, so a poll period of
    10 minutes is recommended for continuous updates. One-shot requests poll
    on a short fixed cadence until the first successful fetch.

Environment variables:
    OPEN_NOTIFY_API_BASE           Base URL of the open-notify service
    OPEN_NOTIFY_POLL_MINUTES       Continuous poll period in minutes
    OPEN_NOTIFY_MIN_ELEVATION      Default minimum elevation threshold (degrees)
    OPEN_NOTIFY_ONE_SHOT_INTERVAL  Poll period of one-shot requests (seconds)
    OPEN_NOTIFY_RETRY_DELAY        Wait between one-shot slot checks (seconds)
    OPEN_NOTIFY_FETCH_TIMEOUT      Optional HTTP timeout (seconds, unset = none)
"""

import os
from typing import Optional


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return None
    return float(value)


class OpenNotifyConfig:
    API_BASE = os.getenv('OPEN_NOTIFY_API_BASE', 'http://api.open-notify.org')
    PASS_PATH = '/iss/v1/'
    POLL_MINUTES = float(os.getenv('OPEN_NOTIFY_POLL_MINUTES', '10'))
    MIN_ELEVATION = int(os.getenv('OPEN_NOTIFY_MIN_ELEVATION', '10'))
    ONE_SHOT_INTERVAL = float(os.getenv('OPEN_NOTIFY_ONE_SHOT_INTERVAL', '1.0'))
    RETRY_DELAY = float(os.getenv('OPEN_NOTIFY_RETRY_DELAY', '0.05'))
    FETCH_TIMEOUT = _optional_float('OPEN_NOTIFY_FETCH_TIMEOUT')
    USER_AGENT = 'open-notify-python/1.0'

    @property
    def poll_interval(self) -> float:
        """Continuous poll period in seconds."""
        return self.POLL_MINUTES * 60.0


config = OpenNotifyConfig()

# Observer range limits documented by open-notify
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)
ALTITUDE_RANGE_M = (0.0, 10000.0)
