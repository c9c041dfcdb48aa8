"""
Test doubles for the poller collaborators.

ScriptedFetch stands in for the HTTP client: every call waits until the test
releases it with step(), then returns (or raises) the next scripted result.
"""

import json
import threading

from open_notify.errors import TransportError

RISE_1 = 1700000000
RISE_2 = 1700006000
RISE_3 = 1700012000


def payload(*passes, latitude=52.52, longitude=13.40, altitude=0.0):
    """open-notify response body for (risetime, duration[, max_elevation]) tuples."""
    response = []
    for p in passes:
        item = {"risetime": p[0], "duration": p[1]}
        if len(p) > 2:
            item["max_elevation"] = p[2]
        response.append(item)

    return json.dumps({
        "message": "success",
        "request": {
            "altitude": altitude,
            "datetime": 1699990000,
            "latitude": latitude,
            "longitude": longitude,
            "passes": len(passes),
        },
        "response": response,
    }).encode("utf-8")


class ScriptedFetch:
    """Gated fetch callable replaying a list of payloads and exceptions."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0
        self.entered = 0
        self._cond = threading.Condition()
        self._gate = threading.Semaphore(0)
        self._closed = threading.Event()

    def __call__(self, params):
        with self._cond:
            self.entered += 1
            self._cond.notify_all()

        while not self._gate.acquire(timeout=0.01):
            if self._closed.is_set():
                raise TransportError("fetch closed")

        self.calls += 1
        if not self.results:
            raise TransportError("script exhausted")
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def step(self, count=1):
        for _ in range(count):
            self._gate.release()

    def wait_entered(self, count, timeout=2.0):
        """Block until the fetch has been entered `count` times."""
        with self._cond:
            return self._cond.wait_for(lambda: self.entered >= count, timeout)

    def close(self):
        self._closed.set()


class CountingFetch:
    """Ungated fetch callable replaying results, then repeating the last one."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    def __call__(self, params):
        result = self.results[min(self.calls, len(self.results) - 1)]
        self.calls += 1
        if isinstance(result, Exception):
            raise result
        return result
