"""Time-derived order identifiers."""

import time
from threading import Lock


class OrderIdGenerator:
    """Issue integer order ids derived from the wall clock in milliseconds.

    Ids are strictly increasing for one generator: when the clock has not
    moved past the last id, the next id is ``last + 1``. They are practically
    unique, not guaranteed unique across processes.
    """

    def __init__(self, clock=time.time):
        self._clock = clock
        self._last = 0
        self._lock = Lock()

    def next_id(self) -> int:
        with self._lock:
            candidate = int(self._clock() * 1000)
            self._last = max(candidate, self._last + 1)
            return self._last
