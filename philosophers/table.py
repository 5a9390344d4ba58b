"""Shared state of the table: start time, stop flag and serialised output."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

DIED = "died"


def current_millis() -> int:
    """Milliseconds from a monotonic clock."""
    return time.monotonic_ns() // 1_000_000


class Table:
    """Start time, stop flag and status printing shared by all philosophers."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = sys.stdout if out is None else out
        self.start_time = current_millis()
        self._stopped = False
        self._stop_lock = threading.Lock()
        self._print_lock = threading.Lock()

    def elapsed(self) -> int:
        """Milliseconds since the simulation started."""
        return current_millis() - self.start_time

    def stopped(self) -> bool:
        with self._stop_lock:
            return self._stopped

    def stop(self) -> None:
        with self._stop_lock:
            self._stopped = True

    def _write(self, philosopher_id: int, status: str) -> None:
        with self._print_lock:
            print(f"{self.elapsed()} {philosopher_id} {status}", file=self.out, flush=True)

    def print_status(self, philosopher_id: int, status: str) -> None:
        """Print a status line unless the simulation has stopped."""
        with self._stop_lock:
            if not self._stopped:
                self._write(philosopher_id, status)

    def announce_death(self, philosopher_id: int) -> bool:
        """Stop the simulation and report the death; False if already stopped."""
        with self._stop_lock:
            if self._stopped:
                return False
            self._stopped = True
            self._write(philosopher_id, DIED)
            return True

    def precise_sleep(self, duration: int) -> None:
        """Sleep ``duration`` milliseconds, waking early once the table stops."""
        start = current_millis()
        while current_millis() - start < duration:
            time.sleep(0.0001)
            if self.stopped():
                break