# aging_lfu/clock.py
import time
from datetime import datetime

import pandas as pd


class SystemClock:
    """Monotonic wall clock, seconds as float."""
    def __call__(self) -> float:
        return time.monotonic()


class ManualClock:
    """
    Clock that only moves when told to.
    Used to drive decay deterministically (no sleeping).
    """
    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class TraceClock:
    """
    Follows the timestamps of a replayed trace.
    Accepts pandas Timestamps, datetimes or plain seconds.
    """
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def set(self, ts):
        if ts is None:
            return
        self.now = to_seconds(ts)


def to_seconds(ts) -> float:
    if isinstance(ts, pd.Timestamp):
        return ts.value / 1_000_000_000
    if isinstance(ts, datetime):
        return ts.timestamp()
    return float(ts)
