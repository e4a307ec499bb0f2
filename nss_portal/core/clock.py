# File: nss_portal/core/clock.py
import time
from datetime import date


class Clock:
    """Source of "now" for every stamped field.

    Timestamps are epoch milliseconds, calendar dates are ISO strings.
    """

    def now_ms(self) -> int:
        return int(time.time() * 1000)

    def today(self) -> str:
        return date.today().isoformat()


class FixedClock(Clock):
    def __init__(self, now_ms: int, today: str):
        self._now_ms = now_ms
        self._today = today

    def now_ms(self) -> int:
        return self._now_ms

    def today(self) -> str:
        return self._today

    def advance(self, ms: int) -> None:
        self._now_ms += ms


system_clock = Clock()
