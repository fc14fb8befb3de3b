"""
frame_clock.py
--------------
Wall-clock delta timing for the frame loop.

Timestamps are milliseconds; deltas are reported in seconds.
"""

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Debug


class FrameClock:
    """Computes elapsed seconds between consecutive frames."""

    def __init__(self):
        self.last_timestamp = None

    def seed(self, now: float):
        """
        Restart timing from `now`.

        Must be called whenever the loop (re)starts so the next delta does not
        include time spent outside the simulation (e.g. on an overlay screen).
        """
        self.last_timestamp = now
        DebugLogger.trace(f"Clock seeded at {now:.0f}ms")

    def tick(self, now: float) -> float:
        """
        Advance the clock to `now`.

        Args:
            now: Current time in milliseconds

        Returns:
            float: Seconds since the previous tick (0.0 on the first tick)
        """
        if self.last_timestamp is None:
            self.last_timestamp = now
            return 0.0

        delta_ms = max(now - self.last_timestamp, 0)
        self.last_timestamp = now

        if delta_ms > Debug.FRAME_TIME_WARNING:
            DebugLogger.trace(f"Long frame: {delta_ms:.2f}ms")

        return delta_ms / 1000.0
