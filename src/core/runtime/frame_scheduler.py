"""
frame_scheduler.py
------------------
Once-per-refresh callback scheduling on top of pygame.

Responsibilities
----------------
- Hold the callbacks requested for the next display refresh
- Pace refreshes with pygame.time.Clock
- Forward pending pygame events to the InputBridge
- Present the finished frame
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Display


class FrameScheduler:
    """Runs requested frame callbacks once per display refresh."""

    def __init__(self, input_bridge, fps: int = Display.FPS,
                 time_source=None, present=None):
        """
        Args:
            input_bridge: InputBridge receiving host events
            fps: Target refresh rate
            time_source: Callable returning milliseconds (default pygame ticks)
            present: Callable flipping the finished frame to the window
        """
        self.input_bridge = input_bridge
        self.fps = fps
        self._time_source = time_source or pygame.time.get_ticks
        self._present = present
        self._pending = []
        self.clock = None
        self.running = False
        self.frame_count = 0

        DebugLogger.init_entry("FrameScheduler")
        DebugLogger.init_sub(f"Target FPS: {fps}", level=1)

    # ===========================================================
    # Scheduling
    # ===========================================================

    def now(self) -> float:
        """Current time in milliseconds."""
        return float(self._time_source())

    def request_frame(self, callback) -> None:
        """
        Run `callback` on the next refresh.

        Requesting a callback that is already pending is a no-op, so resuming
        a loop that is still scheduled never forks it into two loops.
        """
        if callback not in self._pending:
            self._pending.append(callback)

    def cancel_frame(self, callback) -> None:
        if callback in self._pending:
            self._pending.remove(callback)

    def has_pending(self, callback=None) -> bool:
        if callback is None:
            return bool(self._pending)
        return callback in self._pending

    def run_frame(self) -> None:
        """Invoke every callback requested for this refresh."""
        callbacks, self._pending = self._pending, []
        for callback in callbacks:
            callback()
        self.frame_count += 1

    # ===========================================================
    # Host Loop
    # ===========================================================

    def pump_events(self) -> None:
        """Forward pending host events; stop on window close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                DebugLogger.action("Quit signal received")
                self.stop()
                break
            self.input_bridge.dispatch(event)

    def run(self) -> None:
        """Block, refreshing until stopped or no frame is requested."""
        DebugLogger.section("Frame Loop")
        self.clock = pygame.time.Clock()
        self.running = True

        while self.running:
            self.clock.tick(self.fps)
            self.pump_events()
            if not self.running:
                break

            if not self._pending:
                DebugLogger.warn("No frame requested, stopping")
                self.stop()
                break

            self.run_frame()
            if self._present:
                self._present()

        DebugLogger.system(f"Frame loop stopped after {self.frame_count} frames")

    def stop(self) -> None:
        self.running = False
