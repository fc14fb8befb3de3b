"""
test_frame_scheduler.py
-----------------------
Tests for FrameScheduler callback scheduling and host event pumping.
"""

import pygame
from unittest.mock import MagicMock, patch

from src.core.runtime.frame_scheduler import FrameScheduler


class TestRequestFrame:

    def test_callback_runs_once_per_request(self, scheduler):
        callback = MagicMock()
        scheduler.request_frame(callback)

        scheduler.run_frame()
        scheduler.run_frame()

        callback.assert_called_once()

    def test_duplicate_request_is_collapsed(self, scheduler):
        callback = MagicMock()
        scheduler.request_frame(callback)
        scheduler.request_frame(callback)

        scheduler.run_frame()

        callback.assert_called_once()

    def test_rescheduling_from_callback_waits_for_next_frame(self, scheduler):
        calls = []

        def loop():
            calls.append(len(calls))
            scheduler.request_frame(loop)

        scheduler.request_frame(loop)
        scheduler.run_frame()
        assert calls == [0]
        assert scheduler.has_pending(loop)

        scheduler.run_frame()
        assert calls == [0, 1]

    def test_cancel_frame(self, scheduler):
        callback = MagicMock()
        scheduler.request_frame(callback)
        scheduler.cancel_frame(callback)
        scheduler.run_frame()
        callback.assert_not_called()

    def test_now_reads_time_source(self, scheduler, fake_time):
        fake_time.advance(250)
        assert scheduler.now() == 1250.0


class TestHostLoop:

    def test_pump_events_forwards_to_input_bridge(self):
        bridge = MagicMock()
        scheduler = FrameScheduler(bridge, time_source=lambda: 0)
        event = pygame.event.Event(pygame.KEYUP, key=pygame.K_a)

        with patch("src.core.runtime.frame_scheduler.pygame.event.get", return_value=[event]):
            scheduler.pump_events()

        bridge.dispatch.assert_called_once_with(event)

    def test_quit_event_stops_loop(self):
        bridge = MagicMock()
        scheduler = FrameScheduler(bridge, time_source=lambda: 0)
        scheduler.running = True
        quit_event = pygame.event.Event(pygame.QUIT)

        with patch("src.core.runtime.frame_scheduler.pygame.event.get", return_value=[quit_event]):
            scheduler.pump_events()

        assert scheduler.running is False
        bridge.dispatch.assert_not_called()

    def test_run_presents_each_frame_until_stopped(self):
        present = MagicMock()
        scheduler = FrameScheduler(MagicMock(), fps=1000, time_source=lambda: 0, present=present)
        frames = []

        def loop():
            frames.append(1)
            if len(frames) == 3:
                scheduler.stop()
            else:
                scheduler.request_frame(loop)

        scheduler.request_frame(loop)
        with patch("src.core.runtime.frame_scheduler.pygame.event.get", return_value=[]):
            scheduler.run()

        assert len(frames) == 3
        assert present.call_count == 3
