"""Tests for pascaline.machine.clock."""

import pytest

from pascaline.machine.clock import FrameScheduler, ManualClock, MonotonicClock


def _scheduler():
    clock = ManualClock()
    return clock, FrameScheduler(clock)


class TestManualClock:
    def test_starts_at_given_time(self):
        assert ManualClock().now() == 0.0
        assert ManualClock(100).now() == 100.0

    def test_advance(self):
        clock = ManualClock()
        assert clock.advance(16.5) == 16.5
        assert clock.now() == 16.5

    def test_never_goes_backwards(self):
        clock = ManualClock(10)
        with pytest.raises(ValueError):
            clock.advance(-1)
        with pytest.raises(ValueError):
            clock.set(5)


def test_monotonic_clock_moves_forward():
    clock = MonotonicClock()
    first = clock.now()
    assert clock.now() >= first


class TestFrameScheduler:
    def test_frame_runs_on_next_frame_only(self):
        _, scheduler = _scheduler()
        calls = []
        scheduler.request_frame(lambda: calls.append("a"))
        assert calls == []
        assert scheduler.run_frame() == 1
        assert calls == ["a"]
        assert scheduler.run_frame() == 0
        assert calls == ["a"]

    def test_frames_requested_during_a_frame_wait(self):
        _, scheduler = _scheduler()
        calls = []

        def first():
            calls.append("first")
            scheduler.request_frame(lambda: calls.append("second"))

        scheduler.request_frame(first)
        scheduler.run_frame()
        assert calls == ["first"]
        scheduler.run_frame()
        assert calls == ["first", "second"]

    def test_frames_run_in_request_order(self):
        _, scheduler = _scheduler()
        calls = []
        for name in "abc":
            scheduler.request_frame(lambda name=name: calls.append(name))
        scheduler.run_frame()
        assert calls == ["a", "b", "c"]

    def test_cancel_frame(self):
        _, scheduler = _scheduler()
        calls = []
        handle = scheduler.request_frame(lambda: calls.append("x"))
        scheduler.cancel(handle)
        scheduler.cancel(handle)
        scheduler.cancel(None)
        scheduler.cancel(9999)
        assert scheduler.run_frame() == 0
        assert calls == []

    def test_callback_cancelled_by_earlier_callback_is_skipped(self):
        _, scheduler = _scheduler()
        calls = []
        handles = {}
        handles["first"] = scheduler.request_frame(lambda: scheduler.cancel(handles["second"]))
        handles["second"] = scheduler.request_frame(lambda: calls.append("second"))
        assert scheduler.run_frame() == 1
        assert calls == []

    def test_call_later_waits_for_due_time(self):
        clock, scheduler = _scheduler()
        calls = []
        scheduler.call_later(800, lambda: calls.append("done"))
        clock.advance(799)
        scheduler.run_frame()
        assert calls == []
        clock.advance(1)
        scheduler.run_frame()
        assert calls == ["done"]
        assert scheduler.pending == 0

    def test_timers_fire_in_due_order(self):
        clock, scheduler = _scheduler()
        calls = []
        scheduler.call_later(20, lambda: calls.append("late"))
        scheduler.call_later(10, lambda: calls.append("early"))
        clock.advance(30)
        scheduler.run_frame()
        assert calls == ["early", "late"]

    def test_pending_and_cancel_all(self):
        _, scheduler = _scheduler()
        scheduler.request_frame(lambda: None)
        scheduler.call_later(100, lambda: None)
        assert scheduler.pending == 2
        assert scheduler.has_frames
        scheduler.cancel_all()
        assert scheduler.pending == 0
        assert not scheduler.has_frames
