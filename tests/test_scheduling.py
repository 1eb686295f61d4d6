"""Tests for delay and the scheduler backends."""

from __future__ import annotations

import threading

import pytest

import underbar as _
from underbar.scheduling import get_default_scheduler, set_default_scheduler, use_scheduler
from underbar.utils.timers import ManualScheduler, ThreadingScheduler


@pytest.fixture
def clock():
    scheduler = ManualScheduler()
    with use_scheduler(scheduler):
        yield scheduler


def _recorder():
    calls = []

    def callback(*args, **kwargs):
        calls.append((args, kwargs))

    return callback, calls


def test_delay_waits_for_the_full_duration(clock):
    callback, calls = _recorder()
    assert _.delay(callback, 100) is None

    clock.advance(99)
    assert calls == []

    clock.advance(1)
    assert calls == [((), {})]


def test_delay_fires_exactly_once(clock):
    callback, calls = _recorder()
    _.delay(callback, 100)

    clock.advance(500)
    clock.advance(500)
    assert len(calls) == 1
    assert clock.pending == 0


def test_delay_forwards_arguments(clock):
    callback, calls = _recorder()
    _.delay(callback, 100, (1, 2))

    clock.advance(100)
    assert calls[0][0][1] == 2
    assert calls == [((1, 2), {})]


def test_delay_forwards_keyword_arguments(clock):
    callback, calls = _recorder()
    _.delay(callback, 10, ["a"], {"sep": "-"})

    clock.advance(10)
    assert calls == [(("a",), {"sep": "-"})]


def test_delay_copies_arguments_at_schedule_time(clock):
    callback, calls = _recorder()
    args = [1]
    _.delay(callback, 5, args)
    args.append(2)

    clock.advance(5)
    assert calls == [((1,), {})]


def test_delay_accepts_an_explicit_scheduler():
    callback, calls = _recorder()
    own = ManualScheduler()
    _.delay(callback, 20, scheduler=own)

    assert own.pending == 1
    own.advance(20)
    assert len(calls) == 1


def test_manual_scheduler_orders_by_due_time_then_schedule_order():
    clock = ManualScheduler()
    order = []
    clock.schedule(lambda: order.append("late"), 30)
    clock.schedule(lambda: order.append("early"), 10)
    clock.schedule(lambda: order.append("tie-1"), 20)
    clock.schedule(lambda: order.append("tie-2"), 20)

    assert clock.advance(30) == 4
    assert order == ["early", "tie-1", "tie-2", "late"]
    assert clock.now == 30


def test_manual_scheduler_runs_callbacks_scheduled_while_advancing():
    clock = ManualScheduler()
    order = []

    def outer():
        order.append(("outer", clock.now))
        clock.schedule(lambda: order.append(("inner", clock.now)), 5)

    clock.schedule(outer, 10)
    clock.advance(20)
    assert order == [("outer", 10), ("inner", 15)]


def test_manual_scheduler_rejects_negative_advance():
    with pytest.raises(ValueError):
        ManualScheduler().advance(-1)


def test_manual_scheduler_clamps_negative_waits():
    clock = ManualScheduler()
    callback, calls = _recorder()
    clock.schedule(callback, -50)

    clock.advance(0)
    assert len(calls) == 1


def test_manual_scheduler_run_all_drains_queue():
    clock = ManualScheduler()
    callback, calls = _recorder()
    clock.schedule(callback, 1000)
    clock.schedule(callback, 5)

    assert clock.run_all() == 2
    assert clock.now == 1000
    assert clock.pending == 0


def test_use_scheduler_restores_previous_default():
    before = get_default_scheduler()
    with use_scheduler(ManualScheduler()) as scheduler:
        assert get_default_scheduler() is scheduler
    assert get_default_scheduler() is before


def test_set_default_scheduler_returns_previous():
    replacement = ManualScheduler()
    previous = set_default_scheduler(replacement)
    try:
        assert get_default_scheduler() is replacement
    finally:
        set_default_scheduler(previous)


def test_threading_scheduler_converts_milliseconds(monkeypatch):
    created = []

    class FakeTimer:
        def __init__(self, interval, function):
            self.interval = interval
            self.function = function
            self.daemon = False
            self.started = False
            created.append(self)

        def start(self):
            self.started = True

    monkeypatch.setattr(threading, "Timer", FakeTimer)
    ThreadingScheduler(daemon=True).schedule(lambda: None, 250)

    assert len(created) == 1
    assert created[0].interval == pytest.approx(0.25)
    assert created[0].daemon is True
    assert created[0].started


def test_threading_scheduler_fires_on_a_timer_thread():
    fired = threading.Event()
    _.delay(fired.set, 10, scheduler=ThreadingScheduler())
    assert fired.wait(timeout=5.0)
