import pytest

from virtualpiano.scheduler import Scheduler


def test_callbacks_run_in_due_order():
    sched = Scheduler()
    calls = []
    sched.call_later(300, lambda: calls.append("b"))
    sched.call_later(100, lambda: calls.append("a"))
    sched.advance(500)
    assert calls == ["a", "b"]


def test_equal_delays_run_in_insertion_order():
    sched = Scheduler()
    calls = []
    for name in "xyz":
        sched.call_later(50, lambda n=name: calls.append(n))
    sched.advance(50)
    assert calls == ["x", "y", "z"]


def test_not_due_callback_waits():
    sched = Scheduler()
    calls = []
    sched.call_later(300, lambda: calls.append(1))
    assert sched.advance(299) == 0
    assert calls == []
    assert sched.pending() == 1
    assert sched.advance(1) == 1
    assert calls == [1]
    assert sched.pending() == 0


def test_cancel_prevents_run():
    sched = Scheduler()
    calls = []
    handle = sched.call_later(10, lambda: calls.append(1))
    sched.cancel(handle)
    assert sched.pending() == 0
    sched.advance(100)
    assert calls == []


def test_nested_scheduling_during_advance():
    sched = Scheduler()
    times = []

    def tick():
        times.append(sched.now)
        if len(times) < 3:
            sched.call_later(100, tick)

    sched.call_later(100, tick)
    sched.advance(1000)
    assert times == [100, 200, 300]
    assert sched.now == 1000


def test_clock_advances():
    sched = Scheduler()
    sched.advance(40)
    sched.advance(60)
    assert sched.now == 100


def test_negative_values_rejected():
    sched = Scheduler()
    with pytest.raises(ValueError):
        sched.call_later(-1, lambda: None)
    with pytest.raises(ValueError):
        sched.advance(-5)