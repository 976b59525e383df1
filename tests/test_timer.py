import threading
import time

from siegekit.timer import siege_timer


def test_timer_fires_handler_after_deadline():
    calls = []
    fired = siege_timer(-1, lambda: calls.append("stop"))
    assert fired is True
    assert calls == ["stop"]


def test_timer_waits_one_extra_second():
    calls = []
    start = time.monotonic()
    fired = siege_timer(0, lambda: calls.append(time.monotonic()))
    assert fired is True
    assert len(calls) == 1
    assert calls[0] - start >= 1.0


def test_timer_cancelled_before_deadline():
    calls = []
    cancel = threading.Event()
    cancel.set()
    start = time.monotonic()
    fired = siege_timer(30, lambda: calls.append(1), cancel)
    assert fired is False
    assert calls == []
    assert time.monotonic() - start < 5


def test_timer_cancelled_from_another_thread():
    calls = []
    cancel = threading.Event()
    threading.Timer(0.1, cancel.set).start()
    fired = siege_timer(30, lambda: calls.append(1), cancel)
    assert fired is False
    assert calls == []