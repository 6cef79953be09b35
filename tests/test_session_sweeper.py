import threading
import time

from card_access.services.session_cache import SessionCache
from card_access.workers.session_sweeper import SessionSweeper


def _wait_for(condition, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.01)
    return False


def test_sweeper_evicts_expired_sessions():
    now = [0.0]
    cache = SessionCache(ttl=10, clock=lambda: now[0])
    cache.issue("root")
    now[0] = 11.0

    sweeper = SessionSweeper(cache, interval=0.01)
    sweeper.start()
    try:
        assert _wait_for(lambda: len(cache) == 0)
    finally:
        sweeper.stop()

    assert not sweeper.running


def test_stop_does_not_wait_for_next_tick():
    sweeper = SessionSweeper(SessionCache(), interval=3600)
    sweeper.start()
    assert sweeper.running

    started = time.monotonic()
    sweeper.stop()

    assert time.monotonic() - started < 1.0
    assert not sweeper.running


def test_sweep_errors_do_not_stop_the_loop():
    calls = []
    done = threading.Event()

    class FlakyCache(SessionCache):
        def sweep(self):
            calls.append(1)
            if len(calls) == 1:
                raise RuntimeError("boom")
            done.set()
            return 0

    sweeper = SessionSweeper(FlakyCache(), interval=0.01)
    sweeper.start()
    try:
        assert done.wait(2.0)
    finally:
        sweeper.stop()

    assert len(calls) >= 2
