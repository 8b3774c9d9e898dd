import threading

import pytest

from poser.threads import Spinlock, Thread, active_thread_count


def test_spinlock_lock_and_unlock():
    lock = Spinlock()
    assert lock.is_locked() is False
    lock.lock()
    assert lock.is_locked() is True
    lock.unlock()
    assert lock.is_locked() is False


def test_unlocking_free_spinlock_is_harmless():
    lock = Spinlock()
    lock.unlock()
    assert lock.is_locked() is False


def test_spinlock_context_manager():
    lock = Spinlock()
    with lock as held:
        assert held is lock
        assert lock.is_locked() is True
    assert lock.is_locked() is False


def test_spinlock_guards_shared_counter():
    lock = Spinlock()
    total = {"n": 0}

    def work(times):
        done = 0
        for _ in range(times):
            with lock:
                total["n"] += 1
                done += 1
        return done

    workers = [Thread(work, 500) for _ in range(4)]
    results = [w.join() for w in workers]
    assert results == [500, 500, 500, 500]
    assert total["n"] == 2000
    assert lock.is_locked() is False


def test_thread_returns_result():
    t = Thread(lambda x: x * 2, 21)
    assert t.join() == 42
    assert t.completed is True


def test_thread_none_result_stays_none():
    t = Thread(lambda x: None, "ignored")
    assert t.join() is None


def test_thread_passes_argument():
    seen = []
    t = Thread(seen.append, "payload")
    t.join()
    assert seen == ["payload"]


def test_thread_reraises_error():
    def fail(_):
        raise KeyError("boom")

    t = Thread(fail, None)
    with pytest.raises(KeyError):
        t.join()


def test_active_thread_count_tracks_running_threads():
    baseline = active_thread_count()
    started = threading.Event()
    release = threading.Event()

    def hold(_):
        started.set()
        release.wait(5)
        return "done"

    t = Thread(hold, None)
    assert started.wait(5)
    assert active_thread_count() == baseline + 1
    release.set()
    assert t.join() == "done"
    assert active_thread_count() == baseline


def test_thread_has_id():
    t = Thread(lambda _: 1, None)
    t.join()
    assert isinstance(t.id, int) and t.id > 0