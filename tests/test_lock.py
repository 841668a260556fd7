import threading

from wolvlib.lock import ScopedTryLock, try_lock


def test_second_try_lock_fails_and_lock_reusable_after_scope():
    lock = threading.Lock()

    with try_lock(lock) as first:
        assert first
        with try_lock(lock) as second:
            assert not second

    with try_lock(lock) as again:
        assert again


def test_lock_is_released_after_block():
    lock = threading.Lock()
    with ScopedTryLock(lock) as held:
        assert held
        assert lock.locked()
    assert not lock.locked()


def test_failed_attempt_does_not_release_other_holder():
    lock = threading.Lock()
    lock.acquire()
    try:
        with try_lock(lock) as attempt:
            assert not attempt
        assert lock.locked()
    finally:
        lock.release()


def test_explicit_release():
    lock = threading.Lock()
    guard = try_lock(lock)
    assert guard
    guard.release()
    assert not guard
    assert not lock.locked()