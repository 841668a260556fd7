"""Non-blocking scoped lock acquisition."""

from __future__ import annotations

from types import TracebackType
from typing import Any


class ScopedTryLock:
    """Try to acquire a lock without blocking; release it when done.

    The object is truthy only if the lock was acquired.
    """

    def __init__(self, mutex: Any) -> None:
        self._mutex = mutex
        self._locked = bool(mutex.acquire(blocking=False))

    def __bool__(self) -> bool:
        return self._locked and self._mutex is not None

    def release(self) -> None:
        """Release the lock if this object holds it."""
        if self._locked and self._mutex is not None:
            self._mutex.release()
        self._locked = False

    def __enter__(self) -> ScopedTryLock:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


def try_lock(mutex: Any) -> ScopedTryLock:
    """Attempt to acquire ``mutex`` without blocking."""
    return ScopedTryLock(mutex)