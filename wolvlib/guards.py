"""Scope guards and run-once / run-at-exit helpers."""

from __future__ import annotations

import atexit
import threading
from types import TracebackType
from typing import Any, Callable, Hashable, TypeVar

_F = TypeVar("_F", bound=Callable[[], Any])

_registry_lock = threading.Lock()
_first_time_seen: set[Hashable] = set()
_final_cleanup_seen: set[Hashable] = set()


class ScopeGuard:
    """Run a callable when the ``with`` block is left, unless released."""

    def __init__(self, func: Callable[[], Any]) -> None:
        self._func = func
        self._active = True

    def release(self) -> None:
        """Disarm the guard so the callable is not run."""
        self._active = False

    def __enter__(self) -> ScopeGuard:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._active:
            self._active = False
            self._func()


def _site_key(func: Callable[[], Any]) -> Hashable:
    # Functions defined at the same place share a code object, which makes
    # the key stable across repeated executions of the enclosing code.
    return getattr(func, "__code__", func)


def at_first_time(func: _F) -> _F:
    """Call ``func`` only the first time this definition site is reached."""
    key = _site_key(func)
    with _registry_lock:
        first = key not in _first_time_seen
        _first_time_seen.add(key)
    if first:
        func()
    return func


def at_final_cleanup(func: _F) -> _F:
    """Register ``func`` to run at interpreter exit, once per definition site."""
    key = _site_key(func)
    with _registry_lock:
        first = key not in _final_cleanup_seen
        _final_cleanup_seen.add(key)
    if first:
        atexit.register(func)
    return func