"""A fixed-size pool of worker threads consuming a task queue."""

from __future__ import annotations

import threading
from collections import deque
from types import TracebackType
from typing import Any, Callable

Task = Callable[[threading.Event], Any]


class ThreadPool:
    """Run queued tasks on a fixed number of daemon threads.

    Each task receives an event that is set once the pool is stopped.
    Tasks queued before :meth:`stop` still run.
    """

    def __init__(self, thread_count: int) -> None:
        self._tasks: deque[Task] = deque()
        self._condition = threading.Condition()
        self._stop = threading.Event()
        self._threads = [
            threading.Thread(target=self._wait_for_tasks, daemon=True)
            for _ in range(thread_count)
        ]
        for thread in self._threads:
            thread.start()

    def enqueue(self, task: Task) -> None:
        """Queue ``task`` to be run by a worker."""
        with self._condition:
            self._tasks.append(task)
            self._condition.notify()

    def stop(self) -> None:
        """Signal the workers to finish the remaining tasks and exit."""
        with self._condition:
            self._stop.set()
            self._condition.notify_all()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    def _wait_for_tasks(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(
                    lambda: self._stop.is_set() or bool(self._tasks)
                )
                if self._stop.is_set() and not self._tasks:
                    return
                task = self._tasks.popleft()
            task(self._stop)