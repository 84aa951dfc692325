"""Bounded worker pool draining a shared task queue.

A fixed set of threads pull tasks from one unbounded queue. ``stop_wait``
closes the pool, posts one sentinel per worker behind the queued tasks and
joins every thread, so it returns only after all accepted work has run.
"""

from __future__ import annotations

import logging
import queue
import threading
from types import TracebackType

from repohash.exceptions import ConfigError, PoolClosedError
from repohash.types import Task

logger = logging.getLogger(__name__)

_STOP = object()


class WorkerPool:
    """Fixed-size pool of worker threads; every accepted task runs exactly once."""

    def __init__(self, size: int, *, name: str = "repohash-worker") -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ConfigError(f"Worker pool size must be an integer >= 1, got {size!r}")
        self._queue: queue.Queue[object] = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._cancelled = threading.Event()
        self._threads = [
            threading.Thread(target=self._worker_loop, name=f"{name}-{index}", daemon=False) for index in range(size)
        ]
        for thread in self._threads:
            thread.start()

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def enqueue(self, task: Task) -> None:
        """Hand ``task`` to the pool without blocking.

        Raises:
            PoolClosedError: ``stop_wait`` or ``cancel`` was already called.
        """
        with self._lock:
            if self._closed:
                raise PoolClosedError("Worker pool no longer accepts tasks")
            self._queue.put_nowait(task)

    def cancel(self) -> None:
        """Discard queued tasks that have not started; running tasks finish."""
        self._cancelled.set()
        self._close()

    def stop_wait(self) -> None:
        """Stop accepting tasks and block until queued and running tasks finish."""
        self._close()
        for thread in self._threads:
            thread.join()

    def _close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            for _ in self._threads:
                self._queue.put_nowait(_STOP)

    def _worker_loop(self) -> None:
        while True:
            task = self._queue.get()
            try:
                if task is _STOP:
                    return
                if self._cancelled.is_set():
                    continue
                self._run(task)  # type: ignore[arg-type]
            finally:
                self._queue.task_done()

    def _run(self, task: Task) -> None:
        try:
            task()
        except Exception:
            logger.exception("Task failed on %s", threading.current_thread().name)

    def __enter__(self) -> WorkerPool:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is not None and not issubclass(exc_type, Exception):
            self.cancel()
        self.stop_wait()
