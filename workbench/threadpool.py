"""A fixed-size pool of worker threads that run submitted jobs in order."""

from __future__ import annotations

import queue
import sys
import threading
from collections.abc import Callable
from types import TracebackType

Job = Callable[[], object]

_TERMINATE = object()


class ThreadPool:
    """Runs jobs on ``size`` worker threads fed from one shared queue."""

    def __init__(self, size: int = 4) -> None:
        if size < 1:
            raise ValueError("thread pool size must be at least 1")
        self._jobs: queue.SimpleQueue[object] = queue.SimpleQueue()
        self._lock = threading.Lock()
        self._closed = False
        self._workers = [
            threading.Thread(target=self._work, name=f"worker-{index}", daemon=True)
            for index in range(size)
        ]
        for worker in self._workers:
            worker.start()

    @property
    def size(self) -> int:
        """Number of worker threads."""
        return len(self._workers)

    def execute(self, job: Job) -> None:
        """Queue ``job`` to run on the next free worker."""
        with self._lock:
            if self._closed:
                raise RuntimeError("send job fail: the pool has been shut down")
            self._jobs.put(job)

    def shutdown(self) -> None:
        """Let queued jobs finish, then stop and join every worker."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            for _ in self._workers:
                self._jobs.put(_TERMINATE)
        for worker in self._workers:
            worker.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()

    def _work(self) -> None:
        while True:
            job = self._jobs.get()
            if job is _TERMINATE:
                print("terminate the thread")
                return
            print("execute a job")
            try:
                job()  # type: ignore[operator]
            except Exception as err:  # a failing job must not kill the worker
                print(f"job failed: {err!r}", file=sys.stderr)
            print("execute complete")