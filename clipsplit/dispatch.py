"""
clipsplit.dispatch - Fixed-size worker pool for clip extraction jobs.

Workers are started before any job exists and pull jobs from a single
one-slot queue, so the producer blocks whenever every worker is busy. The
first failing job stops the run: nothing new is submitted, queued jobs are
dropped, jobs already running finish, and the error is re-raised once every
worker has exited.
"""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from clipsplit.logging import logger
from clipsplit.manifest import ClipDescriptor, Job

_STOP = object()
_POLL_INTERVAL = 0.1


class WorkerPool:
    """A fixed set of threads consuming jobs from a bounded handoff queue."""

    def __init__(self, size: int, handler: Callable[[Job], Any]) -> None:
        if size < 1:
            raise ValueError("worker pool needs at least one worker")
        self.size = size
        self._handler = handler
        self._queue: queue.Queue = queue.Queue(maxsize=1)
        self._abort = threading.Event()
        self._lock = threading.Lock()
        self._error: Exception | None = None
        self._completed = 0
        self._closed = False
        self._threads = [
            threading.Thread(target=self._worker, name=f"clipsplit-worker-{i + 1}", daemon=True)
            for i in range(size)
        ]
        for thread in self._threads:
            thread.start()

    @property
    def completed(self) -> int:
        return self._completed

    @property
    def error(self) -> Exception | None:
        return self._error

    @property
    def aborted(self) -> bool:
        return self._abort.is_set()

    def submit(self, job: Job) -> bool:
        """Hand a job to the next idle worker.

        Blocks while the handoff slot is occupied.

        Returns:
            True if the job was queued, False if the pool has aborted
        """
        if self._closed:
            raise RuntimeError("cannot submit to a closed worker pool")
        while not self._abort.is_set():
            try:
                self._queue.put(job, timeout=_POLL_INTERVAL)
                return True
            except queue.Full:
                continue
        return False

    def abort(self) -> None:
        """Stop accepting work and drop queued jobs; running jobs finish."""
        self._abort.set()

    def close(self) -> None:
        """Signal that no more jobs will arrive."""
        if self._closed:
            return
        self._closed = True
        # one stop marker per worker; workers keep draining, so these puts finish
        for _ in self._threads:
            self._queue.put(_STOP)

    def wait(self) -> None:
        """Block until every worker thread has exited."""
        for thread in self._threads:
            thread.join()

    def join(self) -> None:
        """Close the pool, wait for all workers, and re-raise the first failure."""
        self.close()
        self.wait()
        if self._error is not None:
            raise self._error

    def _worker(self) -> None:
        while True:
            job = self._queue.get()
            if job is _STOP:
                return
            if self._abort.is_set():
                continue
            try:
                self._handler(job)
            except Exception as e:
                logger.error("job for %s failed: %s", job.clip.name, e)
                with self._lock:
                    if self._error is None:
                        self._error = e
                self._abort.set()
            else:
                with self._lock:
                    self._completed += 1


def dispatch(
    clips: Iterable[ClipDescriptor],
    input_path: Path,
    workers: int,
    extract: Callable[[Path, ClipDescriptor], Any],
) -> dict[str, Any]:
    """Run one extraction job per clip across a fixed pool of workers.

    Jobs are submitted in manifest order; completion order is not
    guaranteed.

    Args:
        clips: Clips whose names are already resolved output paths
        input_path: Shared source audio file
        workers: Number of worker threads
        extract: Called as ``extract(input_path, clip)`` inside a worker

    Returns:
        Dict with 'submitted', 'completed', 'workers' and 'elapsed_seconds'

    Raises:
        Exception: The first error raised by ``extract``, after all
            workers have exited
    """

    def run_job(job: Job) -> None:
        logger.info("beginning extraction for %s", job.clip.name)
        extract(job.input_path, job.clip)

    started = time.monotonic()
    pool = WorkerPool(workers, run_job)
    submitted = 0
    try:
        for clip in clips:
            if not pool.submit(Job(input_path=input_path, clip=clip)):
                break
            submitted += 1
    except BaseException:
        pool.abort()
        pool.close()
        pool.wait()
        raise
    pool.join()

    return {
        "submitted": submitted,
        "completed": pool.completed,
        "workers": workers,
        "elapsed_seconds": time.monotonic() - started,
    }
