"""Job queue implementations."""

from __future__ import annotations

import asyncio
import logging
from collections import deque

from futura.kernel.ports import Job
from futura.kernel.predicates import is_callable

logger = logging.getLogger(__name__)


class ManualJobQueue:
    """FIFO queue drained explicitly by its owner.

    Nothing runs until ``run_once`` or ``run_until_idle`` is called, which
    makes every interleaving deterministic.
    """

    def __init__(self) -> None:
        self._jobs: deque[Job] = deque()
        self._running = False

    def enqueue(self, job: Job) -> None:
        if not is_callable(job):
            raise TypeError(f"job {job!r} is not callable")
        self._jobs.append(job)

    def run_once(self) -> bool:
        """Run the oldest job. Returns False if the queue was empty."""
        if not self._jobs:
            return False
        job = self._jobs.popleft()
        job()
        return True

    def run_until_idle(self, max_jobs: int | None = None) -> int:
        """Run jobs, including ones enqueued meanwhile, until none are left.

        Args:
            max_jobs: Upper bound on jobs to run, for cyclic thenable chains
                that would otherwise never go idle

        Returns:
            Number of jobs that ran

        Raises:
            RuntimeError: If called from inside a job, or if ``max_jobs`` is
                exceeded
        """
        if self._running:
            raise RuntimeError("run_until_idle called from inside a running job")

        self._running = True
        count = 0
        try:
            while self._jobs:
                if max_jobs is not None and count >= max_jobs:
                    raise RuntimeError(f"job queue still busy after {max_jobs} jobs")
                self.run_once()
                count += 1
        finally:
            self._running = False

        logger.debug("job queue idle after %d jobs", count)
        return count

    def __len__(self) -> int:
        return len(self._jobs)


class AsyncioJobQueue:
    """Queue that hands jobs to an asyncio event loop.

    ``loop.call_soon`` callbacks run in FIFO order on a later iteration.
    Without an explicit loop, the running loop at enqueue time is used.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def enqueue(self, job: Job) -> None:
        if not is_callable(job):
            raise TypeError(f"job {job!r} is not callable")
        loop = self._loop or asyncio.get_running_loop()
        loop.call_soon(job)
