"""Environment for futura - wires the host ports into futures."""

from __future__ import annotations

from dataclasses import dataclass

from futura.kernel.ports import JobQueue, RejectionTracker


@dataclass
class Env:
    """Environment aggregation - combines all ports.

    Every future keeps the env it was created with, and futures derived from
    it through ``then`` share it.
    """

    queue: JobQueue
    tracker: RejectionTracker | None = None


_default_env: Env | None = None


def get_default_env() -> Env:
    """Return the process-wide env, creating a manual-queue env on first use."""
    global _default_env
    if _default_env is None:
        from futura.runtime.queues import ManualJobQueue

        _default_env = Env(queue=ManualJobQueue())
    return _default_env


def set_default_env(env: Env | None) -> None:
    """Install ``env`` as the default. ``None`` resets to a fresh manual env."""
    global _default_env
    _default_env = env


def drain(max_jobs: int | None = None) -> int:
    """Run every job on the default env's queue until it is idle.

    Only available when the default queue is drainable (``ManualJobQueue``).
    """
    queue = get_default_env().queue
    run_until_idle = getattr(queue, "run_until_idle", None)
    if run_until_idle is None:
        raise RuntimeError(f"default job queue {type(queue).__name__} cannot be drained manually")
    return run_until_idle(max_jobs=max_jobs)
