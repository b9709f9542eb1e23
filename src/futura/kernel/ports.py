"""Port protocols for futura - host capabilities the kernel consumes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal, Protocol

Job = Callable[[], None]
TrackOperation = Literal["reject", "handle"]


class JobQueue(Protocol):
    """Deferred execution port.

    Jobs run later, in the order they were enqueued, and never inside the
    call that enqueues them.
    """

    def enqueue(self, job: Job) -> None: ...


class RejectionTracker(Protocol):
    """Unhandled-rejection diagnostics port.

    Operations:
    - reject: a future was rejected while no reaction was registered on it
    - handle: the first reaction was registered on such a future
    """

    def track(self, future: Any, operation: TrackOperation) -> None: ...
