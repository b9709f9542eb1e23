"""Runtime module - default implementations of the kernel ports."""

from futura.runtime.aio import as_asyncio
from futura.runtime.queues import AsyncioJobQueue, ManualJobQueue
from futura.runtime.tracking import LoggingRejectionTracker

__all__ = [
    "AsyncioJobQueue",
    "ManualJobQueue",
    "LoggingRejectionTracker",
    "as_asyncio",
]
