"""asyncio bridge for futures."""

from __future__ import annotations

import asyncio
from typing import Any

from futura.kernel.errors import UnhandledRejectionError
from futura.kernel.future import Future


def as_asyncio(future: Future[Any], loop: asyncio.AbstractEventLoop | None = None) -> asyncio.Future[Any]:
    """Adopt the settlement of ``future`` into an asyncio future.

    The future's env must run its jobs on ``loop`` (``AsyncioJobQueue``) or be
    drained by the caller, otherwise the result never arrives. Reasons that
    are not exceptions, and StopIteration which asyncio refuses to set, are
    wrapped in ``UnhandledRejectionError``.
    """
    target: asyncio.Future[Any] = (loop or asyncio.get_running_loop()).create_future()

    def on_fulfilled(value: Any) -> None:
        if not target.done():
            target.set_result(value)

    def on_rejected(reason: Any) -> None:
        if target.done():
            return
        if isinstance(reason, BaseException) and not isinstance(reason, StopIteration):
            target.set_exception(reason)
        else:
            target.set_exception(UnhandledRejectionError(reason))

    future.then(on_fulfilled, on_rejected)
    return target
