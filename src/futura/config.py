"""Runtime configuration for futura."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from futura.kernel.env import Env, set_default_env
from futura.kernel.ports import JobQueue, RejectionTracker
from futura.kernel.trace import RejectionTrace
from futura.runtime.queues import AsyncioJobQueue, ManualJobQueue
from futura.runtime.tracking import LoggingRejectionTracker


class RuntimeConfig(BaseModel):
    """How futures schedule jobs and report unhandled rejections."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    queue: Literal["manual", "asyncio"] = "manual"
    rejection_tracking: Literal["off", "log", "trace"] = "off"
    logger_name: str = Field(default="futura.rejections", min_length=1)


def build_env(config: RuntimeConfig | None = None) -> Env:
    """Create a fresh env from ``config``."""
    config = config or RuntimeConfig()

    queue: JobQueue
    if config.queue == "asyncio":
        queue = AsyncioJobQueue()
    else:
        queue = ManualJobQueue()

    tracker: RejectionTracker | None = None
    if config.rejection_tracking == "log":
        tracker = LoggingRejectionTracker(logging.getLogger(config.logger_name))
    elif config.rejection_tracking == "trace":
        tracker = RejectionTrace()

    return Env(queue=queue, tracker=tracker)


def configure(config: RuntimeConfig | None = None, **overrides: Any) -> Env:
    """Build an env and install it as the process default.

    Keyword overrides are validated like ``RuntimeConfig`` fields.
    """
    base = config or RuntimeConfig()
    if overrides:
        base = RuntimeConfig.model_validate({**base.model_dump(), **overrides})
    env = build_env(base)
    set_default_env(env)
    return env
