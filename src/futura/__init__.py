from .config import RuntimeConfig, build_env, configure
from .kernel import (
    Capability,
    Env,
    Evidence,
    Future,
    FutureError,
    Rejection,
    RejectionTrace,
    SelfResolutionError,
    UnhandledRejectionError,
    drain,
    get_default_env,
    new_capability,
    set_default_env,
)
from .runtime import AsyncioJobQueue, LoggingRejectionTracker, ManualJobQueue, as_asyncio

__all__ = [
    # Core
    "Future",
    "Capability",
    "new_capability",
    # Errors
    "FutureError",
    "Rejection",
    "SelfResolutionError",
    "UnhandledRejectionError",
    # Env
    "Env",
    "drain",
    "get_default_env",
    "set_default_env",
    # Queues
    "ManualJobQueue",
    "AsyncioJobQueue",
    # Tracking
    "RejectionTrace",
    "Evidence",
    "LoggingRejectionTracker",
    # Config
    "RuntimeConfig",
    "build_env",
    "configure",
    "as_asyncio",
]
