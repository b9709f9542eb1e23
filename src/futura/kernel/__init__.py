"""Kernel layer - the settlement engine and its ports."""

from futura.kernel.env import Env, drain, get_default_env, set_default_env
from futura.kernel.errors import (
    FutureError,
    Rejection,
    SelfResolutionError,
    UnhandledRejectionError,
    rejection_reason,
)
from futura.kernel.future import Future, new_capability, perform_then
from futura.kernel.ports import JobQueue, RejectionTracker
from futura.kernel.reaction import Capability, Reaction
from futura.kernel.record import SettlementRecord
from futura.kernel.resolving import ResolvingFunctions, create_resolving_functions
from futura.kernel.trace import Evidence, RejectionTrace

__all__ = [
    "Future",
    "Capability",
    "Reaction",
    "SettlementRecord",
    "ResolvingFunctions",
    "create_resolving_functions",
    "new_capability",
    "perform_then",
    # Errors
    "FutureError",
    "Rejection",
    "SelfResolutionError",
    "UnhandledRejectionError",
    "rejection_reason",
    # Env & ports
    "Env",
    "drain",
    "get_default_env",
    "set_default_env",
    "JobQueue",
    "RejectionTracker",
    # Tracing
    "Evidence",
    "RejectionTrace",
]
