"""Error types for future settlement."""

from __future__ import annotations


class FutureError(Exception):
    """Base class for errors raised by futura."""


class SelfResolutionError(FutureError, TypeError):
    """Rejection reason used when a future is resolved with itself."""

    def __init__(self, message: str = "a future cannot be resolved with itself") -> None:
        super().__init__(message)


class Rejection(FutureError):
    """Raise to reject with an arbitrary reason.

    Handlers, executors and foreign ``then`` functions may raise this to
    reject with a value that is not an exception. The downstream future is
    rejected with ``reason`` itself, not with this wrapper.
    """

    def __init__(self, reason: object) -> None:
        self.reason = reason
        super().__init__(reason)

    def __repr__(self) -> str:
        return f"Rejection({self.reason!r})"


class UnhandledRejectionError(FutureError):
    """Raised to an awaiting coroutine when the reason is not an exception."""

    def __init__(self, reason: object) -> None:
        self.reason = reason
        super().__init__(f"future rejected with {reason!r}")


def rejection_reason(exc: Exception) -> object:
    """Map a caught exception to the reason a future is rejected with."""
    if isinstance(exc, Rejection):
        return exc.reason
    return exc
