from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from futura import Env, Future, ManualJobQueue, RejectionTrace


@dataclass
class Outcome:
    state: str = "pending"
    value: Any = None


def observe(future: Future[Any]) -> Outcome:
    """Register handlers that record how ``future`` settles."""
    outcome = Outcome()

    def on_fulfilled(value: Any) -> None:
        outcome.state = "fulfilled"
        outcome.value = value

    def on_rejected(reason: Any) -> None:
        outcome.state = "rejected"
        outcome.value = reason

    future.then(on_fulfilled, on_rejected)
    return outcome


def make_env(trace: bool = False) -> Env:
    return Env(queue=ManualJobQueue(), tracker=RejectionTrace() if trace else None)


def drain(env: Env) -> int:
    return env.queue.run_until_idle(max_jobs=10_000)  # type: ignore[attr-defined]


@dataclass
class FakeThenable:
    """Foreign thenable that replays scripted calls on its callbacks."""

    calls: list[tuple[str, Any]] = field(default_factory=list)
    raises: Exception | None = None
    invocations: int = 0

    def then(self, resolve: Any, reject: Any) -> None:
        self.invocations += 1
        for kind, value in self.calls:
            if kind == "resolve":
                resolve(value)
            else:
                reject(value)
        if self.raises is not None:
            raise self.raises


class ExplodingThen:
    """Object whose ``then`` attribute raises when read."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    @property
    def then(self) -> Any:
        raise self.error


@dataclass
class RecordingTracker:
    events: list[tuple[Any, str]] = field(default_factory=list)

    def track(self, future: Any, operation: str) -> None:
        self.events.append((future, operation))
