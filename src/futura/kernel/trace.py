"""Rejection trace - records unhandled-rejection diagnostics.

Trace is runtime infrastructure: it observes settlement, it never takes part
in it. Plug a ``RejectionTrace`` into ``Env.tracker`` to capture events.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from futura.kernel.ports import TrackOperation


@dataclass(frozen=True)
class Evidence:
    """One tracked event: what happened to which future, and when."""

    action: TrackOperation
    id: int = field(default=0)
    future: Any = field(default=None, compare=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)


class RejectionTrace:
    """Rejection tracker that keeps every event in memory.

    A future is *unhandled* from its "reject" event until its "handle"
    event. Evidence append is O(1).
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0
        self._unhandled: dict[int, Any] = {}

    def track(self, future: Any, operation: TrackOperation) -> None:
        self.record(future, operation)

    def record(self, future: Any, operation: TrackOperation, info: dict[str, Any] | None = None) -> int | None:
        """Record an event.

        Returns:
            Event ID, or None if tracing is disabled
        """
        if not self.enabled:
            return None

        if operation == "reject":
            self._unhandled[id(future)] = future
        else:
            self._unhandled.pop(id(future), None)

        event_id = self._next_id
        self._next_id += 1
        self._events.append(
            Evidence(
                action=operation,
                id=event_id,
                future=future,
                timestamp=datetime.now(UTC),
                info=info or {},
            )
        )
        return event_id

    def unhandled(self) -> list[Any]:
        """Futures rejected with no reaction registered yet, oldest first."""
        return list(self._unhandled.values())

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        """Clear all events (for reuse)."""
        self._events.clear()
        self._next_id = 0
        self._unhandled.clear()
