"""Settlement record and its state transitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from futura.kernel.reaction import Reaction, trigger_reactions

if TYPE_CHECKING:
    from futura.kernel.future import Future

State = Literal["pending", "fulfilled", "rejected"]


@dataclass
class SettlementRecord:
    """Mutable lifecycle state of one future.

    Reaction lists exist only while pending and are dropped at settlement.
    ``result`` is meaningful only once ``state`` is not pending.
    """

    state: State = "pending"
    result: Any = None
    fulfill_reactions: list[Reaction] | None = field(default_factory=list)
    reject_reactions: list[Reaction] | None = field(default_factory=list)
    is_handled: bool = False

    @property
    def pending(self) -> bool:
        return self.state == "pending"

    def settle(self, state: State, result: Any) -> list[Reaction]:
        """Move out of pending and return the reactions to trigger."""
        reactions = self.fulfill_reactions if state == "fulfilled" else self.reject_reactions
        self.result = result
        self.state = state
        self.fulfill_reactions = None
        self.reject_reactions = None
        return list(reactions or ())


def fulfill_future(future: Future, value: Any) -> None:
    record = future._record
    if not record.pending:
        return
    reactions = record.settle("fulfilled", value)
    trigger_reactions(future._env.queue, reactions, value)


def reject_future(future: Future, reason: Any) -> None:
    record = future._record
    if not record.pending:
        return
    reactions = record.settle("rejected", reason)

    tracker = future._env.tracker
    if tracker is not None and not record.is_handled:
        tracker.track(future, "reject")

    trigger_reactions(future._env.queue, reactions, reason)
