"""Reactions, capabilities and the reaction dispatcher."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from futura.kernel.errors import rejection_reason
from futura.kernel.ports import JobQueue

if TYPE_CHECKING:
    from futura.kernel.future import Future

ReactionKind = Literal["fulfill", "reject"]
Handler = Callable[[Any], Any]


@dataclass(frozen=True)
class Capability:
    """A future bundled with the exclusive means to settle it.

    Attributes:
        future: The controlled future
        resolve: Runs the resolution procedure on ``future``
        reject: Rejects ``future`` with a reason
    """

    future: Future
    resolve: Callable[[Any], None]
    reject: Callable[[Any], None]


@dataclass(frozen=True)
class Reaction:
    """A handler waiting for one settlement outcome of a future.

    ``handler`` is None when the caller supplied nothing callable, in which
    case the outcome passes through to ``capability`` unchanged.
    """

    capability: Capability
    kind: ReactionKind
    handler: Handler | None = None


def reaction_job(reaction: Reaction, argument: Any) -> None:
    """Run one reaction and settle its downstream capability."""
    capability = reaction.capability
    if reaction.handler is None:
        if reaction.kind == "fulfill":
            capability.resolve(argument)
        else:
            capability.reject(argument)
        return

    try:
        handler_result = reaction.handler(argument)
    except Exception as exc:
        capability.reject(rejection_reason(exc))
        return
    capability.resolve(handler_result)


def enqueue_reaction(queue: JobQueue, reaction: Reaction, argument: Any) -> None:
    queue.enqueue(lambda: reaction_job(reaction, argument))


def trigger_reactions(queue: JobQueue, reactions: Iterable[Reaction], argument: Any) -> None:
    """Schedule one independent job per reaction, in registration order."""
    for reaction in reactions:
        enqueue_reaction(queue, reaction, argument)
