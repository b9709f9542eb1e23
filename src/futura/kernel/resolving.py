"""Resolving functions and the resolution procedure.

A future's resolve/reject pair shares one one-shot flag, so whichever runs
first disables both. Resolving with a value that exposes a callable ``then``
never settles synchronously: assimilation is scheduled as a job, and the
thenable settles the future through a fresh pair of its own.
"""

from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from futura.kernel.errors import SelfResolutionError, rejection_reason
from futura.kernel.predicates import is_callable, is_object_like
from futura.kernel.record import fulfill_future, reject_future

if TYPE_CHECKING:
    from futura.kernel.future import Future

logger = logging.getLogger(__name__)

_MISSING = object()


class OneShot:
    """A flag that can be claimed exactly once."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._claimed = False

    @property
    def claimed(self) -> bool:
        return self._claimed

    def claim(self) -> bool:
        """Set the flag. Returns False if it was already set."""
        with self._lock:
            if self._claimed:
                return False
            self._claimed = True
            return True


@dataclass(frozen=True)
class ResolvingFunctions:
    """The resolve/reject pair bound to one future."""

    resolve: Callable[[Any], None]
    reject: Callable[[Any], None]
    already_settled: OneShot


def create_resolving_functions(future: Future) -> ResolvingFunctions:
    already_settled = OneShot()

    def resolve(resolution: Any = None) -> None:
        if not already_settled.claim():
            return

        if resolution is future:
            reject_future(future, SelfResolutionError())
            return

        if not is_object_like(resolution):
            fulfill_future(future, resolution)
            return

        try:
            then_action = resolution.then
        except AttributeError as exc:
            if inspect.getattr_static(resolution, "then", _MISSING) is _MISSING:
                then_action = None
            else:
                reject_future(future, exc)
                return
        except Exception as exc:
            reject_future(future, rejection_reason(exc))
            return

        if not is_callable(then_action):
            fulfill_future(future, resolution)
            return

        future._env.queue.enqueue(
            lambda: resolve_thenable_job(future, resolution, then_action)
        )

    def reject(reason: Any = None) -> None:
        if not already_settled.claim():
            return
        reject_future(future, reason)

    return ResolvingFunctions(resolve=resolve, reject=reject, already_settled=already_settled)


def resolve_thenable_job(future: Future, thenable: Any, then_action: Callable[..., Any]) -> None:
    """Let ``thenable`` settle ``future`` through a fresh resolving pair.

    ``then_action`` was read off ``thenable`` by attribute access, so a
    bound method already carries the thenable as its receiver.
    """
    resolving = create_resolving_functions(future)
    try:
        then_action(resolving.resolve, resolving.reject)
    except Exception as exc:
        logger.debug("then of %r raised %r during assimilation", type(thenable).__name__, exc)
        resolving.reject(rejection_reason(exc))
