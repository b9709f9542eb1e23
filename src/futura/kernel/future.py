"""Future - the deferred-value primitive."""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any, Generic, TypeVar

from futura.kernel.env import Env, get_default_env
from futura.kernel.errors import rejection_reason
from futura.kernel.predicates import is_callable
from futura.kernel.reaction import Capability, Handler, Reaction, enqueue_reaction
from futura.kernel.record import SettlementRecord
from futura.kernel.resolving import create_resolving_functions

T = TypeVar("T")

Executor = Callable[[Callable[[Any], None], Callable[[Any], None]], Any]


class Future(Generic[T]):
    """The eventual result of an asynchronous operation.

    The executor runs synchronously during construction and receives the
    future's resolve and reject functions. Handlers registered through
    ``then`` always run from the env's job queue, never inside ``then``.
    """

    _record: SettlementRecord
    _env: Env

    def __init__(self, executor: Executor, *, env: Env | None = None) -> None:
        if getattr(self, "_record", None) is not None:
            raise TypeError("Future is already constructed")
        if not is_callable(executor):
            raise TypeError(f"Future resolver {executor!r} is not callable")

        self._env = env if env is not None else get_default_env()
        self._record = SettlementRecord()

        resolving = create_resolving_functions(self)
        try:
            executor(resolving.resolve, resolving.reject)
        except Exception as exc:
            resolving.reject(rejection_reason(exc))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} at {id(self):#x}>"

    @property
    def env(self) -> Env:
        return self._env

    def then(
        self,
        on_fulfilled: Handler | None = None,
        on_rejected: Handler | None = None,
    ) -> Future[Any]:
        """Register reactions and return the future of their result.

        Args:
            on_fulfilled: Called with the value once this future fulfills
            on_rejected: Called with the reason once this future rejects

        Returns:
            New future resolved with whatever the invoked handler returns,
            or rejected with what it raises. A missing handler passes the
            outcome through unchanged.
        """
        if not isinstance(self, Future):
            raise TypeError(f"then called on {type(self).__name__}, not a Future")
        capability = new_capability(self._env)
        return perform_then(self, on_fulfilled, on_rejected, capability)

    def catch(self, on_rejected: Handler | None) -> Future[Any]:
        return self.then(None, on_rejected)

    def __await__(self) -> Generator[Any, None, T]:
        from futura.runtime.aio import as_asyncio

        return as_asyncio(self).__await__()

    @classmethod
    def resolve(cls, value: Any, *, env: Env | None = None) -> Future[Any]:
        """Create a future resolved with ``value``.

        Runs the full resolution procedure, so a future or thenable is
        adopted rather than wrapped.
        Without ``env``, a Future value lends its own env.
        """
        if env is None and isinstance(value, Future):
            env = value.env
        capability = new_capability(env)
        capability.resolve(value)
        return capability.future

    @classmethod
    def reject(cls, reason: Any, *, env: Env | None = None) -> Future[Any]:
        """Create a future rejected with ``reason``."""
        capability = new_capability(env)
        capability.reject(reason)
        return capability.future

    @staticmethod
    def deferred(*, env: Env | None = None) -> Capability:
        """Create a pending future along with its resolve and reject."""
        return new_capability(env)


def new_capability(env: Env | None = None) -> Capability:
    """Build a pending future whose settlement is controlled externally."""
    slots: dict[str, Callable[[Any], None]] = {}

    def executor(resolve: Callable[[Any], None], reject: Callable[[Any], None]) -> None:
        if "resolve" in slots:
            raise TypeError("capability resolve is already bound")
        if "reject" in slots:
            raise TypeError("capability reject is already bound")
        slots["resolve"] = resolve
        slots["reject"] = reject

    future: Future[Any] = Future(executor, env=env)

    if not is_callable(slots.get("resolve")):
        raise TypeError("capability resolve is not callable")
    if not is_callable(slots.get("reject")):
        raise TypeError("capability reject is not callable")

    return Capability(future=future, resolve=slots["resolve"], reject=slots["reject"])


def perform_then(
    future: Future[Any],
    on_fulfilled: Any,
    on_rejected: Any,
    capability: Capability,
) -> Future[Any]:
    """Register reactions on ``future`` that settle ``capability``."""
    fulfill_reaction = Reaction(
        capability=capability,
        kind="fulfill",
        handler=on_fulfilled if is_callable(on_fulfilled) else None,
    )
    reject_reaction = Reaction(
        capability=capability,
        kind="reject",
        handler=on_rejected if is_callable(on_rejected) else None,
    )

    record = future._record
    queue = future._env.queue
    if record.state == "pending":
        record.fulfill_reactions.append(fulfill_reaction)  # type: ignore[union-attr]
        record.reject_reactions.append(reject_reaction)  # type: ignore[union-attr]
    elif record.state == "fulfilled":
        enqueue_reaction(queue, fulfill_reaction, record.result)
    else:
        tracker = future._env.tracker
        if tracker is not None and not record.is_handled:
            tracker.track(future, "handle")
        enqueue_reaction(queue, reject_reaction, record.result)

    record.is_handled = True
    return capability.future
