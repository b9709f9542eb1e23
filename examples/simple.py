from __future__ import annotations

from types import SimpleNamespace

from futura import Future, Rejection, drain


def fail_with(value: int) -> int:
    raise Rejection(value)


def main() -> None:
    # Handlers run only when the default manual queue is drained
    chain = (
        Future.resolve(1)
        .then(lambda v: v + 1)
        .then(fail_with)
        .then(None, lambda reason: reason * 10)
    )
    chain.then(lambda v: print(f"chain settled with {v}"))

    recovered = Future.reject("x").then(lambda v: v, lambda reason: reason + "!")
    recovered.then(lambda v: print(f"recovered with {v!r}"))

    # Any object with a callable ``then`` is assimilated
    thenable = SimpleNamespace(then=lambda resolve, reject: resolve(5))
    Future.resolve(thenable).then(lambda v: print(f"thenable gave {v}"))

    jobs = drain()
    print(f"ran {jobs} jobs")


if __name__ == "__main__":
    main()
