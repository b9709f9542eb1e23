from __future__ import annotations

import asyncio
import logging

from futura import Future, RuntimeConfig, configure


def fetch(name: str, delay: float) -> Future[str]:
    deferred = Future.deferred()
    asyncio.get_running_loop().call_later(delay, deferred.resolve, f"payload for {name}")
    return deferred.future


async def main() -> None:
    configure(RuntimeConfig(queue="asyncio", rejection_tracking="log"))

    future = fetch("users", 0.05)
    text = await future.then(str.upper)
    print(text)

    # Logged as an unhandled rejection, then awaited
    failed = Future.reject(LookupError("missing"))
    try:
        await failed
    except LookupError as exc:
        print(f"caught {exc!r}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
