"""Concurrent fan-out of independent lookups.

Runs zero-argument async callables in one anyio task group and collects
their results by key. The first failure cancels the siblings; the caller
sees that failure itself rather than anyio's exception group, so a
``PageNotFound`` from a lookup can be caught as a ``PageNotFound``.

Only the task group's own wrapper is removed. An exception group raised
by a call is passed on as raised, with all of its members.
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

import anyio


async def gather(calls: Mapping[str, Callable[[], Awaitable[Any]]]) -> dict[str, Any]:
    """Await every call concurrently and return ``{key: result}``.

    Raises:
        Exception: The first ordinary exception raised by any call.
    """
    results: dict[str, Any] = {}

    async def _run(key: str, call: Callable[[], Awaitable[Any]]) -> None:
        results[key] = await call()

    try:
        async with anyio.create_task_group() as tg:
            for key, call in calls.items():
                tg.start_soon(_run, key, call, name=key)
    except BaseExceptionGroup as group:
        for exc in group.exceptions:
            if isinstance(exc, Exception):
                raise exc from None
        raise

    return results
