"""Invoke helpers — call sync or async callables uniformly.

Controller handlers, hooks, and auth injectors can be ``def`` or
``async def``. Any code that calls user-provided callables goes through
here so the sync/async check lives in exactly one place.

Usage::

    from verroute._internal.invoke import invoke, invoke_offloaded

    result = await invoke(hook, ctx)
    result = await invoke_offloaded(handler, ctx)
"""

import functools
import inspect
from typing import Any

import anyio.to_thread


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable."""
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result


async def invoke_offloaded(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Like ``invoke``, but run sync callables in a worker thread.

    Used for controller handlers, which may block on I/O.
    """
    if inspect.iscoroutinefunction(func):
        return await func(*args, **kwargs)
    result = await anyio.to_thread.run_sync(functools.partial(func, *args, **kwargs))
    if inspect.isawaitable(result):
        result = await result
    return result
