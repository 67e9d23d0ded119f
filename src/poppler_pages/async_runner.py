"""Helpers to run async operations from sync or async contexts."""

from __future__ import annotations

import asyncio
import threading
from queue import Queue
from typing import TYPE_CHECKING, Any, TypeVar

from poppler_pages.exceptions import AsyncExecutionError, PackageError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Coroutine, Sequence

T = TypeVar("T")


def _run_in_background_thread(coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine in a dedicated thread with its own event loop.

    Args:
        coro: The coroutine to run.

    Raises:
        PackageError: Re-raised unchanged when the coroutine fails with one.
        AsyncExecutionError: If the coroutine raises any other exception.

    Returns:
        The result of the coroutine.
    """
    output: Queue[T | BaseException] = Queue(maxsize=1)

    def _runner() -> None:
        try:
            output.put(asyncio.run(coro))
        except BaseException as exc:
            output.put(exc)

    thread = threading.Thread(target=_runner, daemon=True)
    thread.start()
    thread.join()

    result = output.get()
    if isinstance(result, PackageError):
        raise result
    if isinstance(result, BaseException):
        raise AsyncExecutionError(result=result) from result
    return result


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine from both sync and async contexts.

    From a sync context the coroutine runs on a fresh event loop and its
    exceptions propagate unchanged. From inside a running loop it is moved to a
    dedicated thread; package errors still propagate unchanged and any other
    failure surfaces as `AsyncExecutionError`.

    Args:
        coro: The coroutine to run.

    Returns:
        The result of the coroutine.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    return _run_in_background_thread(coro)


async def gather_ordered(
    factories: Sequence[Callable[[], Awaitable[T]]],
    *,
    limit: int,
) -> list[T]:
    """Await factories concurrently, at most `limit` at a time, keeping input order.

    The first failure propagates. Siblings already started are left running,
    while queued ones are dropped without calling their factory.

    Args:
        factories: Zero-argument callables producing the awaitables to run.
        limit: Maximum number of awaitables in flight.

    Returns:
        list[T]: Results positioned like their factories.
    """
    semaphore = asyncio.Semaphore(max(limit, 1))
    failed = asyncio.Event()
    started: set[int] = set()

    async def _bounded(index: int, factory: Callable[[], Awaitable[T]]) -> T:
        async with semaphore:
            # A slot freed by the failing task can be granted before gather reports the failure.
            if failed.is_set():
                raise asyncio.CancelledError
            started.add(index)
            try:
                return await factory()
            except Exception:
                failed.set()
                raise

    tasks = [asyncio.ensure_future(_bounded(index, factory)) for index, factory in enumerate(factories)]
    try:
        return list(await asyncio.gather(*tasks))
    except Exception:
        failed.set()
        for index, task in enumerate(tasks):
            if index not in started:
                task.cancel()
        raise
