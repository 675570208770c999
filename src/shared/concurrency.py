"""Structured fan-out helpers."""
import asyncio
from collections.abc import Awaitable
from typing import Any


def _first_leaf(group: BaseExceptionGroup) -> BaseException:
    first: BaseException = group.exceptions[0]
    while isinstance(first, BaseExceptionGroup):
        first = first.exceptions[0]
    return first


async def gather_or_fail(*awaitables: Awaitable[Any]) -> list[Any]:
    """
    Await independent operations concurrently, all-or-nothing.

    Results come back in argument order regardless of completion order.
    When one operation fails the others are cancelled and the first failure
    is re-raised as-is (not wrapped in an ExceptionGroup).
    """
    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(_as_coroutine(aw)) for aw in awaitables]
    except BaseExceptionGroup as group:
        raise _first_leaf(group) from None
    return [task.result() for task in tasks]


async def _as_coroutine(awaitable: Awaitable[Any]) -> Any:
    return await awaitable
