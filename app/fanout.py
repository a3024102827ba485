import asyncio
from typing import Awaitable, Callable, Sequence, TypeVar

R = TypeVar("R")
T = TypeVar("T")


async def gather_in_order(
    references: Sequence[R],
    fetch: Callable[[R], Awaitable[T]],
) -> list[T]:
    """
    Runs `fetch` for every reference concurrently and returns the results in input order.

    All-or-nothing: if any fetch fails, the still-running siblings are cancelled and
    the first error is re-raised as-is.
    """
    if not references:
        return []

    try:
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(fetch(reference)) for reference in references]
    except BaseExceptionGroup as eg:
        # Unwrap so callers see the same error a single fetch would raise
        raise eg.exceptions[0] from None

    return [task.result() for task in tasks]
