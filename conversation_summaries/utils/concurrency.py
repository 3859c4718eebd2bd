import asyncio
from typing import Awaitable, Iterable, List, Optional, TypeVar


T = TypeVar("T")


async def gather_all(aws: Iterable[Awaitable[T]], limit: Optional[int] = None) -> List[T]:
    """
    Await every awaitable and return results in input order.

    The first failure is re-raised unchanged and the tasks still pending
    are cancelled. `limit` caps how many run at the same time.
    """
    if limit is not None and limit < 1:
        raise ValueError("limit must be a positive integer")
    semaphore = asyncio.Semaphore(limit) if limit else None

    async def _run(aw: Awaitable[T]) -> T:
        if semaphore is None:
            return await aw
        async with semaphore:
            return await aw

    tasks = [asyncio.ensure_future(_run(aw)) for aw in aws]
    if not tasks:
        return []
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            if not task.done():
                task.cancel()
        # let cancelled tasks unwind before the error leaves this scope
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
