"""Ordered asynchronous fold."""

from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

T = TypeVar("T")  # Item type
A = TypeVar("A")  # Accumulator type


async def fold_in_order(
    step: Callable[[A, T], Awaitable[A]], items: Iterable[T], initial: A
) -> A:
    """
    Thread ``initial`` through ``step`` for each item, one item at a time.

    Each step is awaited to completion before the next one starts, so side
    effects happen in item order and an exception from step ``i`` means steps
    ``0..i-1`` have completed and nothing after ``i`` has started.

    Example:
        async def append(acc: tuple[int, ...], item: int) -> tuple[int, ...]:
            return (*acc, await double(item))

        await fold_in_order(append, [1, 2, 3], ())  # (2, 4, 6)
    """
    accumulator = initial
    for item in items:
        accumulator = await step(accumulator, item)
    return accumulator
