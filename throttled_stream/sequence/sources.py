import inspect
from collections.abc import Sized
from typing import (
    Any,
    AsyncIterable,
    AsyncIterator,
    Iterable,
    TypeVar,
)

from throttled_stream.exceptions import InvalidSourceError


T = TypeVar("T")


async def iterate_async(data: Iterable[T | Any]) -> AsyncIterator[T]:
    """
    Yield the items of a synchronous iterable, awaiting any awaitable
    items first. If iteration stops early over a sized collection, the
    coroutines left in it are closed without being run.
    """
    items = iter(data)

    try:
        for item in items:
            if inspect.isawaitable(item):
                item = await item

            yield item

    finally:
        if isinstance(data, Sized):
            _close_pending(items)


def _close_pending(items: Iterable[Any]):
    for item in items:
        if inspect.iscoroutine(item):
            item.close()


def to_async_iterator(source: AsyncIterable[T] | Iterable[T]) -> AsyncIterator[T]:
    if hasattr(source, "__anext__") and hasattr(source, "__aiter__"):
        return source

    if hasattr(source, "__aiter__"):
        return source.__aiter__()

    if not hasattr(source, "__iter__"):
        raise InvalidSourceError(
            f"Err. - expected an iterable or async iterable source, got {type(source).__name__}"
        )

    return iterate_async(source)


def is_known_empty(source: Any) -> bool:
    """True when the source can be seen to be empty without requesting an item."""
    if isinstance(source, Sized) and not hasattr(source, "__anext__"):
        return len(source) == 0

    return False
