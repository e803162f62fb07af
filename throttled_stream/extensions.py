from typing import (
    AsyncIterable,
    Iterable,
    TypeVar,
)

from throttled_stream.env import Env
from throttled_stream.gates import Duration, Gate
from throttled_stream.logging import Logger
from throttled_stream.sequence import GatedSequence, ThrottledStream
from throttled_stream.timers import Clock


T = TypeVar("T")


def throttled(
    source: AsyncIterable[T] | Iterable[T],
    env: Env | None = None,
    logger: Logger | None = None,
) -> ThrottledStream[T]:
    return ThrottledStream(
        source,
        env=env,
        logger=logger,
    )


def gated(
    source: AsyncIterable[T] | Iterable[T],
    gate: Gate,
    name: str | None = None,
) -> GatedSequence[T]:
    return GatedSequence(
        source,
        gate,
        name=name,
    )


def max_items(
    source: AsyncIterable[T] | Iterable[T],
    count: int,
) -> GatedSequence[T]:
    return throttled(source).max(count)


def sleep_delayed(
    source: AsyncIterable[T] | Iterable[T],
    duration: Duration | None = None,
    clock: Clock | None = None,
) -> GatedSequence[T]:
    return throttled(source).sleep(duration, clock=clock)


def interval_delayed(
    source: AsyncIterable[T] | Iterable[T],
    period: Duration | None = None,
    clock: Clock | None = None,
) -> GatedSequence[T]:
    return throttled(source).tick(period, clock=clock)
