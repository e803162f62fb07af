import math
from datetime import timedelta
from typing import Union

from throttled_stream.env.time_parser import TimeParser
from throttled_stream.exceptions import InvalidGateConfigError


Duration = Union[int, float, timedelta, str]


def to_seconds(value: Duration, name: str = "duration") -> float:
    """
    Normalize a duration given as seconds, a timedelta or a duration
    string such as "250ms" or "1m30s" into float seconds.
    """
    if isinstance(value, bool):
        raise InvalidGateConfigError(
            f"Err. - {name} must be a number of seconds, timedelta or duration string, got bool"
        )

    if isinstance(value, timedelta):
        seconds = value.total_seconds()

    elif isinstance(value, (int, float)):
        seconds = float(value)

    elif isinstance(value, str):
        seconds = TimeParser().parse(value)

    else:
        raise InvalidGateConfigError(
            f"Err. - {name} must be a number of seconds, timedelta or duration string, got {type(value).__name__}"
        )

    if math.isnan(seconds) or math.isinf(seconds):
        raise InvalidGateConfigError(
            f"Err. - {name} must be finite, got {seconds}"
        )

    if seconds < 0:
        raise InvalidGateConfigError(
            f"Err. - {name} must not be negative, got {seconds}"
        )

    return seconds
