import math


def next_deadline(
    previous_deadline: float,
    duration: float,
    now: float,
) -> float:
    """
    Compute the next deadline of a fixed-delay timer.

    The next deadline is anchored to the previous *scheduled* deadline
    rather than to the moment the timer was observed to fire, so time
    spent between firing and re-arming never accumulates.

    If the caller fell behind by one or more whole periods, the missed
    deadlines are skipped along the same grid:

        previous + k * duration, for the smallest k >= 1 that is >= now

    This means a late caller receives a single immediate resolution
    instead of a burst of catch-up resolutions, and the grid itself is
    never shifted by caller latency.

    Args:
        previous_deadline: The deadline the timer was last armed for
        duration: Spacing between deadlines, in seconds
        now: Current time on the same clock as previous_deadline

    Returns:
        The deadline to re-arm the timer for
    """
    deadline = previous_deadline + duration
    if deadline >= now:
        return deadline

    if duration <= 0:
        return now

    periods = math.ceil((now - previous_deadline) / duration)
    return previous_deadline + periods * duration


def missed_periods(
    previous_deadline: float,
    duration: float,
    now: float,
) -> int:
    """Count whole periods skipped by next_deadline() for the same arguments."""
    if duration <= 0:
        return 0

    skipped = next_deadline(previous_deadline, duration, now) - previous_deadline
    return max(0, round(skipped / duration) - 1)
