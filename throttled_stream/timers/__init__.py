from .clock import (
    Clock as Clock,
    MonotonicClock as MonotonicClock,
)
from .deadlines import (
    next_deadline as next_deadline,
    missed_periods as missed_periods,
)
from .interval_timer import IntervalTimer as IntervalTimer
from .sleep_timer import SleepTimer as SleepTimer
