from .env import (
    Env as Env,
    load_env as load_env,
    TimeParser as TimeParser,
)
from .exceptions import (
    ThrottledStreamError as ThrottledStreamError,
    InvalidGateConfigError as InvalidGateConfigError,
    GateAlreadyOwnedError as GateAlreadyOwnedError,
    InvalidSourceError as InvalidSourceError,
)
from .extensions import (
    throttled as throttled,
    gated as gated,
    max_items as max_items,
    sleep_delayed as sleep_delayed,
    interval_delayed as interval_delayed,
)
from .gates import (
    CountGate as CountGate,
    FixedDelayGate as FixedDelayGate,
    Gate as Gate,
    GateSignal as GateSignal,
    IntervalGate as IntervalGate,
)
from .sequence import (
    GatedSequence as GatedSequence,
    GatedSequenceState as GatedSequenceState,
    ThrottledStream as ThrottledStream,
)
from .timers import (
    Clock as Clock,
    IntervalTimer as IntervalTimer,
    MonotonicClock as MonotonicClock,
    SleepTimer as SleepTimer,
    next_deadline as next_deadline,
)
