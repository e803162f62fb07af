from typing import Union

from .count_gate import CountGate as CountGate
from .duration import (
    Duration as Duration,
    to_seconds as to_seconds,
)
from .fixed_delay_gate import FixedDelayGate as FixedDelayGate
from .gate import (
    BaseGate as BaseGate,
    GateSignal as GateSignal,
)
from .interval_gate import IntervalGate as IntervalGate


Gate = Union[FixedDelayGate, IntervalGate, CountGate]
