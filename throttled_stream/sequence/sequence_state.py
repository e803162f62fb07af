from enum import Enum


class GatedSequenceState(Enum):
    AWAITING_GATE = "AWAITING_GATE"
    AWAITING_INNER = "AWAITING_INNER"
    TERMINATED = "TERMINATED"
