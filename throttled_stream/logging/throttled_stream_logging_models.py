from .models import Entry, LogLevel


class GateTrace(Entry, kw_only=True):
    gate: str
    polls: int
    signal: str
    level: LogLevel = LogLevel.TRACE

class GateDebug(Entry, kw_only=True):
    gate: str
    polls: int
    missed: int = 0
    level: LogLevel = LogLevel.DEBUG

class SequenceTrace(Entry, kw_only=True):
    sequence: str
    gate: str
    emitted: int
    state: str
    level: LogLevel = LogLevel.TRACE

class SequenceDebug(Entry, kw_only=True):
    sequence: str
    gate: str
    emitted: int
    reason: str
    level: LogLevel = LogLevel.DEBUG
