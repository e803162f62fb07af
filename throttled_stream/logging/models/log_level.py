from __future__ import annotations
from enum import Enum
from typing import Literal

LogLevelName = Literal[
    'trace',
    'debug',
    'info',
    'warn',
    'error',
    'critical',
    'fatal'
]


class LogLevel(Enum):
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    FATAL = 'FATAL'

    @classmethod
    def to_level(cls, level_name: LogLevelName | LogLevel) -> LogLevel:
        if isinstance(level_name, LogLevel):
            return level_name

        level = cls.__members__.get(level_name.upper())
        if level is None:
            raise ValueError(
                f"Err. - unknown log level {level_name!r}"
            )

        return level
