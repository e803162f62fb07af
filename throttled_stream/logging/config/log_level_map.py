from typing import Dict

from throttled_stream.logging.models import LogLevel


class LogLevelMap:
    def __init__(self) -> None:
        self._levels: Dict[LogLevel, int] = {
            level: order for order, level in enumerate(LogLevel)
        }

    def __getitem__(self, level: LogLevel):
        return self._levels[level]
