from __future__ import annotations

from pydantic import BaseModel, StrictStr
from typing import Callable, Dict, Literal, Union

from .time_parser import TimeParser

PrimaryType = Union[str, int, float, bytes, bool]


class Env(BaseModel):
    THROTTLED_STREAM_LOG_LEVEL: StrictStr = "info"
    THROTTLED_STREAM_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    THROTTLED_STREAM_LOG_FORMAT: Literal["text", "json"] = "text"

    # Used by sleep()/tick() when no explicit duration is given
    THROTTLED_STREAM_DEFAULT_DELAY: StrictStr = "1s"
    THROTTLED_STREAM_DEFAULT_INTERVAL: StrictStr = "1s"

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "THROTTLED_STREAM_LOG_LEVEL": str,
            "THROTTLED_STREAM_LOG_OUTPUT": str,
            "THROTTLED_STREAM_LOG_FORMAT": str,
            "THROTTLED_STREAM_DEFAULT_DELAY": str,
            "THROTTLED_STREAM_DEFAULT_INTERVAL": str,
        }

    def get_logging_config(self) -> dict:
        """Get LoggingConfig.update() keyword arguments from environment settings."""
        return {
            "log_level": self.THROTTLED_STREAM_LOG_LEVEL,
            "log_output": self.THROTTLED_STREAM_LOG_OUTPUT,
            "log_format": self.THROTTLED_STREAM_LOG_FORMAT,
        }

    def default_delay_seconds(self) -> float:
        return TimeParser().parse(self.THROTTLED_STREAM_DEFAULT_DELAY)

    def default_interval_seconds(self) -> float:
        return TimeParser().parse(self.THROTTLED_STREAM_DEFAULT_INTERVAL)
