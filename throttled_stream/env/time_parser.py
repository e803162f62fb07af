import re
from datetime import timedelta

from throttled_stream.exceptions import InvalidGateConfigError


class TimeParser:
    def __init__(self) -> None:
        self._units = {
            "ms": "milliseconds",
            "s": "seconds",
            "m": "minutes",
            "h": "hours",
            "d": "days",
            "w": "weeks",
        }

        self._pattern = re.compile(
            r"(?P<val>\d+(\.\d+)?)\s*(?P<unit>ms|[smhdw])?",
            flags=re.I,
        )

    def parse(self, time_amount: str) -> float:
        stripped = time_amount.strip()
        if not stripped or self._pattern.sub("", stripped).strip():
            raise InvalidGateConfigError(
                f"Err. - could not parse duration {time_amount!r}"
            )

        amounts: dict[str, float] = {}
        for match in self._pattern.finditer(stripped):
            unit = self._units.get(
                (match.group("unit") or "s").lower(),
                "seconds",
            )

            amounts[unit] = amounts.get(unit, 0.0) + float(match.group("val"))

        return float(
            timedelta(**amounts).total_seconds()
        )
