"""Time quantities split into seconds, milliseconds, microseconds and nanoseconds."""

from __future__ import annotations

import math
from dataclasses import dataclass

MICROSECONDS_FACTOR = 1_000.0
MILLISECONDS_FACTOR = 1_000_000.0
SECONDS_FACTOR = 1_000_000_000.0
MFACTOR = 100


def _format_number(value: float) -> str:
    """Shortest text for a number, without a trailing '.0' on whole values."""
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if math.isfinite(value) and value == int(value) and abs(value) < 1e16:
        return str(int(value))
    return repr(float(value))


@dataclass(frozen=True)
class TimeValues:
    """One duration expressed in four units at once."""

    seconds: float = 0.0
    millis: float = 0.0
    micro: float = 0.0
    nano: float = 0.0

    @classmethod
    def from_nanoseconds(cls, nanoseconds: float) -> TimeValues:
        """Build the four views of a duration given in nanoseconds."""
        return cls(
            seconds=nanoseconds / SECONDS_FACTOR,
            millis=nanoseconds / MILLISECONDS_FACTOR,
            micro=nanoseconds / MICROSECONDS_FACTOR,
            nano=float(nanoseconds),
        )


@dataclass(frozen=True)
class ValueLabel:
    """A time value together with the unit label it is measured in."""

    value: float = 0.0
    label: str = ""

    def transform_time_micro(self, value: float) -> str:
        """Split microseconds into whole microseconds and rounded nanoseconds."""
        whole_us = math.trunc(value)
        ns = round((value - whole_us) * 1000)
        return f"{whole_us}us,{ns}ns"

    def transform_time_milli(self, value: float) -> str:
        """Split milliseconds into milliseconds, microseconds and nanoseconds."""
        whole_ms = math.trunc(value)
        rem_us = (value - whole_ms) * 1000
        us = round(rem_us)
        ns = round((rem_us - us) * 1000)
        return f"{whole_ms}ms,{us}us,{ns}ns"

    def transform_time_seconds(self, value: float) -> str:
        """Split seconds into seconds, milliseconds, microseconds and nanoseconds."""
        whole_s = math.trunc(value)
        rem_ms = (value - whole_s) * 1000
        ms = round(rem_ms)
        rem_us = (rem_ms - ms) * 1000
        us = round(rem_us)
        ns = round((rem_us - us) * 1000)
        return f"{whole_s}s,{ms}ms,{us}us,{ns}ns"

    def __str__(self) -> str:
        if self.label == "s":
            return self.transform_time_seconds(self.value)
        if self.label == "ms":
            return self.transform_time_milli(self.value)
        if self.label == "us":
            return self.transform_time_micro(self.value)
        return f"{_format_number(self.value)} {self.label}"


class Times:
    """A duration that can pick the most readable unit for itself."""

    def __init__(
        self,
        nanoseconds: float | TimeValues = 0.0,
        label_seconds: str = "s",
        label_millis: str = "ms",
        label_micro: str = "us",
        label_nano: str = "ns",
    ) -> None:
        if isinstance(nanoseconds, TimeValues):
            self.values = nanoseconds
        else:
            self.values = TimeValues.from_nanoseconds(nanoseconds)
        self.label_seconds = label_seconds
        self.label_millis = label_millis
        self.label_micro = label_micro
        self.label_nano = label_nano

    def relevant_timeframe(self) -> ValueLabel:
        """Return the largest unit in which the duration exceeds one."""
        values = self.values
        if values.seconds > 1.0:
            return ValueLabel(values.seconds, self.label_seconds)
        if values.millis > 1.0:
            return ValueLabel(values.millis, self.label_millis)
        if values.micro > 1.0:
            return ValueLabel(values.micro, self.label_micro)
        return ValueLabel(values.nano, self.label_nano)

    def __repr__(self) -> str:
        return f"Times({self.values!r})"