"""
Time-of-day parsing and elapsed-time formatting.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

ZERO_ELAPSED = "00:00:00"
# signed decimal digits only; int() would also take "1_0"
_COMPONENT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ValidTime:
    seconds: int


@dataclass(frozen=True)
class UnparsableTime:
    """Marker for a time field that is not ``HH:MM:SS``. Sorts after every valid time."""

    def __repr__(self) -> str:
        return "UNPARSABLE"


UNPARSABLE = UnparsableTime()

Timestamp = Union[ValidTime, UnparsableTime]


def time_to_seconds(text: str) -> Timestamp:
    parts = text.split(":")
    if len(parts) != 3:
        return UNPARSABLE
    values: list[int] = []
    for part in parts:
        stripped = part.strip()
        if not stripped:
            # an empty component counts as zero ("10::05")
            values.append(0)
        elif _COMPONENT_RE.fullmatch(stripped):
            values.append(int(stripped))
        else:
            return UNPARSABLE
    hh, mm, ss = values
    return ValidTime(hh * 3600 + mm * 60 + ss)


def sort_key(timestamp: Timestamp) -> Tuple[int, int]:
    if isinstance(timestamp, ValidTime):
        return (0, timestamp.seconds)
    return (1, 0)


def elapsed_between(previous: Optional[Timestamp], current: Timestamp) -> int:
    """
    Whole seconds between two consecutive timestamps.

    Any side that is missing or unparsable yields 0.
    """

    if previous is None:
        return 0
    if not isinstance(current, ValidTime) or not isinstance(previous, ValidTime):
        return 0
    return math.floor(current.seconds - previous.seconds)


def seconds_to_hhmmss(seconds: Union[int, float]) -> str:
    if seconds == 0:
        return ZERO_ELAPSED
    if seconds < 0:
        raise ValueError(f"Negative duration not supported: {seconds}")
    whole = int(math.floor(seconds))
    hh = whole // 3600
    mm = (whole % 3600) // 60
    ss = whole % 60
    return f"{hh:02d}:{mm:02d}:{ss:02d}"
