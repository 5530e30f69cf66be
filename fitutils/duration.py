"""
Non-negative elapsed time.

``Duration`` wraps a ``timedelta`` that is never negative. It prints as
``HH:MM:SS`` (seconds truncated) and serializes as float seconds, both in
JSON and in CSV cells.
"""

import math
from datetime import datetime, timedelta
from functools import total_ordering
from typing import Any, Union

from pydantic_core import core_schema

from .exceptions import DurationError


@total_ordering
class Duration:
    """Elapsed time between two instants, or a span reported by a device."""

    __slots__ = ("_delta",)

    def __init__(self, delta: timedelta = timedelta(0)):
        if not isinstance(delta, timedelta):
            raise TypeError(f"Duration expects a timedelta, got {type(delta).__name__}")
        if delta < timedelta(0):
            raise DurationError("Duration cannot be negative", {"delta": str(delta)})
        self._delta = delta

    @classmethod
    def from_seconds(cls, secs: float) -> "Duration":
        secs = float(secs)
        if math.isnan(secs) or math.isinf(secs) or secs < 0:
            raise DurationError("Invalid duration in seconds", {"seconds": secs})
        return cls(timedelta(seconds=secs))

    @classmethod
    def from_milliseconds(cls, millis: float) -> "Duration":
        millis = float(millis)
        if math.isnan(millis) or math.isinf(millis) or millis < 0:
            raise DurationError("Invalid duration in milliseconds", {"milliseconds": millis})
        return cls(timedelta(milliseconds=millis))

    @classmethod
    def between(cls, start: datetime, finish: datetime) -> "Duration":
        """Absolute time between two instants, in either order."""
        return cls(abs(finish - start))

    def total_seconds(self) -> float:
        return self._delta.total_seconds()

    def as_secs(self) -> int:
        """Whole seconds, truncated."""
        return int(self._delta.total_seconds())

    def to_timedelta(self) -> timedelta:
        return self._delta

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self._delta + other._delta)

    def __sub__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        if other._delta > self._delta:
            raise DurationError(
                "Duration subtraction would be negative",
                {"minuend": self.total_seconds(), "subtrahend": other.total_seconds()},
            )
        return Duration(self._delta - other._delta)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._delta == other._delta

    def __lt__(self, other: "Duration") -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._delta < other._delta

    def __hash__(self) -> int:
        return hash(self._delta)

    def __bool__(self) -> bool:
        return self._delta != timedelta(0)

    def __str__(self) -> str:
        secs = self.as_secs()
        hours, rem = divmod(secs, 3600)
        minutes, seconds = divmod(rem, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

    def __repr__(self) -> str:
        return f"Duration(seconds={self.total_seconds()})"

    @classmethod
    def _validate(cls, value: Union["Duration", timedelta, int, float]) -> "Duration":
        if isinstance(value, Duration):
            return value
        if isinstance(value, timedelta):
            return cls(value)
        if isinstance(value, bool):
            raise TypeError("Duration cannot be built from a bool")
        if isinstance(value, (int, float)):
            return cls.from_seconds(value)
        raise TypeError(f"Cannot build a Duration from {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.total_seconds(),
                return_schema=core_schema.float_schema(),
            ),
        )


def sum_durations(durations) -> Duration:
    """Add up an iterable of durations, skipping missing ones."""
    total = Duration()
    for duration in durations:
        if duration is not None:
            total = total + duration
    return total
