"""
Decoded field values to typed values.

Every helper takes whatever the decoder produced for a field (or ``None``
when the field was missing) and returns either a value of the requested type
or ``None``. Nothing here raises on bad input.
"""
import math
import re
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..const import LATLON_MULTIPLIER
from ..duration import Duration
from ..exceptions import DurationError

UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF
SINT32_MIN = -(2 ** 31)
SINT32_MAX = 2 ** 31 - 1

_WORD_SEPARATORS = re.compile(r"[_\-\s]+")


def _as_int(value: Any, lower: int, upper: int) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < lower or value > upper:
        return None
    return value


def as_uint8(value: Any) -> Optional[int]:
    return _as_int(value, 0, UINT8_MAX)


def as_uint16(value: Any) -> Optional[int]:
    return _as_int(value, 0, UINT16_MAX)


def as_sint32(value: Any) -> Optional[int]:
    return _as_int(value, SINT32_MIN, SINT32_MAX)


def as_float64(value: Any) -> Optional[float]:
    """Floats pass through, integers are promoted."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    return None


def as_string(value: Any) -> Optional[str]:
    """Strings pass through; enum-like values decoded to text come through as text."""
    if isinstance(value, str):
        return value
    return None


def as_timestamp(value: Any) -> Optional[datetime]:
    """
    Convert to a timezone-aware local datetime.

    Naive datetimes are taken to be UTC, as FIT and most GPX/TCX writers
    store them.
    """
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone()


def semicircles_to_degrees(value: Any) -> Optional[float]:
    semicircles = as_sint32(value)
    if semicircles is None:
        return None
    return semicircles * LATLON_MULTIPLIER


def title_case(value: str) -> str:
    """
    Split on underscores, hyphens and whitespace and capitalise each word.

    ``running`` gives ``Running``, ``trail_running`` gives ``Trail Running``.
    Applying it twice changes nothing.
    """
    return " ".join(word[:1].upper() + word[1:].lower() for word in _WORD_SEPARATORS.split(value) if word)


def is_missing(value: Any) -> bool:
    """True for None and NaN"""
    return value is None or (isinstance(value, float) and math.isnan(value))


def first_present(fields: Dict[str, Any], *names: str) -> Any:
    """Value of the first name present in the field map"""
    for name in names:
        value = fields.get(name)
        if value is not None:
            return value
    return None


def as_text(value: Any) -> Optional[str]:
    """Text, or an integer code (serial numbers, unknown products) as text"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    return as_string(value)


def as_seconds_duration(value: Any) -> Optional[Duration]:
    """Decoded seconds to a Duration"""
    secs = as_float64(value)
    if secs is None:
        return None
    try:
        return Duration.from_seconds(secs)
    except DurationError:
        return None


def as_millis_duration(value: Any) -> Optional[Duration]:
    """Decoded milliseconds to a Duration"""
    millis = as_float64(value)
    if millis is None:
        return None
    try:
        return Duration.from_milliseconds(millis)
    except DurationError:
        return None
