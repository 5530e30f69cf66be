"""
Placeholder tokens for file name patterns.

Every token has a long and a short form (``%manufacturer`` and ``%mf``).
Missing text becomes ``Unknown`` and a missing time gives zero-filled date
parts, so every token always resolves.
"""
from datetime import datetime
from typing import Dict, Optional

from .const import UNKNOWN
from .duration import Duration

TOKEN_ALIASES = {
    "manufacturer": "mf",
    "product": "pr",
    "serial_number": "sn",
    "activity": "ac",
    "activity_detailed": "ad",
    "year": "yr",
    "month": "mo",
    "day": "dy",
    "hour": "hr",
    "hour24": "h24",
    "hour12": "h12",
    "ampm": "ap",
    "minute": "mi",
    "second": "se",
    "weekday": "wd",
    "duration": "du",
}

MISSING_TIME = {
    "year": "0000",
    "month": "00",
    "day": "00",
    "hour": "00",
    "hour24": "00",
    "hour12": "00",
    "ampm": "ampm",
    "minute": "00",
    "second": "00",
    "weekday": "00",
}


def _time_parts(when: datetime) -> Dict[str, str]:
    return {
        "year": f"{when.year:04d}",
        "month": f"{when.month:02d}",
        "day": f"{when.day:02d}",
        "hour": f"{when.hour:02d}",
        "hour24": f"{when.hour:02d}",
        "hour12": when.strftime("%I"),
        "ampm": "pm" if when.hour >= 12 else "am",
        "minute": f"{when.minute:02d}",
        "second": f"{when.second:02d}",
        "weekday": when.strftime("%a"),
    }


def build_values(manufacturer: Optional[str] = None,
                 product: Optional[str] = None,
                 serial_number: Optional[str] = None,
                 activity: Optional[str] = None,
                 activity_detailed: Optional[str] = None,
                 when: Optional[datetime] = None,
                 duration: Optional[Duration] = None) -> Dict[str, str]:
    """Token map (``%name`` -> text) for one file"""
    parts = {
        "manufacturer": manufacturer or UNKNOWN,
        "product": product or UNKNOWN,
        "serial_number": serial_number or UNKNOWN,
        "activity": activity or UNKNOWN,
        "activity_detailed": activity_detailed or UNKNOWN,
        "duration": str(duration.as_secs()) if duration is not None else "0",
    }
    parts.update(_time_parts(when) if when is not None else MISSING_TIME)

    values = {}
    for name, alias in TOKEN_ALIASES.items():
        values[f"%{name}"] = parts[name]
        values[f"%{alias}"] = parts[name]
    return values


def substitute(pattern: str, values: Dict[str, str]) -> str:
    """Replace tokens, longest first so %hour12 is not eaten by %hour"""
    result = pattern
    for key in sorted(values, key=len, reverse=True):
        result = result.replace(key, values[key].strip())
    return result
