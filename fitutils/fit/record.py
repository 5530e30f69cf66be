"""
FIT record rows, one per sample.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel

from ..duration import Duration
from ..processors.coerce import (
    as_float64,
    as_millis_duration,
    as_timestamp,
    as_uint8,
    as_uint16,
    first_present,
    semicircles_to_degrees,
)


class FITRecord(BaseModel):
    """One row of the records CSV"""

    timestamp: Optional[datetime] = None
    duration: Optional[Duration] = None
    distance: Optional[float] = None
    altitude: Optional[float] = None
    stance_time: Optional[Duration] = None
    vertical_oscillation: Optional[float] = None
    cadence: Optional[int] = None
    speed: Optional[float] = None
    power: Optional[int] = None
    heartrate: Optional[int] = None
    calories: Optional[int] = None
    lat: Optional[float] = None
    lon: Optional[float] = None

    @classmethod
    def from_fields(cls, fields: Dict[str, Any], time_created: Optional[datetime] = None) -> "FITRecord":
        """
        Build a record from a record message field map.

        ``duration`` is the time since the file was created, and is absent
        when either the creation time or the record timestamp is missing.
        """
        timestamp = as_timestamp(fields.get("timestamp"))
        duration = None
        if timestamp is not None and time_created is not None:
            duration = Duration.between(timestamp, time_created)

        return cls(
            timestamp=timestamp,
            duration=duration,
            distance=as_float64(fields.get("distance")),
            altitude=as_float64(first_present(fields, "enhanced_altitude", "altitude")),
            stance_time=as_millis_duration(fields.get("stance_time")),
            vertical_oscillation=as_float64(fields.get("vertical_oscillation")),
            cadence=as_uint8(fields.get("cadence")),
            speed=as_float64(first_present(fields, "enhanced_speed", "speed")),
            power=as_uint16(fields.get("power")),
            heartrate=as_uint8(fields.get("heart_rate")),
            calories=as_uint16(fields.get("calories")),
            lat=semicircles_to_degrees(fields.get("position_lat")),
            lon=semicircles_to_degrees(fields.get("position_long")),
        )
