"""
FIT lap rows.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..duration import Duration
from ..processors.coerce import (
    as_float64,
    as_millis_duration,
    as_seconds_duration,
    as_timestamp,
    as_uint8,
    as_uint16,
    first_present,
    semicircles_to_degrees,
)
from .hrzones import FITHrZones


class FITLap(BaseModel):
    """One row of the laps CSV"""

    filename: Optional[str] = None
    lap_num: Optional[int] = None
    cadence_avg: Optional[int] = None
    cadence_max: Optional[int] = None
    heartrate_min: Optional[int] = None
    heartrate_avg: Optional[int] = None
    heartrate_max: Optional[int] = None
    speed_avg: Optional[float] = None
    speed_max: Optional[float] = None
    power_avg: Optional[int] = None
    power_max: Optional[int] = None
    lat_start: Optional[float] = None
    lon_start: Optional[float] = None
    lat_end: Optional[float] = None
    lon_end: Optional[float] = None
    stance_time_avg: Optional[Duration] = None
    vertical_oscillation_avg: Optional[float] = None
    ascent: Optional[int] = None
    descent: Optional[int] = None
    calories: Optional[int] = None
    distance: Optional[float] = None
    duration: Optional[Duration] = None
    duration_active: Optional[Duration] = None
    duration_moving: Optional[Duration] = None
    start_time: Optional[datetime] = None
    finish_time: Optional[datetime] = None
    time_in_hr_zones: FITHrZones = Field(default_factory=FITHrZones)

    @classmethod
    def from_fields(cls, fields: Dict[str, Any], filename: Optional[str], lap_num: int) -> "FITLap":
        """Build a lap from a lap message field map"""
        return cls(
            filename=filename,
            lap_num=lap_num,
            cadence_avg=as_uint8(fields.get("avg_cadence")),
            cadence_max=as_uint8(fields.get("max_cadence")),
            heartrate_min=as_uint8(fields.get("min_heart_rate")),
            heartrate_avg=as_uint8(fields.get("avg_heart_rate")),
            heartrate_max=as_uint8(fields.get("max_heart_rate")),
            speed_avg=as_float64(first_present(fields, "enhanced_avg_speed", "avg_speed")),
            speed_max=as_float64(first_present(fields, "enhanced_max_speed", "max_speed")),
            power_avg=as_uint16(fields.get("avg_power")),
            power_max=as_uint16(fields.get("max_power")),
            lat_start=semicircles_to_degrees(fields.get("start_position_lat")),
            lon_start=semicircles_to_degrees(fields.get("start_position_long")),
            lat_end=semicircles_to_degrees(fields.get("end_position_lat")),
            lon_end=semicircles_to_degrees(fields.get("end_position_long")),
            # stance time is recorded in milliseconds
            stance_time_avg=as_millis_duration(fields.get("avg_stance_time")),
            vertical_oscillation_avg=as_float64(fields.get("avg_vertical_oscillation")),
            ascent=as_uint16(fields.get("total_ascent")),
            descent=as_uint16(fields.get("total_descent")),
            calories=as_uint16(fields.get("total_calories")),
            distance=as_float64(fields.get("total_distance")),
            duration=as_seconds_duration(fields.get("total_elapsed_time")),
            duration_active=as_seconds_duration(fields.get("total_timer_time")),
            duration_moving=as_seconds_duration(fields.get("total_moving_time")),
            start_time=as_timestamp(fields.get("start_time")),
            finish_time=as_timestamp(fields.get("timestamp")),
            time_in_hr_zones=FITHrZones.from_value(fields.get("time_in_hr_zone")),
        )
