"""
Per-file FIT session summary.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..duration import Duration
from ..processors.coerce import (
    as_float64,
    as_seconds_duration,
    as_string,
    as_text,
    as_timestamp,
    as_uint8,
    as_uint16,
    first_present,
    semicircles_to_degrees,
    title_case,
)
from ..utils import TRACE
from .hrzones import FITHrZones

logger = logging.getLogger(__name__)


class FITSession(BaseModel):
    """One summary row per FIT file"""

    filename: Optional[str] = None
    manufacturer: Optional[str] = None
    product: Optional[str] = None
    serial_number: Optional[str] = None
    time_created: Optional[datetime] = None
    activity_type: Optional[str] = None
    activity_detailed: Optional[str] = None
    num_sessions: Optional[int] = None
    num_laps: Optional[int] = None
    num_records: Optional[int] = None
    cadence_avg: Optional[int] = None
    cadence_max: Optional[int] = None
    heartrate_avg: Optional[int] = None
    heartrate_max: Optional[int] = None
    heartrate_min: Optional[int] = None
    speed_avg: Optional[float] = None
    speed_max: Optional[float] = None
    power_avg: Optional[int] = None
    power_max: Optional[int] = None
    power_threshold: Optional[int] = None
    nec_lat: Optional[float] = None
    nec_lon: Optional[float] = None
    swc_lat: Optional[float] = None
    swc_lon: Optional[float] = None
    stance_time_avg: Optional[float] = None
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
    def with_filename(cls, filename: str) -> "FITSession":
        return cls(filename=filename)

    def parse_header(self, fields: Dict[str, Any]) -> None:
        """Apply a file_id message"""
        self.manufacturer = as_text(fields.get("manufacturer"))
        self.product = as_text(fields.get("product"))
        self.serial_number = as_text(fields.get("serial_number"))
        self.time_created = as_timestamp(fields.get("time_created"))

    def parse_session(self, fields: Dict[str, Any]) -> None:
        """Apply a session message"""
        logger.log(TRACE, f"session fields = {fields}")

        self.activity_type = title_case(as_string(fields.get("sport")) or "unknown")
        self.activity_detailed = title_case(as_string(fields.get("sub_sport")) or "unknown")

        self.cadence_avg = as_uint8(fields.get("avg_cadence"))
        self.cadence_max = as_uint8(fields.get("max_cadence"))

        self.heartrate_avg = as_uint8(fields.get("avg_heart_rate"))
        self.heartrate_max = as_uint8(fields.get("max_heart_rate"))
        self.heartrate_min = as_uint8(fields.get("min_heart_rate"))

        self.stance_time_avg = as_float64(fields.get("avg_stance_time"))
        self.vertical_oscillation_avg = as_float64(fields.get("avg_vertical_oscillation"))

        self.speed_avg = as_float64(first_present(fields, "enhanced_avg_speed", "avg_speed"))
        self.speed_max = as_float64(first_present(fields, "enhanced_max_speed", "max_speed"))

        self.power_avg = as_uint16(fields.get("avg_power"))
        self.power_max = as_uint16(fields.get("max_power"))
        self.power_threshold = as_uint16(fields.get("threshold_power"))

        # NEC = north-east corner, SWC = south-west corner
        self.nec_lat = semicircles_to_degrees(fields.get("nec_lat"))
        self.nec_lon = semicircles_to_degrees(fields.get("nec_long"))
        self.swc_lat = semicircles_to_degrees(fields.get("swc_lat"))
        self.swc_lon = semicircles_to_degrees(fields.get("swc_long"))

        self.ascent = as_uint16(fields.get("total_ascent"))
        self.descent = as_uint16(fields.get("total_descent"))
        self.calories = as_uint16(fields.get("total_calories"))
        self.distance = as_float64(fields.get("total_distance"))

        self.duration = as_seconds_duration(fields.get("total_elapsed_time"))
        self.duration_active = as_seconds_duration(fields.get("total_timer_time"))
        self.duration_moving = as_seconds_duration(fields.get("total_moving_time"))

        self.start_time = as_timestamp(fields.get("start_time"))
        self.finish_time = as_timestamp(fields.get("timestamp"))

        self.num_laps = as_uint16(fields.get("num_laps"))
        self.time_in_hr_zones = FITHrZones.from_value(fields.get("time_in_hr_zone"))

    def has_bounding_box(self) -> bool:
        return None not in (self.nec_lat, self.nec_lon, self.swc_lat, self.swc_lon)
