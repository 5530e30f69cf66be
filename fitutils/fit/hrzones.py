"""
Time spent in each of the five heart rate zones.
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, model_serializer

from ..duration import Duration
from ..exceptions import DurationError

logger = logging.getLogger(__name__)

NUM_HR_ZONES = 5


class FITHrZones(BaseModel):
    """Time in zones 0-4. Zones are absent unless the device recorded all five."""

    hr_zone_0: Optional[Duration] = None
    hr_zone_1: Optional[Duration] = None
    hr_zone_2: Optional[Duration] = None
    hr_zone_3: Optional[Duration] = None
    hr_zone_4: Optional[Duration] = None

    @classmethod
    def from_value(cls, value: Any) -> "FITHrZones":
        """
        Build from the decoded ``time_in_hr_zone`` array (milliseconds per zone).

        Anything other than a sequence of exactly five values leaves every zone
        absent. An element that is not a non-negative number leaves only that
        zone absent.
        """
        if value is None:
            return cls()
        if not isinstance(value, (list, tuple)):
            logger.warning(f"time_in_hr_zone is not an array: {value!r}")
            return cls()
        if len(value) != NUM_HR_ZONES:
            logger.warning(f"time_in_hr_zone has {len(value)} elements, expected {NUM_HR_ZONES}")
            return cls()

        zones = {}
        for index, millis in enumerate(value):
            zones[f"hr_zone_{index}"] = _zone_duration(millis)
        return cls(**zones)

    def zones(self) -> List[Optional[Duration]]:
        return [self.hr_zone_0, self.hr_zone_1, self.hr_zone_2, self.hr_zone_3, self.hr_zone_4]

    @model_serializer
    def _serialize(self) -> Dict[str, float]:
        return {
            f"hr_zone_{index}_secs": zone.total_seconds() if zone is not None else 0.0
            for index, zone in enumerate(self.zones())
        }


def _zone_duration(millis: Any) -> Optional[Duration]:
    if isinstance(millis, bool) or not isinstance(millis, int):
        logger.warning(f"time_in_hr_zone element is not an integer: {millis!r}")
        return None
    try:
        return Duration.from_milliseconds(millis)
    except DurationError:
        logger.warning(f"time_in_hr_zone element is negative: {millis}")
        return None
