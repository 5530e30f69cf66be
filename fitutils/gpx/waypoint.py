"""
GPX waypoints: standalone waypoints, route points and track points.
"""
import math
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from ..processors.coerce import as_float64, as_timestamp


def attr(source: Any, name: str) -> Any:
    """Attribute of a gpxpy object, None when that class lacks it"""
    return getattr(source, name, None)


def _local_name(tag: Any) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def extension_value(source: Any, name: str) -> Optional[str]:
    """
    Text of the first extension element called ``name``, at any depth.

    Garmin writes heart rate and cadence as ``gpxtpx:hr`` and ``gpxtpx:cad``
    inside a ``TrackPointExtension``.
    """
    for extension in attr(source, "extensions") or []:
        for element in extension.iter():
            if _local_name(element.tag) == name and element.text:
                return element.text.strip()
    return None


def _as_int_text(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return int(value) if math.isfinite(value) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return _as_int_text(value)
    return None


class GPXWaypoint(BaseModel):
    """One row of the waypoints CSV"""

    track_num: Optional[int] = None
    route_num: Optional[int] = None
    segment_num: Optional[int] = None
    waypoint_num: Optional[int] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    elevation: Optional[float] = None
    speed: Optional[float] = None
    time: Optional[datetime] = None
    name: Optional[str] = None
    comment: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    num_links: int = 0
    links_href: Optional[str] = None
    links_text: Optional[str] = None
    symbol: Optional[str] = None
    w_type: Optional[str] = None
    geoidheight: Optional[float] = None
    fix: Optional[str] = None
    sat: Optional[int] = None
    hdop: Optional[float] = None
    vdop: Optional[float] = None
    pdop: Optional[float] = None
    age: Optional[float] = None
    dgpsid: Optional[int] = None
    heart_rate: Optional[int] = None
    cadence: Optional[int] = None

    @classmethod
    def from_gpx_point(cls, point: Any, **numbers: Optional[int]) -> "GPXWaypoint":
        """
        Build from a gpxpy waypoint, route point or track point.

        ``numbers`` carries the track/route/segment/waypoint numbers of the
        point within its file.
        """
        link = attr(point, "link")
        return cls(
            longitude=as_float64(attr(point, "longitude")),
            latitude=as_float64(attr(point, "latitude")),
            elevation=as_float64(attr(point, "elevation")),
            speed=as_float64(attr(point, "speed")),
            time=as_timestamp(attr(point, "time")),
            name=attr(point, "name"),
            comment=attr(point, "comment"),
            description=attr(point, "description"),
            source=attr(point, "source"),
            num_links=1 if link else 0,
            links_href=link,
            links_text=attr(point, "link_text"),
            symbol=attr(point, "symbol"),
            w_type=attr(point, "type"),
            geoidheight=as_float64(attr(point, "geoid_height")),
            fix=attr(point, "type_of_gpx_fix"),
            sat=_as_int(attr(point, "satellites")),
            hdop=as_float64(attr(point, "horizontal_dilution")),
            vdop=as_float64(attr(point, "vertical_dilution")),
            pdop=as_float64(attr(point, "position_dilution")),
            age=as_float64(attr(point, "age_of_dgps_data")),
            dgpsid=_as_int(attr(point, "dgps_id")),
            heart_rate=_as_int_text(extension_value(point, "hr")),
            cadence=_as_int_text(extension_value(point, "cad")),
            **numbers,
        )
