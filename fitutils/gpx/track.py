"""
GPX tracks and routes.
"""
import logging
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from ..duration import Duration
from .waypoint import GPXWaypoint, attr

logger = logging.getLogger(__name__)


class GPXTrack(BaseModel):
    """One row of the tracks CSV, with its flattened waypoints"""

    filename: Optional[str] = None
    track_num: int = 0
    name: Optional[str] = None
    start_time: Optional[datetime] = None
    duration: Optional[Duration] = None
    comment: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    links_href: Optional[str] = None
    links_text: Optional[str] = None
    t_type: Optional[str] = None
    num_segments: int = 0
    num_waypoints: int = 0
    waypoints: List[GPXWaypoint] = Field(default_factory=list)

    @classmethod
    def from_gpx_track(cls, track: Any, filename: Optional[str], track_num: int) -> "GPXTrack":
        """
        Build from a gpxpy track.

        Segments are numbered from 1 and waypoint numbers restart at 1 in each
        segment. Start time and duration come from the first and last
        waypoint and are absent if either has no time.
        """
        waypoints = []
        for segment_num, segment in enumerate(track.segments, start=1):
            for waypoint_num, point in enumerate(segment.points, start=1):
                waypoints.append(
                    GPXWaypoint.from_gpx_point(
                        point,
                        track_num=track_num,
                        segment_num=segment_num,
                        waypoint_num=waypoint_num,
                    )
                )

        start_time = None
        duration = None
        if waypoints and waypoints[0].time is not None and waypoints[-1].time is not None:
            start_time = waypoints[0].time
            duration = Duration.between(waypoints[0].time, waypoints[-1].time)
        elif waypoints:
            logger.debug(f"{filename}: track {track_num} has waypoints without a time")

        return cls(
            filename=filename,
            track_num=track_num,
            name=attr(track, "name"),
            start_time=start_time,
            duration=duration,
            comment=attr(track, "comment"),
            description=attr(track, "description"),
            source=attr(track, "source"),
            links_href=attr(track, "link"),
            links_text=attr(track, "link_text"),
            t_type=attr(track, "type"),
            num_segments=len(track.segments),
            num_waypoints=len(waypoints),
            waypoints=waypoints,
        )


class GPXRoute(BaseModel):
    """A planned route and its points"""

    route_num: int = 0
    name: Optional[str] = None
    comment: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    links_href: Optional[str] = None
    links_text: Optional[str] = None
    number: Optional[int] = None
    r_type: Optional[str] = None
    points: List[GPXWaypoint] = Field(default_factory=list)

    @classmethod
    def from_gpx_route(cls, route: Any, route_num: int) -> "GPXRoute":
        points = [
            GPXWaypoint.from_gpx_point(point, route_num=route_num, waypoint_num=waypoint_num)
            for waypoint_num, point in enumerate(route.points, start=1)
        ]
        number = attr(route, "number")
        return cls(
            route_num=route_num,
            name=attr(route, "name"),
            comment=attr(route, "comment"),
            description=attr(route, "description"),
            source=attr(route, "source"),
            links_href=attr(route, "link"),
            links_text=attr(route, "link_text"),
            number=number if isinstance(number, int) else None,
            r_type=attr(route, "type"),
            points=points,
        )
