"""
GPX file-level metadata, the summary row for a GPX file.
"""
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel

from ..duration import Duration, sum_durations
from ..processors.coerce import as_timestamp
from .track import GPXTrack
from .waypoint import attr


def _copyright_year(gpx: Any, time: Optional[datetime]) -> int:
    """Declared copyright year, else the year of the file time, else this year"""
    year = attr(gpx, "copyright_year")
    if isinstance(year, int) and not isinstance(year, bool):
        return year
    if isinstance(year, str) and year.strip().isdigit():
        return int(year.strip())
    if time is not None:
        return time.year
    return datetime.now().year


class GPXMetadata(BaseModel):
    """Summary of one GPX file"""

    filename: Optional[str] = None
    version: Optional[str] = None
    creator: Optional[str] = None
    activity: Optional[str] = None
    description: Optional[str] = None
    author_name: Optional[str] = None
    author_email: Optional[str] = None
    links_href: Optional[str] = None
    links_text: Optional[str] = None
    keywords: Optional[str] = None
    time: Optional[datetime] = None
    duration: Optional[Duration] = None
    copyright_author: Optional[str] = None
    copyright_year: Optional[int] = None
    copyright_license: Optional[str] = None
    num_waypoints: int = 0
    num_tracks: int = 0
    num_routes: int = 0

    @classmethod
    def from_gpx(cls, gpx: Any, filename: Optional[str], tracks: List[GPXTrack]) -> "GPXMetadata":
        """
        Build from a parsed gpxpy document and its already-mapped tracks.

        The activity name is the metadata name, or else the first track name.
        Only the first link is kept. Duration is the sum of the track spans.
        """
        activity = attr(gpx, "name")
        if not activity and tracks:
            activity = tracks[0].name

        time = as_timestamp(attr(gpx, "time"))
        return cls(
            filename=filename,
            version=attr(gpx, "version"),
            creator=attr(gpx, "creator"),
            activity=activity,
            description=attr(gpx, "description"),
            author_name=attr(gpx, "author_name"),
            author_email=attr(gpx, "author_email"),
            links_href=attr(gpx, "link"),
            links_text=attr(gpx, "link_text"),
            keywords=attr(gpx, "keywords"),
            time=time,
            duration=sum_durations(track.duration for track in tracks),
            copyright_author=attr(gpx, "copyright_author"),
            copyright_year=_copyright_year(gpx, time),
            copyright_license=attr(gpx, "copyright_license"),
            num_waypoints=len(attr(gpx, "waypoints") or []),
            num_tracks=len(tracks),
            num_routes=len(attr(gpx, "routes") or []),
        )
