#!/usr/bin/env python3
"""
GPX activity - one parsed GPX file with its metadata, tracks and routes
"""
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import click
import gpxpy
import gpxpy.gpx

from ..const import GPX_SESSION_EXTENSION, GPX_TRACKS_EXTENSION, GPX_WAYPOINTS_EXTENSION
from ..exceptions import DecodeError, ExportError
from ..exporters import model_header, model_row, write_csv, write_json
from ..printing import echo_count, echo_line, format_value
from ..processors.interface import ActivityCollection, ActivityFile, DataSourceType
from ..utils import set_extension
from .metadata import GPXMetadata
from .track import GPXRoute, GPXTrack
from .waypoint import GPXWaypoint

logger = logging.getLogger(__name__)

TRACK_EXCLUDE = {"waypoints"}


class GPXActivity(ActivityFile):
    """A decoded GPX file"""

    source_type = DataSourceType.GPX_FILE

    def __init__(self,
                 metadata: GPXMetadata,
                 tracks: List[GPXTrack] = None,
                 routes: List[GPXRoute] = None,
                 waypoints: List[GPXWaypoint] = None):
        self.metadata = metadata
        self.tracks = tracks or []
        self.routes = routes or []
        self.waypoints = waypoints or []

    @property
    def filename(self) -> Optional[str]:
        return self.metadata.filename

    @classmethod
    def from_gpx(cls, gpx: Any, filename: Optional[str] = None) -> "GPXActivity":
        """Map a parsed gpxpy document"""
        tracks = [
            GPXTrack.from_gpx_track(track, filename, track_num)
            for track_num, track in enumerate(gpx.tracks, start=1)
        ]
        routes = [
            GPXRoute.from_gpx_route(route, route_num)
            for route_num, route in enumerate(gpx.routes, start=1)
        ]
        waypoints = [
            GPXWaypoint.from_gpx_point(point, waypoint_num=waypoint_num)
            for waypoint_num, point in enumerate(gpx.waypoints, start=1)
        ]
        metadata = GPXMetadata.from_gpx(gpx, filename, tracks)
        return cls(metadata, tracks, routes, waypoints)

    @classmethod
    def from_file(cls, filename: Union[str, Path]) -> "GPXActivity":
        """Parse a GPX file; raises DecodeError when it cannot be read"""
        logger.debug(f"Parsing GPX file: {filename}")
        try:
            with open(filename, "r", encoding="utf-8") as gpx_file:
                gpx = gpxpy.parse(gpx_file)
        except (gpxpy.gpx.GPXException, OSError, UnicodeDecodeError) as e:
            raise DecodeError(str(filename), e) from e

        activity = cls.from_gpx(gpx, str(filename))
        logger.debug(
            f"{filename}: {len(activity.tracks)} tracks, {len(activity.routes)} routes, "
            f"{len(activity.waypoints)} waypoints"
        )
        return activity

    def all_waypoints(self) -> List[GPXWaypoint]:
        """Track points, then route points, then standalone waypoints"""
        points: List[GPXWaypoint] = []
        for track in self.tracks:
            points.extend(track.waypoints)
        for route in self.routes:
            points.extend(route.points)
        points.extend(self.waypoints)
        return points

    def export(self) -> None:
        """Write <name>.session.json, <name>.tracks.csv and <name>.waypoints.csv"""
        if not self.filename:
            raise ExportError("<unnamed>", "activity has no source file name")

        session_path = set_extension(self.filename, GPX_SESSION_EXTENSION)
        logger.debug(f"Writing session JSON: {session_path}")
        write_json(session_path, self.metadata)

        tracks_path = set_extension(self.filename, GPX_TRACKS_EXTENSION)
        logger.debug(f"Writing tracks CSV: {tracks_path}")
        write_csv(
            tracks_path,
            model_header(GPXTrack, TRACK_EXCLUDE),
            (model_row(track, TRACK_EXCLUDE) for track in self.tracks),
        )

        waypoints_path = set_extension(self.filename, GPX_WAYPOINTS_EXTENSION)
        logger.debug(f"Writing waypoints CSV: {waypoints_path}")
        write_csv(
            waypoints_path,
            model_header(GPXWaypoint),
            (model_row(point) for point in self.all_waypoints()),
        )

    def print(self, detailed: bool = False) -> None:
        """Print the metadata summary; ``detailed`` adds one line per track"""
        metadata = self.metadata
        click.echo("")
        echo_line("File", metadata.filename)
        echo_line("Version", metadata.version)
        echo_line("Creator", metadata.creator)
        echo_line("Activity", metadata.activity)
        echo_line("Description", metadata.description)
        echo_line("Author", metadata.author_name)
        echo_line("Time", metadata.time)
        echo_line("Duration", metadata.duration)
        echo_line("Copyright", _copyright(metadata.copyright_author, metadata.copyright_year))
        echo_count("Waypoints", metadata.num_waypoints)
        echo_count("Tracks", metadata.num_tracks)
        echo_count("Routes", metadata.num_routes)

        if not detailed:
            return

        for track in self.tracks:
            click.echo(
                f"  Track {track.track_num}: {format_value(track.name)}, "
                f"{track.num_segments} segments, {track.num_waypoints} waypoints, "
                f"start {format_value(track.start_time)}, duration {format_value(track.duration)}"
            )


def _copyright(author: Optional[str], year: Optional[int]) -> Optional[str]:
    if author is None and year is None:
        return None
    return " ".join(str(part) for part in (author, year) if part is not None)


class GPXActivities(ActivityCollection[GPXActivity]):
    """Activities from every GPX file in a run"""

    def export_summary(self, filename: Union[str, Path]) -> None:
        """Header plus one metadata row per activity"""
        logger.info(f"Exporting GPX summary to {filename}")
        write_csv(
            filename,
            model_header(GPXMetadata),
            (model_row(activity.metadata) for activity in self.activities),
        )
