#!/usr/bin/env python3
"""
TCX activity - aggregate figures over every activity, lap, track and trackpoint in a TCX file
"""
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

import click
from pydantic import BaseModel

from ..const import TCX_ACTIVITY_EXTENSION, TCX_TRACKPOINTS_EXTENSION
from ..duration import Duration
from ..exceptions import DurationError, ExportError
from ..exporters import model_header, model_row, write_csv, write_json
from ..printing import echo_count, echo_line, echo_number
from ..processors.interface import ActivityCollection, ActivityFile, DataSourceType
from ..processors.tcx_reader import TcxActivity, read_tcx
from ..utils import set_extension

logger = logging.getLogger(__name__)


def _lap_duration(seconds: float) -> Duration:
    try:
        return Duration.from_seconds(seconds)
    except DurationError:
        logger.warning(f"Ignoring invalid lap time: {seconds}")
        return Duration()


def _running_max(current: Optional[float], candidate: Optional[float]) -> Optional[float]:
    if candidate is None:
        return current
    if current is None or candidate > current:
        return candidate
    return current


class TCXTrackpoint(BaseModel):
    """One row of the trackpoints CSV"""

    sport: Optional[str] = None
    start_time: Optional[datetime] = None
    time: Optional[datetime] = None
    duration: Optional[Duration] = None
    activity_num: int = 0
    lap_num: int = 0
    track_num: int = 0
    trackpoint_num: int = 0
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude_meters: Optional[float] = None
    distance_meters: Optional[float] = None
    heart_rate: Optional[float] = None
    cadence: Optional[int] = None


class TCXTrackpointList:
    """Every trackpoint of a file, numbered from 1 at each level"""

    def __init__(self, trackpoints: List[TCXTrackpoint] = None):
        self.trackpoints = trackpoints or []

    def __len__(self) -> int:
        return len(self.trackpoints)

    @classmethod
    def from_activities(cls, activities: List[TcxActivity]) -> "TCXTrackpointList":
        trackpoints = []
        for activity_num, activity in enumerate(activities, start=1):
            start_time = activity.start_time
            for lap_num, lap in enumerate(activity.laps, start=1):
                for track_num, track in enumerate(lap.tracks, start=1):
                    for trackpoint_num, point in enumerate(track.trackpoints, start=1):
                        duration = None
                        if start_time is not None and point.time is not None:
                            duration = Duration.between(start_time, point.time)
                        trackpoints.append(
                            TCXTrackpoint(
                                sport=activity.sport,
                                start_time=start_time,
                                time=point.time,
                                duration=duration,
                                activity_num=activity_num,
                                lap_num=lap_num,
                                track_num=track_num,
                                trackpoint_num=trackpoint_num,
                                latitude=point.latitude,
                                longitude=point.longitude,
                                altitude_meters=point.altitude_meters,
                                distance_meters=point.distance_meters,
                                heart_rate=point.heart_rate,
                                cadence=point.cadence,
                            )
                        )
        return cls(trackpoints)

    def export_csv(self, path: Union[str, Path]) -> None:
        logger.debug(f"Writing trackpoints CSV: {path}")
        write_csv(path, model_header(TCXTrackpoint), (model_row(point) for point in self.trackpoints))


class TCXActivity(BaseModel):
    """Summary of one TCX file"""

    filename: Optional[str] = None
    num_activities: int = 0
    sport: Optional[str] = None
    start_time: Optional[datetime] = None
    duration: Optional[Duration] = None
    notes: Optional[str] = None
    num_laps: int = 0
    num_tracks: int = 0
    num_trackpoints: int = 0
    distance_meters: Optional[float] = None
    start_altitude: Optional[float] = None
    max_altitude: Optional[float] = None
    ascent_meters: Optional[float] = None
    average_speed: Optional[float] = None
    maximum_speed: Optional[float] = None
    calories: Optional[int] = None
    average_heart_rate: Optional[float] = None
    maximum_heart_rate: Optional[float] = None
    average_cadence: Optional[float] = None
    maximum_cadence: Optional[int] = None

    @classmethod
    def from_activities(cls, activities: List[TcxActivity], filename: Optional[str] = None) -> "TCXActivity":
        """
        Aggregate a decoded TCX file.

        Lap times, distances and calories are summed. Maximum speed and heart
        rate take the largest of the lap figures and the trackpoint samples.
        Average heart rate and cadence are divided by the total trackpoint
        count, including trackpoints without a reading. Ascent is the highest
        altitude minus the altitude of the very first trackpoint.
        """
        summary = cls(filename=filename)

        hr_total = 0.0
        cad_total = 0.0
        duration = Duration()
        distance = 0.0
        calories = 0

        first = activities[0] if activities else None
        if first and first.laps and first.laps[0].tracks and first.laps[0].tracks[0].trackpoints:
            summary.start_altitude = first.laps[0].tracks[0].trackpoints[0].altitude_meters
            summary.max_altitude = summary.start_altitude

        for activity in activities:
            summary.num_activities += 1
            summary.sport = activity.sport
            summary.start_time = activity.start_time
            summary.notes = activity.notes

            for lap in activity.laps:
                summary.num_laps += 1
                duration = duration + _lap_duration(lap.total_time_seconds)
                distance += lap.distance_meters
                calories += lap.calories
                summary.maximum_speed = _running_max(summary.maximum_speed, lap.maximum_speed)
                summary.maximum_heart_rate = _running_max(summary.maximum_heart_rate, lap.maximum_heart_rate)

                for track in lap.tracks:
                    summary.num_tracks += 1
                    summary.num_trackpoints += len(track.trackpoints)

                    for point in track.trackpoints:
                        if point.cadence is not None:
                            summary.maximum_cadence = int(_running_max(summary.maximum_cadence, point.cadence))
                            cad_total += point.cadence
                        if point.heart_rate is not None:
                            hr_total += point.heart_rate
                            summary.maximum_heart_rate = _running_max(summary.maximum_heart_rate, point.heart_rate)
                        summary.maximum_speed = _running_max(summary.maximum_speed, point.speed)
                        summary.max_altitude = _running_max(summary.max_altitude, point.altitude_meters)

        summary.duration = duration
        summary.distance_meters = distance
        summary.calories = calories
        summary.ascent_meters = (summary.max_altitude or 0.0) - (summary.start_altitude or 0.0)

        secs = duration.total_seconds()
        summary.average_speed = distance / secs if secs > 0 else 0.0

        if summary.num_trackpoints > 0:
            summary.average_cadence = cad_total / summary.num_trackpoints
            summary.average_heart_rate = hr_total / summary.num_trackpoints
        else:
            summary.average_cadence = 0.0
            summary.average_heart_rate = 0.0

        if summary.maximum_cadence is None and summary.average_cadence is not None:
            summary.maximum_cadence = int(summary.average_cadence)

        return summary


class TCXFile(ActivityFile):
    """A decoded TCX file: its summary and its trackpoint rows"""

    source_type = DataSourceType.TCX_FILE

    def __init__(self, activity: TCXActivity, trackpoints: TCXTrackpointList = None):
        self.activity = activity
        self.trackpoints = trackpoints or TCXTrackpointList()

    @property
    def filename(self) -> Optional[str]:
        return self.activity.filename

    @classmethod
    def from_activities(cls, activities: List[TcxActivity], filename: Optional[str] = None) -> "TCXFile":
        return cls(
            TCXActivity.from_activities(activities, filename),
            TCXTrackpointList.from_activities(activities),
        )

    @classmethod
    def from_file(cls, filename: Union[str, Path]) -> "TCXFile":
        """Decode a TCX file; raises DecodeError when it cannot be read"""
        logger.debug(f"Parsing TCX file: {filename}")
        tcx_file = cls.from_activities(read_tcx(filename), str(filename))
        logger.debug(
            f"{filename}: {tcx_file.activity.num_laps} laps, "
            f"{tcx_file.activity.num_trackpoints} trackpoints"
        )
        return tcx_file

    def export(self) -> None:
        """Write <name>.activity.json and <name>.trackpoints.csv"""
        if not self.filename:
            raise ExportError("<unnamed>", "activity has no source file name")

        activity_path = set_extension(self.filename, TCX_ACTIVITY_EXTENSION)
        logger.debug(f"Writing activity JSON: {activity_path}")
        write_json(activity_path, self.activity)

        self.trackpoints.export_csv(set_extension(self.filename, TCX_TRACKPOINTS_EXTENSION))

    def print(self, detailed: bool = False) -> None:
        """Print the summary; ``detailed`` adds altitude, speed and heart rate figures"""
        activity = self.activity
        click.echo("")
        echo_line("File", activity.filename)
        echo_line("Sport", activity.sport)
        echo_line("Start time", activity.start_time)
        echo_line("Duration", activity.duration)
        echo_line("Notes", activity.notes, placeholder="")
        echo_count("Activities", activity.num_activities)
        echo_count("Laps", activity.num_laps)
        echo_count("Tracks", activity.num_tracks)
        echo_count("Trackpoints", activity.num_trackpoints)
        echo_number("Distance (m)", activity.distance_meters)
        echo_count("Calories", activity.calories)

        if not detailed:
            return

        echo_number("Start altitude (m)", activity.start_altitude)
        echo_number("Max altitude (m)", activity.max_altitude)
        echo_number("Ascent (m)", activity.ascent_meters)
        echo_number("Avg Speed (m/s)", activity.average_speed)
        echo_number("Max Speed (m/s)", activity.maximum_speed)
        echo_number("Avg Heart Rate", activity.average_heart_rate)
        echo_number("Max Heart Rate", activity.maximum_heart_rate)
        echo_number("Avg Cadence", activity.average_cadence)
        echo_count("Max Cadence", activity.maximum_cadence)


class TCXActivitiesList(ActivityCollection[TCXFile]):
    """Activities from every TCX file in a run"""

    def export_summary(self, filename: Union[str, Path]) -> None:
        """Header plus one summary row per file"""
        logger.info(f"Exporting TCX summary to {filename}")
        write_csv(
            filename,
            model_header(TCXActivity),
            (model_row(tcx_file.activity) for tcx_file in self.activities),
        )

    def export_json(self, filename: Union[str, Path]) -> None:
        """All file summaries as one JSON array"""
        logger.info(f"Exporting TCX summaries to {filename}")
        write_json(filename, [tcx_file.activity.model_dump(mode="json") for tcx_file in self.activities])
