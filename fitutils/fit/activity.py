#!/usr/bin/env python3
"""
FIT activity - one decoded FIT file with its session, laps and records
"""
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import click

from ..const import (
    FIT_LAP_HEADER,
    FIT_LAPS_EXTENSION,
    FIT_RECORD_HEADER,
    FIT_RECORDS_EXTENSION,
    FIT_SESSION_EXTENSION,
    HR_ZONE_NAMES,
    NO_GPS_DATA,
)
from ..exceptions import ExportError
from ..exporters import model_row, write_csv, write_json
from ..printing import echo_count, echo_line, echo_number
from ..processors.coerce import is_missing
from ..processors.fitparse_reader import read_fit_messages
from ..processors.interface import ActivityFile, DataSourceType
from ..utils import TRACE, set_extension
from .lap import FITLap
from .record import FITRecord
from .session import FITSession

logger = logging.getLogger(__name__)

NAN = float("nan")


def _nan_max(values: Iterable[Optional[float]]) -> float:
    present = [value for value in values if not is_missing(value)]
    return max(present) if present else NAN


def _nan_min(values: Iterable[Optional[float]]) -> float:
    present = [value for value in values if not is_missing(value)]
    return min(present) if present else NAN


class FITActivityBuilder:
    """
    Accumulates one FIT file's messages into a FITActivity.

    The file_id message must come first; records seen before it have no
    creation time to measure their duration from.
    """

    def __init__(self, filename: Optional[str] = None):
        self.filename = filename
        self.session = FITSession.with_filename(filename) if filename else FITSession()
        self.laps: List[FITLap] = []
        self.records: List[FITRecord] = []
        self.num_sessions = 0
        self.lap_num = 0

    def add_message(self, kind: str, fields: Dict[str, Any]) -> None:
        """Route one decoded message to its mapper"""
        if kind == "file_id":
            self.session.parse_header(fields)
        elif kind == "session":
            self.num_sessions += 1
            self.session.parse_session(fields)
        elif kind == "lap":
            self.lap_num += 1
            self.laps.append(FITLap.from_fields(fields, self.filename, self.lap_num))
        elif kind == "record":
            self.records.append(FITRecord.from_fields(fields, self.session.time_created))
        else:
            logger.log(TRACE, f"Skipping message: {kind}")

    def build(self) -> "FITActivity":
        """Finalise counts and the bounding box"""
        self.session.num_sessions = self.num_sessions
        self.session.num_records = len(self.records)

        if not self.session.has_bounding_box():
            logger.debug(f"{self.filename}: bounding box missing, computing it from records")
            self.session.nec_lat = _nan_max(record.lat for record in self.records)
            self.session.nec_lon = _nan_max(record.lon for record in self.records)
            self.session.swc_lat = _nan_min(record.lat for record in self.records)
            self.session.swc_lon = _nan_min(record.lon for record in self.records)

        return FITActivity(self.session, self.laps, self.records)


class FITActivity(ActivityFile):
    """A decoded FIT file"""

    source_type = DataSourceType.FIT_FILE

    def __init__(self, session: FITSession, laps: List[FITLap] = None, records: List[FITRecord] = None):
        self.session = session
        self.laps = laps or []
        self.records = records or []

    @property
    def filename(self) -> Optional[str]:
        return self.session.filename

    @classmethod
    def from_messages(cls, filename: Optional[str], messages: Iterable[Tuple[str, Dict[str, Any]]]) -> "FITActivity":
        builder = FITActivityBuilder(filename)
        for kind, fields in messages:
            builder.add_message(kind, fields)
        return builder.build()

    @classmethod
    def from_file(cls, filename: Union[str, Path]) -> "FITActivity":
        """Decode a FIT file; raises DecodeError when it cannot be read"""
        logger.debug(f"Parsing FIT file: {filename}")
        activity = cls.from_messages(str(filename), read_fit_messages(filename))
        logger.debug(
            f"{filename}: {activity.session.num_sessions} sessions, "
            f"{len(activity.laps)} laps, {len(activity.records)} records"
        )
        return activity

    def export(self) -> None:
        """Write <name>.session.json, <name>.laps.csv and <name>.records.csv"""
        if not self.filename:
            raise ExportError("<unnamed>", "activity has no source file name")

        self.export_session_json(set_extension(self.filename, FIT_SESSION_EXTENSION))
        self.export_laps_csv(set_extension(self.filename, FIT_LAPS_EXTENSION))
        self.export_records_csv(set_extension(self.filename, FIT_RECORDS_EXTENSION))

    def export_session_json(self, path: Union[str, Path]) -> None:
        logger.debug(f"Writing session JSON: {path}")
        write_json(path, self.session)

    def export_laps_csv(self, path: Union[str, Path]) -> None:
        logger.debug(f"Writing laps CSV: {path}")
        write_csv(path, FIT_LAP_HEADER, (model_row(lap) for lap in self.laps))

    def export_records_csv(self, path: Union[str, Path]) -> None:
        logger.debug(f"Writing records CSV: {path}")
        write_csv(path, FIT_RECORD_HEADER, (model_row(record) for record in self.records))

    def has_gps(self) -> bool:
        return not any(
            is_missing(value)
            for value in (self.session.nec_lat, self.session.nec_lon, self.session.swc_lat, self.session.swc_lon)
        )

    def print(self, detailed: bool = False) -> None:
        """Print the session summary; ``detailed`` adds GPS, dynamics, times and zones"""
        session = self.session
        click.echo("")
        echo_line("File", session.filename)
        echo_line("Manufacturer", session.manufacturer)
        echo_line("Product", session.product)
        echo_line("Serial number", session.serial_number)
        echo_line("Time created", session.time_created)
        echo_line("Activity type", session.activity_type)
        echo_line("Activity detail", session.activity_detailed)
        echo_count("Sessions", session.num_sessions)
        echo_count("Laps", session.num_laps)
        echo_count("Records", session.num_records)
        echo_line("Total duration", session.duration)
        echo_count("Calories Burned", session.calories)
        echo_count("Cadence Avg", session.cadence_avg)
        echo_count("Cadence Max", session.cadence_max)
        echo_count("Heart Rate Min", session.heartrate_min)
        echo_count("Heart Rate Avg", session.heartrate_avg)
        echo_count("Heart Rate Max", session.heartrate_max)
        echo_number("Speed Avg (m/s)", session.speed_avg)
        echo_number("Speed Max (m/s)", session.speed_max)
        echo_count("Power Avg", session.power_avg)
        echo_count("Power Max", session.power_max)
        echo_count("Power Threshold", session.power_threshold)
        echo_count("Ascent (m)", session.ascent)
        echo_count("Descent (m)", session.descent)
        echo_number("Distance (m)", session.distance)

        if not detailed:
            return

        if self.has_gps():
            echo_number("North East Latitude", session.nec_lat, ">9.3f")
            echo_number("North East Longitude", session.nec_lon, ">9.3f")
            echo_number("South West Latitude", session.swc_lat, ">9.3f")
            echo_number("South West Longitude", session.swc_lon, ">9.3f")
        else:
            echo_line("Bounding box", None, placeholder=NO_GPS_DATA)
        echo_number("Stance time avg (ms)", session.stance_time_avg)
        echo_number("Vertical Oscillation Avg", session.vertical_oscillation_avg)
        echo_line("Duration Active", session.duration_active)
        echo_line("Duration Moving", session.duration_moving)
        echo_line("Start time", session.start_time)
        echo_line("Finish time", session.finish_time)

        click.echo("Time in Zones:")
        zones = session.time_in_hr_zones.zones()
        for index in reversed(range(len(zones))):
            echo_line(f"  {HR_ZONE_NAMES[index]}", zones[index], placeholder="00:00:00")
