#!/usr/bin/env python3
"""
TCX reader using lxml - decodes TrainingCenterDatabase v2 documents
"""
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from dateutil.parser import parse as parse_datetime
from lxml import etree

from ..const import TCX_NAMESPACES
from ..exceptions import DecodeError
from .coerce import as_timestamp

logger = logging.getLogger(__name__)

NS = TCX_NAMESPACES


@dataclass
class TcxTrackpoint:
    """Trackpoint sample"""
    time: Optional[datetime] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude_meters: Optional[float] = None
    distance_meters: Optional[float] = None
    heart_rate: Optional[float] = None
    cadence: Optional[int] = None
    speed: Optional[float] = None


@dataclass
class TcxTrack:
    """Track within a lap"""
    trackpoints: List[TcxTrackpoint] = field(default_factory=list)


@dataclass
class TcxLap:
    """Lap summary and its tracks"""
    start_time: Optional[datetime] = None
    total_time_seconds: float = 0.0
    distance_meters: float = 0.0
    maximum_speed: Optional[float] = None
    calories: int = 0
    average_heart_rate: Optional[float] = None
    maximum_heart_rate: Optional[float] = None
    cadence: Optional[int] = None
    tracks: List[TcxTrack] = field(default_factory=list)


@dataclass
class TcxActivity:
    """Activity with its laps"""
    sport: Optional[str] = None
    id: Optional[str] = None
    notes: Optional[str] = None
    laps: List[TcxLap] = field(default_factory=list)

    @property
    def start_time(self) -> Optional[datetime]:
        """The activity Id is its start time"""
        return parse_time(self.id)


def parse_time(text: Optional[str]) -> Optional[datetime]:
    if not text:
        return None
    try:
        return as_timestamp(parse_datetime(text))
    except (ValueError, OverflowError):
        logger.debug(f"Unparseable TCX time: {text}")
        return None


def _text(element, path: str) -> Optional[str]:
    found = element.find(path, NS)
    if found is None or found.text is None:
        return None
    return found.text.strip()


def _float(element, path: str) -> Optional[float]:
    text = _text(element, path)
    if text is None:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _int(element, path: str) -> Optional[int]:
    value = _float(element, path)
    return int(value) if value is not None else None


def _read_trackpoint(element) -> TcxTrackpoint:
    return TcxTrackpoint(
        time=parse_time(_text(element, "tcx:Time")),
        latitude=_float(element, "tcx:Position/tcx:LatitudeDegrees"),
        longitude=_float(element, "tcx:Position/tcx:LongitudeDegrees"),
        altitude_meters=_float(element, "tcx:AltitudeMeters"),
        distance_meters=_float(element, "tcx:DistanceMeters"),
        heart_rate=_float(element, "tcx:HeartRateBpm/tcx:Value"),
        cadence=_int(element, "tcx:Cadence"),
        speed=_float(element, "tcx:Extensions/ax:TPX/ax:Speed"),
    )


def _read_lap(element) -> TcxLap:
    tracks = [
        TcxTrack(trackpoints=[_read_trackpoint(tp) for tp in track.findall("tcx:Trackpoint", NS)])
        for track in element.findall("tcx:Track", NS)
    ]
    return TcxLap(
        start_time=parse_time(element.get("StartTime")),
        total_time_seconds=_float(element, "tcx:TotalTimeSeconds") or 0.0,
        distance_meters=_float(element, "tcx:DistanceMeters") or 0.0,
        maximum_speed=_float(element, "tcx:MaximumSpeed"),
        calories=_int(element, "tcx:Calories") or 0,
        average_heart_rate=_float(element, "tcx:AverageHeartRateBpm/tcx:Value"),
        maximum_heart_rate=_float(element, "tcx:MaximumHeartRateBpm/tcx:Value"),
        cadence=_int(element, "tcx:Cadence"),
        tracks=tracks,
    )


def read_tcx(tcx_file_path: Union[str, Path]) -> List[TcxActivity]:
    """
    Decode a TCX file into its activities.

    Raises:
        DecodeError: file missing, unreadable or not well-formed XML
    """
    try:
        tree = etree.parse(str(tcx_file_path))
    except (etree.XMLSyntaxError, OSError) as e:
        raise DecodeError(str(tcx_file_path), e) from e

    root = tree.getroot()
    activities = []
    for element in root.findall("tcx:Activities/tcx:Activity", NS):
        activities.append(
            TcxActivity(
                sport=element.get("Sport"),
                id=_text(element, "tcx:Id"),
                notes=_text(element, "tcx:Notes"),
                laps=[_read_lap(lap) for lap in element.findall("tcx:Lap", NS)],
            )
        )

    logger.debug(f"Read {len(activities)} activities from {tcx_file_path}")
    return activities
