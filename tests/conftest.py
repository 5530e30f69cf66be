"""
Pytest configuration and fixtures for fitutils tests.

This module provides shared fixtures: temporary directories, a synthetic FIT
message stream and small GPX/TCX documents written to disk.
"""

import logging
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from fitutils.utils import LoggingConfig

# 2021-06-15 12:00:00 UTC, as fitparse hands it over (naive)
T0 = datetime(2021, 6, 15, 12, 0, 0)

# ~60 N, ~10 E and ~61 N, ~11 E in semicircles
LAT_60 = 715827883
LON_10 = 119304647
LAT_61 = 727758348
LON_11 = 131235112

HR_ZONES_MS = (23372, 31681, 32669, 447453, 1394934)


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop console/file handlers installed by LoggingConfig during a test."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    LoggingConfig._initialized = False


@pytest.fixture
def temp_dir():
    """Create temporary directory for testing."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def t0():
    return T0


@pytest.fixture
def fit_messages():
    """FileId, two records, one lap and one session, in file order."""
    return [
        ("file_id", {
            "manufacturer": "garmin",
            "product": "fr945",
            "garmin_product": "fr945",
            "serial_number": 3912345678,
            "time_created": T0,
        }),
        ("record", {
            "timestamp": T0 + timedelta(seconds=10),
            "distance": 5.0,
            "enhanced_altitude": 101.5,
            "altitude": 99.0,
            "enhanced_speed": 2.5,
            "heart_rate": 120,
            "cadence": 80,
            "stance_time": 250.0,
            "position_lat": LAT_60,
            "position_long": LON_10,
        }),
        ("record", {
            "timestamp": T0 + timedelta(seconds=20),
            "distance": 12.0,
            "altitude": 103.0,
            "speed": 2.7,
            "heart_rate": 125,
            "position_lat": LAT_61,
            "position_long": LON_11,
        }),
        ("lap", {
            "avg_cadence": 80,
            "max_cadence": 90,
            "avg_heart_rate": 122,
            "max_heart_rate": 125,
            "enhanced_avg_speed": 2.6,
            "start_position_lat": LAT_60,
            "start_position_long": LON_10,
            "end_position_lat": LAT_61,
            "end_position_long": LON_11,
            "avg_stance_time": 248.0,
            "total_distance": 12.0,
            "total_elapsed_time": 20.0,
            "total_timer_time": 20.0,
            "start_time": T0,
            "timestamp": T0 + timedelta(seconds=20),
            "time_in_hr_zone": HR_ZONES_MS,
        }),
        ("session", {
            "sport": "running",
            "sub_sport": "trail",
            "avg_cadence": 80,
            "max_cadence": 90,
            "avg_heart_rate": 122,
            "max_heart_rate": 125,
            "min_heart_rate": 95,
            "enhanced_avg_speed": 2.6,
            "enhanced_max_speed": 2.7,
            "total_ascent": 4,
            "total_descent": 2,
            "total_calories": 30,
            "total_distance": 12.0,
            "total_elapsed_time": 1800.0,
            "total_timer_time": 1750.0,
            "start_time": T0,
            "timestamp": T0 + timedelta(seconds=1800),
            "num_laps": 1,
            "time_in_hr_zone": HR_ZONES_MS,
        }),
    ]


GPX_DOCUMENT = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="Garmin Connect"
     xmlns="http://www.topografix.com/GPX/1/1"
     xmlns:gpxtpx="http://www.garmin.com/xmlschemas/TrackPointExtension/v1">
  <metadata>
    <link href="https://connect.garmin.com"><text>Garmin Connect</text></link>
    <link href="https://example.com/second"><text>Second</text></link>
    <time>2021-06-15T12:00:00Z</time>
  </metadata>
  <wpt lat="59.95" lon="10.75">
    <name>Start</name>
  </wpt>
  <trk>
    <name>Morning Run</name>
    <type>running</type>
    <trkseg>
      <trkpt lat="59.90" lon="10.70">
        <ele>10.0</ele>
        <time>2021-06-15T12:00:00Z</time>
        <extensions>
          <gpxtpx:TrackPointExtension>
            <gpxtpx:hr>120</gpxtpx:hr>
            <gpxtpx:cad>80</gpxtpx:cad>
          </gpxtpx:TrackPointExtension>
        </extensions>
      </trkpt>
      <trkpt lat="59.91" lon="10.71">
        <ele>12.0</ele>
        <time>2021-06-15T12:00:30Z</time>
      </trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="59.92" lon="10.72">
        <ele>13.0</ele>
        <time>2021-06-15T12:01:00Z</time>
      </trkpt>
      <trkpt lat="59.93" lon="10.73">
        <ele>11.0</ele>
        <time>2021-06-15T12:02:00Z</time>
      </trkpt>
    </trkseg>
  </trk>
</gpx>
"""


TCX_DOCUMENT = """<?xml version="1.0" encoding="UTF-8"?>
<TrainingCenterDatabase
    xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2"
    xmlns:ns3="http://www.garmin.com/xmlschemas/ActivityExtension/v2">
  <Activities>
    <Activity Sport="Running">
      <Id>2021-06-15T12:00:00Z</Id>
      <Lap StartTime="2021-06-15T12:00:00Z">
        <TotalTimeSeconds>600.0</TotalTimeSeconds>
        <DistanceMeters>2000.0</DistanceMeters>
        <MaximumSpeed>4.5</MaximumSpeed>
        <Calories>150</Calories>
        <AverageHeartRateBpm><Value>140</Value></AverageHeartRateBpm>
        <MaximumHeartRateBpm><Value>160</Value></MaximumHeartRateBpm>
        <Track>
          <Trackpoint>
            <Time>2021-06-15T12:00:00Z</Time>
            <Position>
              <LatitudeDegrees>59.90</LatitudeDegrees>
              <LongitudeDegrees>10.70</LongitudeDegrees>
            </Position>
            <AltitudeMeters>100.0</AltitudeMeters>
            <DistanceMeters>0.0</DistanceMeters>
            <HeartRateBpm><Value>130</Value></HeartRateBpm>
            <Cadence>80</Cadence>
          </Trackpoint>
          <Trackpoint>
            <Time>2021-06-15T12:05:00Z</Time>
            <AltitudeMeters>120.0</AltitudeMeters>
            <DistanceMeters>1000.0</DistanceMeters>
            <HeartRateBpm><Value>150</Value></HeartRateBpm>
            <Cadence>90</Cadence>
            <Extensions>
              <ns3:TPX><ns3:Speed>5.0</ns3:Speed></ns3:TPX>
            </Extensions>
          </Trackpoint>
        </Track>
      </Lap>
      <Lap StartTime="2021-06-15T12:10:00Z">
        <TotalTimeSeconds>400.0</TotalTimeSeconds>
        <DistanceMeters>1000.0</DistanceMeters>
        <MaximumSpeed>4.0</MaximumSpeed>
        <Calories>50</Calories>
        <MaximumHeartRateBpm><Value>170</Value></MaximumHeartRateBpm>
        <Track>
          <Trackpoint>
            <Time>2021-06-15T12:15:00Z</Time>
            <AltitudeMeters>110.0</AltitudeMeters>
            <HeartRateBpm><Value>165</Value></HeartRateBpm>
          </Trackpoint>
        </Track>
      </Lap>
      <Notes>Easy run</Notes>
    </Activity>
  </Activities>
</TrainingCenterDatabase>
"""


@pytest.fixture
def gpx_file(temp_dir):
    """A two-segment GPX track written to disk."""
    path = temp_dir / "morning.gpx"
    path.write_text(GPX_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def tcx_file(temp_dir):
    """A two-lap TCX activity written to disk."""
    path = temp_dir / "easy.tcx"
    path.write_text(TCX_DOCUMENT, encoding="utf-8")
    return path
