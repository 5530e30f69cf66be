#!/usr/bin/env python3
"""
Constants shared by the FIT, GPX and TCX converters
"""

# FIT stores latitude/longitude as signed 32-bit semicircles
LATLON_MULTIPLIER = 180.0 / (2 << 30)

UNKNOWN = "Unknown"
NO_GPS_DATA = "no GPS data"

# Default cross-file summary names
DEFAULT_FIT_SUMMARY_FILE = "fit-sessions.csv"
DEFAULT_GPX_SUMMARY_FILE = "gpx-sessions.csv"
DEFAULT_TCX_SUMMARY_FILE = "tcx-activities.csv"

# Detail file extensions, replacing the source extension
FIT_SESSION_EXTENSION = "session.json"
FIT_LAPS_EXTENSION = "laps.csv"
FIT_RECORDS_EXTENSION = "records.csv"
GPX_SESSION_EXTENSION = "session.json"
GPX_TRACKS_EXTENSION = "tracks.csv"
GPX_WAYPOINTS_EXTENSION = "waypoints.csv"
TCX_ACTIVITY_EXTENSION = "activity.json"
TCX_TRACKPOINTS_EXTENSION = "trackpoints.csv"

HR_ZONE_NAMES = ["Warmup", "Fat Burn", "Aerobic", "Anaerobic", "Speed/Power"]

FIT_LAP_HEADER = [
    "filename",
    "lap_num",
    "cadence_avg_bpm",
    "cadence_max_bpm",
    "heartrate_min_bpm",
    "heartrate_avg_bpm",
    "heartrate_max_bpm",
    "speed_avg_ms",
    "speed_max_ms",
    "power_avg_w",
    "power_max_w",
    "lat_start",
    "lon_start",
    "lat_end",
    "lon_end",
    "stance_time_avg_sec",
    "vertical_oscillation_avg",
    "ascent_m",
    "descent_m",
    "calories",
    "distance_m",
    "duration_secs",
    "duration_active_sec",
    "duration_moving_sec",
    "start_time",
    "finish_time",
    "heart_rate_zone0_sec",
    "heart_rate_zone1_sec",
    "heart_rate_zone2_sec",
    "heart_rate_zone3_sec",
    "heart_rate_zone4_sec",
]

FIT_RECORD_HEADER = [
    "timestamp",
    "duration_sec",
    "distance_m",
    "altitude_m",
    "stance_time_sec",
    "vertical_oscillation",
    "cadence_bpm",
    "speed_ms",
    "power_w",
    "heartrate_bpm",
    "calories",
    "lat_deg",
    "lon_deg",
]

FIT_SESSION_HEADER = [
    "filename",
    "manufacturer",
    "product",
    "serial_number",
    "time_created",
    "activity_type",
    "activity_detailed",
    "num_sessions",
    "num_laps",
    "num_records",
    "cadence_avg_bpm",
    "cadence_max_bpm",
    "heartrate_avg_bpm",
    "heartrate_max_bpm",
    "heartrate_min_bpm",
    "speed_avg_ms",
    "speed_max_ms",
    "power_avg_w",
    "power_max_w",
    "power_threshold_w",
    "nec_lat_deg",
    "nec_lon_deg",
    "swc_lat_deg",
    "swc_lon_deg",
    "stance_time_avg",
    "vertical_oscillation_avg",
    "ascent_m",
    "descent_m",
    "calories",
    "distance_m",
    "duration_sec",
    "duration_active_sec",
    "duration_moving_sec",
    "start_time",
    "finish_time",
    "time_in_hr_zone_0_sec",
    "time_in_hr_zone_1_sec",
    "time_in_hr_zone_2_sec",
    "time_in_hr_zone_3_sec",
    "time_in_hr_zone_4_sec",
]

# TCX namespaces
TCX_NAMESPACES = {
    "tcx": "http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2",
    "ax": "http://www.garmin.com/xmlschemas/ActivityExtension/v2",
}
