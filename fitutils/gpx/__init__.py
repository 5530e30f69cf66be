"""
GPX converter - metadata, tracks, routes and waypoints
"""

from .waypoint import GPXWaypoint
from .track import GPXTrack, GPXRoute
from .metadata import GPXMetadata
from .activity import GPXActivity, GPXActivities
from .values import gpx_to_values

__all__ = [
    'GPXWaypoint', 'GPXTrack', 'GPXRoute', 'GPXMetadata',
    'GPXActivity', 'GPXActivities',
    'gpx_to_values',
]
