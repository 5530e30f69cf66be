"""
TCX converter - activity summaries and trackpoints
"""

from .activity import TCXActivity, TCXTrackpoint, TCXTrackpointList, TCXFile, TCXActivitiesList
from .values import tcx_to_values

__all__ = [
    'TCXActivity', 'TCXTrackpoint', 'TCXTrackpointList', 'TCXFile', 'TCXActivitiesList',
    'tcx_to_values',
]
