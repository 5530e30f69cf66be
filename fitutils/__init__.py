#!/usr/bin/env python3
"""
fitutils - Convert FIT, GPX and TCX activity files to CSV/JSON and rename them from their metadata
"""

from .duration import Duration
from .exceptions import (
    FitUtilsError, DecodeError, ExportError, RenameError,
    DurationError, UnsupportedFormatError
)

from .fit import FITActivity, FITActivities
from .gpx import GPXActivity, GPXActivities
from .tcx import TCXActivity, TCXFile, TCXActivitiesList

__version__ = "0.4.7"

__all__ = [
    'Duration',

    'FitUtilsError', 'DecodeError', 'ExportError', 'RenameError',
    'DurationError', 'UnsupportedFormatError',

    'FITActivity', 'FITActivities',
    'GPXActivity', 'GPXActivities',
    'TCXActivity', 'TCXFile', 'TCXActivitiesList',
]
