"""
FIT converter - sessions, laps and records
"""

from .hrzones import FITHrZones
from .session import FITSession
from .lap import FITLap
from .record import FITRecord
from .activity import FITActivity, FITActivityBuilder
from .activities import FITActivities
from .values import fit_to_values

__all__ = [
    'FITHrZones', 'FITSession', 'FITLap', 'FITRecord',
    'FITActivity', 'FITActivityBuilder', 'FITActivities',
    'fit_to_values',
]
