#!/usr/bin/env python3
"""
Processors module - decoders and field coercion shared by the FIT, GPX and TCX converters
"""

from .interface import DataSourceType, ActivityFile, ActivityCollection
from .fitparse_reader import read_fit_messages
from .tcx_reader import read_tcx

__all__ = [
    'DataSourceType', 'ActivityFile', 'ActivityCollection',
    'read_fit_messages',
    'read_tcx',
]
