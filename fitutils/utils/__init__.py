"""
fitutils Utils Package
"""
from .core import (
    TRACE,
    LoggingConfig,
    verbosity_to_level,
    setup_fitutils_logging,
    get_extension,
    set_extension,
)

__all__ = [
    'TRACE',
    'LoggingConfig',
    'verbosity_to_level',
    'setup_fitutils_logging',
    'get_extension',
    'set_extension',
]
