"""
File name tokens for FIT files.
"""
from pathlib import Path
from typing import Dict, Union

from ..tokens import build_values
from .activity import FITActivity


def fit_to_values(filename: Union[str, Path]) -> Dict[str, str]:
    """Token map from the FIT file header and session"""
    session = FITActivity.from_file(filename).session
    return build_values(
        manufacturer=session.manufacturer,
        product=session.product,
        serial_number=session.serial_number,
        activity=session.activity_type,
        activity_detailed=session.activity_detailed,
        when=session.time_created or session.start_time,
        duration=session.duration,
    )
