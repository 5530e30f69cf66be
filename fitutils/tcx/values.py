"""
File name tokens for TCX files.
"""
from pathlib import Path
from typing import Dict, Union

from ..tokens import build_values
from .activity import TCXFile


def tcx_to_values(filename: Union[str, Path]) -> Dict[str, str]:
    """Token map from the TCX summary. TCX carries no device details."""
    activity = TCXFile.from_file(filename).activity
    return build_values(
        activity=activity.sport,
        when=activity.start_time,
        duration=activity.duration,
    )
