"""
File name tokens for GPX files.
"""
from pathlib import Path
from typing import Dict, Union

from ..tokens import build_values
from .activity import GPXActivity

CREATED_BY_PREFIX = "GPX File Created by "


def gpx_to_values(filename: Union[str, Path]) -> Dict[str, str]:
    """
    Token map from the GPX metadata.

    The creator names both manufacturer and product; the serial number is
    the description with its "GPX File Created by" prefix removed.
    """
    activity = GPXActivity.from_file(filename)
    metadata = activity.metadata
    serial_number = None
    if metadata.description:
        serial_number = metadata.description.replace(CREATED_BY_PREFIX, "")

    when = metadata.time
    if when is None:
        when = next((track.start_time for track in activity.tracks if track.start_time), None)

    return build_values(
        manufacturer=metadata.creator,
        product=metadata.creator,
        serial_number=serial_number,
        activity=metadata.activity,
        when=when,
        duration=metadata.duration,
    )
