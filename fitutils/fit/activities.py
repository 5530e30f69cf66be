"""
Cross-file FIT session summary.
"""
import logging
from pathlib import Path
from typing import Union

from ..const import FIT_SESSION_HEADER
from ..exporters import model_row, write_csv
from ..processors.interface import ActivityCollection
from .activity import FITActivity

logger = logging.getLogger(__name__)


class FITActivities(ActivityCollection[FITActivity]):
    """Activities from every FIT file in a run"""

    def export_summary(self, filename: Union[str, Path]) -> None:
        """Header plus one session row per activity, in input order"""
        logger.info(f"Exporting FIT summary to {filename}")
        write_csv(filename, FIT_SESSION_HEADER, (model_row(activity.session) for activity in self.activities))
