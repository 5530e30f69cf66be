#!/usr/bin/env python3
"""
Processors Abstract Interface - Defines the standard shape of a converted activity file
"""
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Generic, Iterator, List, TypeVar, Union

from ..exceptions import UnsupportedFormatError
from ..utils import get_extension


class DataSourceType(Enum):
    """Data source type enumeration"""
    FIT_FILE = "fit"
    GPX_FILE = "gpx"
    TCX_FILE = "tcx"

    @classmethod
    def from_filename(cls, filename: Union[str, Path]) -> "DataSourceType":
        """Pick the source type from a file extension (case-insensitive)"""
        extension = get_extension(filename)
        for source_type in cls:
            if source_type.value == extension:
                return source_type
        raise UnsupportedFormatError(str(filename))


class ActivityFile(ABC):
    """A decoded activity file that can write its own detail files"""

    source_type: DataSourceType

    @classmethod
    @abstractmethod
    def from_file(cls, filename: Union[str, Path]) -> "ActivityFile":
        """Decode a file from disk"""
        pass

    @abstractmethod
    def export(self) -> None:
        """Write the detail files next to the source file"""
        pass

    @abstractmethod
    def print(self, detailed: bool = False) -> None:
        """Print a human-readable summary"""
        pass


A = TypeVar("A", bound=ActivityFile)


class ActivityCollection(ABC, Generic[A]):
    """Ordered activities accumulated over a batch of files"""

    def __init__(self, activities: List[A] = None):
        self.activities: List[A] = list(activities or [])

    def append(self, activity: A) -> None:
        self.activities.append(activity)

    def __len__(self) -> int:
        return len(self.activities)

    def __iter__(self) -> Iterator[A]:
        return iter(self.activities)

    @abstractmethod
    def export_summary(self, filename: Union[str, Path]) -> None:
        """Write one summary row per activity"""
        pass
