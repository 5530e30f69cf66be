#!/usr/bin/env python3
"""
CSV and JSON writers shared by all converters
"""
import csv
import json
import logging
import math
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Set, Union

from pydantic import BaseModel

from .exceptions import ExportError

logger = logging.getLogger(__name__)


def scrub(value: Any) -> Any:
    """Replace NaN and infinities with None, recursively"""
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    if isinstance(value, dict):
        return {key: scrub(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [scrub(item) for item in value]
    return value


def model_row(model: BaseModel, exclude: Optional[Set[str]] = None) -> List[Any]:
    """
    Flatten a model into a CSV row in field order.

    Nested models (heart rate zones) are spread into consecutive cells and
    missing values become empty cells.
    """
    row: List[Any] = []
    dumped = scrub(model.model_dump(mode="json", exclude=exclude))
    for value in dumped.values():
        if isinstance(value, dict):
            row.extend("" if item is None else item for item in value.values())
        elif isinstance(value, list):
            continue
        else:
            row.append("" if value is None else value)
    return row


def model_header(model_cls: type, exclude: Optional[Set[str]] = None) -> List[str]:
    """Column names for a flat model, in field order"""
    exclude = exclude or set()
    return [name for name in model_cls.model_fields if name not in exclude]


def write_csv(path: Union[str, Path], header: Sequence[str], rows: Iterable[Sequence[Any]]) -> int:
    """
    Write a header line followed by one line per row.

    Returns:
        Number of data rows written
    """
    count = 0
    try:
        with open(path, "w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerow(header)
            for row in rows:
                if len(row) != len(header):
                    raise ExportError(str(path), f"row {count + 1} has {len(row)} cells, expected {len(header)}")
                writer.writerow(row)
                count += 1
    except OSError as e:
        raise ExportError(str(path), e) from e

    logger.debug(f"Wrote {count} rows to {path}")
    return count


def write_json(path: Union[str, Path], data: Union[BaseModel, Any]) -> None:
    """Write a model (or plain data) as pretty-printed JSON"""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    try:
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(scrub(data), handle, indent=2)
            handle.write("\n")
    except (OSError, TypeError, ValueError) as e:
        raise ExportError(str(path), e) from e

    logger.debug(f"Wrote JSON to {path}")
