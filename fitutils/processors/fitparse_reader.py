#!/usr/bin/env python3
"""
FIT message reader using fitparse - flattens each data message into a field map
"""
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple, Union

from fitparse import FitFile
from fitparse.utils import FitParseError

from ..exceptions import DecodeError

logger = logging.getLogger(__name__)

FIT_MESSAGE_KINDS = ('file_id', 'session', 'lap', 'record')

FieldMap = Dict[str, Any]


def field_value(field) -> Any:
    """Array fields keep their raw integers, everything else uses the scaled value"""
    if isinstance(field.value, (list, tuple)):
        return field.raw_value
    return field.value


def fields_to_map(fields) -> FieldMap:
    """
    Key each field by its own name and, for subfields, by its parent name too.

    The first field seen under a name wins.
    """
    field_map: FieldMap = {}
    for field in fields:
        value = field_value(field)
        if value is None:
            continue
        field_map.setdefault(field.name, value)
        parent = getattr(field, 'parent_field', None)
        if parent is not None:
            field_map.setdefault(parent.name, value)
    return field_map


def read_fit_messages(fit_file_path: Union[str, Path]) -> List[Tuple[str, FieldMap]]:
    """
    Decode a FIT file into (message kind, field map) pairs in file order.

    Only file_id, session, lap and record messages are returned.
    """
    try:
        fitfile = FitFile(str(fit_file_path))
        messages = list(_iter_messages(fitfile))
    except (FitParseError, OSError) as e:
        logger.debug(f"Failed to parse FIT file {fit_file_path}: {e}")
        raise DecodeError(str(fit_file_path), e) from e

    logger.debug(f"Read {len(messages)} messages from {fit_file_path}")
    return messages


def _iter_messages(fitfile: FitFile) -> Iterator[Tuple[str, FieldMap]]:
    for message in fitfile.get_messages():
        if message.name not in FIT_MESSAGE_KINDS:
            continue
        yield message.name, fields_to_map(message.fields)
