#!/usr/bin/env python3
"""
Rename and move activity files using metadata read from them
"""
import logging
import shutil
from pathlib import Path
from typing import Dict, Union

from .exceptions import RenameError
from .fit.values import fit_to_values
from .gpx.values import gpx_to_values
from .processors.interface import DataSourceType
from .tcx.values import tcx_to_values
from .tokens import substitute
from .utils import get_extension

logger = logging.getLogger(__name__)


def values_for(filename: Union[str, Path]) -> Dict[str, str]:
    """
    Token map for a file, chosen by its extension.

    Raises:
        UnsupportedFormatError: extension is not fit, gpx or tcx
        DecodeError: the file cannot be decoded
    """
    readers = {
        DataSourceType.FIT_FILE: fit_to_values,
        DataSourceType.GPX_FILE: gpx_to_values,
        DataSourceType.TCX_FILE: tcx_to_values,
    }
    return readers[DataSourceType.from_filename(filename)](filename)


def _with_unique_suffix(name: str, unique_val: int) -> str:
    return f"{name} ({unique_val})"


def rename_file(filename: Union[str, Path],
                pattern: str,
                values: Dict[str, str],
                unique_val: int = 1,
                dry_run: bool = False) -> str:
    """
    Rename a file in place from a token pattern.

    The extension of the source file is kept (lower-cased). When the new name
    is taken, `` (unique_val)`` is appended before the extension.

    Returns:
        The new path, as a string
    """
    filename = str(filename)
    logger.debug(f"rename_file() -- pattern: {pattern}, values: {values}")

    new_name = substitute(pattern, values).replace("/", "-").strip()
    extension = get_extension(filename)
    parent = Path(filename).parent

    new_path = parent / f"{new_name}.{extension}"
    if new_path.exists():
        logger.warning(f"{new_path} already exists. Appending unique identifier.")
        new_path = parent / f"{_with_unique_suffix(new_name, unique_val)}.{extension}"

    if dry_run:
        logger.info(f"dr: {filename} --> {new_path}")
    else:
        try:
            Path(filename).rename(new_path)
        except OSError as e:
            raise RenameError(filename, str(new_path), e) from e
        logger.info(f"{filename} --> {new_path}")

    return str(new_path)


def move_file(filename: Union[str, Path],
              target_pattern: str,
              values: Dict[str, str],
              unique_val: int = 1,
              dry_run: bool = False) -> str:
    """
    Move a file into a directory built from a token pattern.

    The directory is created when missing. When a file of the same name is
    already there, `` (unique_val)`` is appended to the moved file name.

    Returns:
        The destination path, as a string
    """
    filename = str(filename)
    target = Path(substitute(target_pattern, values).strip())
    logger.debug(f"move_file() -- target: {target}")

    if not target.exists():
        if dry_run:
            logger.info(f"dr: mkdir -p {target}")
        else:
            try:
                target.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise RenameError(filename, str(target), e) from e
            logger.debug(f"mkdir -p {target}")
    elif not target.is_dir():
        raise RenameError(filename, str(target), "target path is not a directory")

    target_file = target / Path(filename).name
    if target_file.exists():
        logger.warning(f"{target_file} already exists. Appending unique identifier.")
        target_file = target / _with_unique_suffix(Path(filename).name, unique_val)

    if dry_run:
        logger.info(f"dr: mv {filename} {target_file}")
    else:
        try:
            shutil.move(filename, str(target_file))
        except OSError as e:
            raise RenameError(filename, str(target_file), e) from e
        logger.info(f"mv {filename} {target_file}")

    return str(target_file)
