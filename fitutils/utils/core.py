#!/usr/bin/env python3
"""
fitutils Utilities Module
"""
import sys
import logging
from pathlib import Path
from typing import Optional, Union


TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class _BelowErrorFilter(logging.Filter):
    """Only pass records that are not errors"""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.ERROR


class LoggingConfig:
    """Centralized logging configuration using standard logging"""

    _initialized = False

    @classmethod
    def setup_logging(cls,
                      log_level: Union[str, int] = "INFO",
                      log_file: Optional[str] = None,
                      log_format: Optional[str] = None,
                      enable_console: bool = True,
                      force: bool = False) -> None:
        """
        Setup standard logging configuration

        Errors and above go to stderr, everything else to stdout.

        Args:
            log_level: Logging level name (TRACE, DEBUG, INFO, ...) or number
            log_file: Path to log file (optional)
            log_format: Custom log format
            enable_console: Enable console logging
            force: Replace an earlier configuration
        """
        if cls._initialized and not force:
            return

        if isinstance(log_level, str):
            numeric_level = logging.getLevelName(log_level.upper())
            if not isinstance(numeric_level, int):
                numeric_level = logging.INFO
        else:
            numeric_level = log_level

        if log_format is None:
            log_format = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
        formatter = logging.Formatter(log_format, datefmt='%Y-%m-%d %H:%M:%S')

        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        root.setLevel(numeric_level)

        if enable_console:
            stdout_handler = logging.StreamHandler(sys.stdout)
            stdout_handler.setLevel(numeric_level)
            stdout_handler.addFilter(_BelowErrorFilter())
            stdout_handler.setFormatter(formatter)
            root.addHandler(stdout_handler)

        # Errors are always shown, even when the console is otherwise quiet
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(max(numeric_level, logging.ERROR))
        stderr_handler.setFormatter(formatter)
        root.addHandler(stderr_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

        cls._initialized = True
        logging.getLogger("fitutils").log(TRACE, "Logging initialized - Level: %s", logging.getLevelName(numeric_level))


def verbosity_to_level(debug: int = 0, quiet: bool = False) -> int:
    """Map the -d count and -q flag to a logging level"""
    if quiet:
        return logging.ERROR
    if debug <= 0:
        return logging.INFO
    if debug == 1:
        return logging.DEBUG
    return TRACE


def setup_fitutils_logging(debug: int = 0,
                           quiet: bool = False,
                           default_level: Union[str, int] = "INFO",
                           log_file: Optional[str] = None,
                           log_format: Optional[str] = None) -> None:
    """
    Setup logging for a command-line run

    -d/-q win over ``default_level``, which normally comes from settings.
    """
    level = verbosity_to_level(debug, quiet) if (debug or quiet) else default_level
    LoggingConfig.setup_logging(
        log_level=level,
        log_file=log_file,
        log_format=log_format,
        force=True,
    )


def get_extension(filename: Union[str, Path]) -> str:
    """
    Lower-case extension of a file name without the dot.

    Returns ``unknown`` when the name has no extension.
    """
    suffix = Path(filename).suffix
    if not suffix:
        return "unknown"
    return suffix[1:].lower()


def set_extension(filename: Union[str, Path], extension: str) -> str:
    """
    Replace the last extension of a file name.

    ``set_extension("run.fit", "laps.csv")`` gives ``run.laps.csv``.
    """
    path = Path(filename)
    stem = path.stem if path.suffix else path.name
    return str(path.with_name(f"{stem}.{extension}"))
