"""
Command-line interface for fitutils.

One console script per tool: fit2csv, gpx2csv, tcx2csv, fitrename and fitshow.
Each file is handled on its own; a file that fails is logged and the run
carries on with the next one, exiting 1 at the end.
"""

import functools
import logging
import sys
from typing import Callable, Optional, Sequence, Tuple, Type

import click

from fitutils.config import get_settings
from fitutils.exceptions import FitUtilsError
from fitutils.fit.activities import FITActivities
from fitutils.fit.activity import FITActivity
from fitutils.gpx.activity import GPXActivities, GPXActivity
from fitutils.processors.interface import ActivityCollection, ActivityFile, DataSourceType
from fitutils.rename import move_file, rename_file, values_for
from fitutils.tcx.activity import TCXActivitiesList, TCXFile
from fitutils.utils import setup_fitutils_logging

logger = logging.getLogger("fitutils.cli")

READERS = {
    DataSourceType.FIT_FILE: FITActivity,
    DataSourceType.GPX_FILE: GPXActivity,
    DataSourceType.TCX_FILE: TCXFile,
}


def common_options(func: Callable) -> Callable:
    """FILES plus the -d/-q verbosity options shared by every tool"""
    @click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
    @click.option("--debug", "-d", count=True, help="Increase log verbosity (-d debug, -dd trace)")
    @click.option("--quiet", "-q", is_flag=True, help="Only show errors")
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _setup_logging(kwargs["debug"], kwargs["quiet"])
        return func(*args, **kwargs)
    return wrapper


def summary_options(func: Callable) -> Callable:
    """Options shared by the CSV converters"""
    func = click.option("--summary-file", "-f", default=None, help="Summary CSV file name")(func)
    func = click.option("--detail-off", "-o", is_flag=True, help="Skip the per-file detail files (requires -f)")(func)
    func = click.option("--print-summary", "-s", is_flag=True, help="Print a summary of each file")(func)
    return func


def _setup_logging(debug: int, quiet: bool) -> None:
    settings = get_settings()
    setup_fitutils_logging(
        debug=debug,
        quiet=quiet,
        default_level=settings.log_level,
        log_file=settings.log_file,
        log_format=settings.log_format,
    )


def _convert(reader: Type[ActivityFile],
             collection: ActivityCollection,
             files: Sequence[str],
             print_summary: bool,
             detail_off: bool,
             summary_file: Optional[str],
             default_summary_file: str) -> int:
    """
    Decode each file, write its detail files, then write the summary.

    Returns:
        Number of files that failed
    """
    if detail_off and not summary_file:
        click.echo("Error: --detail-off requires --summary-file", err=True)
        sys.exit(1)

    failed = 0
    for filename in files:
        logger.info(f"Processing: {filename}")
        try:
            activity = reader.from_file(filename)
            collection.append(activity)
            if print_summary:
                activity.print(detailed=False)
            if not detail_off:
                activity.export()
        except FitUtilsError as e:
            logger.error(f"{filename}: {e}")
            failed += 1
        except Exception as e:
            logger.error(f"{filename}: unexpected error: {e!r}")
            logger.debug("Traceback:", exc_info=True)
            failed += 1

    summary_path = summary_file or default_summary_file
    try:
        collection.export_summary(summary_path)
    except FitUtilsError as e:
        logger.error(f"Summary export failed: {e}")
        failed += 1

    logger.info(f"Processed {len(files)} files, {failed} failed")
    return failed


@click.command()
@common_options
@summary_options
def fit2csv(files: Tuple[str, ...], debug: int, quiet: bool,
            print_summary: bool, detail_off: bool, summary_file: Optional[str]) -> None:
    """Export FIT files to session JSON, laps CSV, records CSV and a sessions summary."""
    failed = _convert(FITActivity, FITActivities(), files, print_summary, detail_off,
                      summary_file, get_settings().fit_summary_file)
    sys.exit(1 if failed else 0)


@click.command()
@common_options
@summary_options
def gpx2csv(files: Tuple[str, ...], debug: int, quiet: bool,
            print_summary: bool, detail_off: bool, summary_file: Optional[str]) -> None:
    """Export GPX files to session JSON, tracks CSV, waypoints CSV and a summary."""
    failed = _convert(GPXActivity, GPXActivities(), files, print_summary, detail_off,
                      summary_file, get_settings().gpx_summary_file)
    sys.exit(1 if failed else 0)


@click.command()
@common_options
@summary_options
def tcx2csv(files: Tuple[str, ...], debug: int, quiet: bool,
            print_summary: bool, detail_off: bool, summary_file: Optional[str]) -> None:
    """Export TCX files to activity JSON, trackpoints CSV and a summary."""
    failed = _convert(TCXFile, TCXActivitiesList(), files, print_summary, detail_off,
                      summary_file, get_settings().tcx_summary_file)
    sys.exit(1 if failed else 0)


@click.command()
@common_options
@click.option("--pattern", "-p", default=None, help="File name pattern, e.g. '%year-%month-%day %activity'")
@click.option("--move", "-m", "move_pattern", default=None, help="Directory pattern to move files into")
@click.option("--dry-run", "-r", is_flag=True, help="Show what would happen without touching any file")
@click.option("--print-summary", "-s", is_flag=True, help="Print how many files were renamed")
def fitrename(files: Tuple[str, ...], debug: int, quiet: bool, pattern: Optional[str],
              move_pattern: Optional[str], dry_run: bool, print_summary: bool) -> None:
    """Rename (and optionally move) FIT, GPX and TCX files using their metadata."""
    if not pattern and not move_pattern:
        click.echo("Error: one of --pattern or --move is required", err=True)
        sys.exit(1)

    renamed = 0
    skipped = 0
    for unique_val, filename in enumerate(files, start=1):
        try:
            values = values_for(filename)
            current = filename
            if pattern:
                current = rename_file(current, pattern, values, unique_val, dry_run)
            if move_pattern:
                move_file(current, move_pattern, values, unique_val, dry_run)
            renamed += 1
        except FitUtilsError as e:
            logger.error(f"{filename}: {e}")
            skipped += 1
        except Exception as e:
            logger.error(f"{filename}: unexpected error: {e!r}")
            logger.debug("Traceback:", exc_info=True)
            skipped += 1

    if print_summary:
        click.echo(f"Files processed: {len(files)}")
        click.echo(f"Files renamed:   {renamed}")
        click.echo(f"Files skipped:   {skipped}")

    sys.exit(1 if skipped else 0)


@click.command()
@common_options
@click.option("--print-detail", "-l", is_flag=True, help="Print detailed information for each file")
@click.option("--print-summary", "-s", is_flag=True, help="Print how many files were shown")
def fitshow(files: Tuple[str, ...], debug: int, quiet: bool, print_detail: bool, print_summary: bool) -> None:
    """Show the contents of FIT, GPX and TCX files."""
    shown = 0
    failed = 0
    for filename in files:
        try:
            reader = READERS[DataSourceType.from_filename(filename)]
            reader.from_file(filename).print(detailed=print_detail)
            shown += 1
        except FitUtilsError as e:
            logger.error(f"{filename}: {e}")
            failed += 1
        except Exception as e:
            logger.error(f"{filename}: unexpected error: {e!r}")
            logger.debug("Traceback:", exc_info=True)
            failed += 1

    if print_summary:
        click.echo(f"\nFiles shown: {shown}, failed: {failed}")

    sys.exit(1 if failed else 0)
