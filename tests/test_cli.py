"""
Tests for the command-line tools.
"""

import csv
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from fitutils.cli import fit2csv, fitrename, fitshow, gpx2csv, tcx2csv
from fitutils.config import get_settings
from fitutils.const import FIT_SESSION_HEADER
from fitutils.tcx import TCXFile


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _read_csv(path):
    with open(path, newline="", encoding="utf-8") as handle:
        return list(csv.reader(handle))


class TestFit2Csv:
    """Test the fit2csv command."""

    def test_converts_and_writes_summary(self, runner, temp_dir, fit_messages):
        fit_path = temp_dir / "run.fit"
        fit_path.write_bytes(b"")
        summary = temp_dir / "summary.csv"

        with patch("fitutils.fit.activity.read_fit_messages", return_value=fit_messages):
            result = runner.invoke(fit2csv, [str(fit_path), "-f", str(summary), "-s"])

        assert result.exit_code == 0, result.output
        assert "Manufacturer:" in result.output
        assert (temp_dir / "run.session.json").exists()
        assert (temp_dir / "run.laps.csv").exists()
        assert (temp_dir / "run.records.csv").exists()
        rows = _read_csv(summary)
        assert rows[0] == FIT_SESSION_HEADER
        assert len(rows) == 2

    def test_detail_off_skips_detail_files(self, runner, temp_dir, fit_messages):
        fit_path = temp_dir / "run.fit"
        fit_path.write_bytes(b"")
        summary = temp_dir / "summary.csv"

        with patch("fitutils.fit.activity.read_fit_messages", return_value=fit_messages):
            result = runner.invoke(fit2csv, [str(fit_path), "-o", "-f", str(summary)])

        assert result.exit_code == 0, result.output
        assert summary.exists()
        assert not (temp_dir / "run.session.json").exists()

    def test_detail_off_requires_summary_file(self, runner, temp_dir):
        result = runner.invoke(fit2csv, [str(temp_dir / "run.fit"), "-o"])
        assert result.exit_code == 1
        assert "--summary-file" in result.output

    def test_bad_file_still_writes_summary(self, runner, temp_dir):
        summary = temp_dir / "summary.csv"
        result = runner.invoke(fit2csv, [str(temp_dir / "missing.fit"), "-f", str(summary)])

        assert result.exit_code == 1
        assert _read_csv(summary) == [FIT_SESSION_HEADER]

    def test_default_summary_file_from_settings(self, runner, temp_dir, fit_messages):
        fit_path = temp_dir / "run.fit"
        fit_path.write_bytes(b"")
        summary = temp_dir / "from-env.csv"

        with patch.dict("os.environ", {"FITUTILS_FIT_SUMMARY_FILE": str(summary)}):
            get_settings.cache_clear()
            with patch("fitutils.fit.activity.read_fit_messages", return_value=fit_messages):
                result = runner.invoke(fit2csv, [str(fit_path)])

        assert result.exit_code == 0, result.output
        assert summary.exists()

    def test_requires_files(self, runner):
        result = runner.invoke(fit2csv, [])
        assert result.exit_code == 2


class TestGpx2CsvAndTcx2Csv:
    """Test the GPX and TCX converters."""

    def test_gpx2csv(self, runner, gpx_file, temp_dir):
        summary = temp_dir / "gpx.csv"
        result = runner.invoke(gpx2csv, [str(gpx_file), "-f", str(summary)])

        assert result.exit_code == 0, result.output
        assert (temp_dir / "morning.session.json").exists()
        assert (temp_dir / "morning.tracks.csv").exists()
        assert (temp_dir / "morning.waypoints.csv").exists()
        assert len(_read_csv(summary)) == 2

    def test_tcx2csv(self, runner, tcx_file, temp_dir):
        summary = temp_dir / "tcx.csv"
        result = runner.invoke(tcx2csv, [str(tcx_file), "-f", str(summary), "-q"])

        assert result.exit_code == 0, result.output
        assert (temp_dir / "easy.activity.json").exists()
        assert (temp_dir / "easy.trackpoints.csv").exists()
        assert len(_read_csv(summary)) == 2

    def test_tcx2csv_mixed_good_and_bad(self, runner, tcx_file, temp_dir):
        summary = temp_dir / "tcx.csv"
        result = runner.invoke(tcx2csv, [str(temp_dir / "missing.tcx"), str(tcx_file), "-f", str(summary)])

        assert result.exit_code == 1
        assert len(_read_csv(summary)) == 2

    def test_tcx2csv_non_finite_numbers(self, runner, tcx_file, temp_dir):
        bad = temp_dir / "bad.tcx"
        bad.write_text(
            tcx_file.read_text(encoding="utf-8").replace("<Cadence>80</Cadence>", "<Cadence>NaN</Cadence>"),
            encoding="utf-8",
        )
        summary = temp_dir / "tcx.csv"
        result = runner.invoke(tcx2csv, [str(bad), str(tcx_file), "-f", str(summary)])

        assert result.exit_code == 0, result.output
        assert len(_read_csv(summary)) == 3
        assert (temp_dir / "bad.trackpoints.csv").exists()
        assert (temp_dir / "easy.trackpoints.csv").exists()

    def test_gpx2csv_non_finite_extension(self, runner, gpx_file, temp_dir):
        bad = temp_dir / "bad.gpx"
        bad.write_text(
            gpx_file.read_text(encoding="utf-8").replace("<gpxtpx:hr>120</gpxtpx:hr>", "<gpxtpx:hr>inf</gpxtpx:hr>"),
            encoding="utf-8",
        )
        summary = temp_dir / "gpx.csv"
        result = runner.invoke(gpx2csv, [str(bad), str(gpx_file), "-f", str(summary)])

        assert result.exit_code == 0, result.output
        assert len(_read_csv(summary)) == 3
        assert (temp_dir / "bad.waypoints.csv").exists()
        assert (temp_dir / "morning.waypoints.csv").exists()

    def test_unexpected_error_does_not_stop_batch(self, runner, tcx_file, temp_dir):
        decoded = TCXFile.from_file(tcx_file)
        summary = temp_dir / "tcx.csv"
        with patch.object(TCXFile, "from_file", side_effect=[RuntimeError("boom"), decoded]):
            result = runner.invoke(tcx2csv, ["first.tcx", str(tcx_file), "-f", str(summary)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, RuntimeError)
        assert len(_read_csv(summary)) == 2
        assert (temp_dir / "easy.trackpoints.csv").exists()


class TestFitRename:
    """Test the fitrename command."""

    def test_requires_pattern_or_move(self, runner, tcx_file):
        result = runner.invoke(fitrename, [str(tcx_file)])
        assert result.exit_code == 1

    def test_rename(self, runner, tcx_file, temp_dir):
        result = runner.invoke(fitrename, [str(tcx_file), "-p", "%activity %year", "-s"])

        assert result.exit_code == 0, result.output
        assert (temp_dir / "Running 2021.tcx").exists()
        assert not tcx_file.exists()
        assert "Files renamed:   1" in result.output

    def test_dry_run(self, runner, gpx_file):
        result = runner.invoke(fitrename, [str(gpx_file), "-p", "%activity", "-r"])

        assert result.exit_code == 0, result.output
        assert gpx_file.exists()

    def test_rename_then_move(self, runner, tcx_file, temp_dir):
        target = str(temp_dir / "%year")
        result = runner.invoke(fitrename, [str(tcx_file), "-p", "%activity", "-m", target])

        assert result.exit_code == 0, result.output
        assert (temp_dir / "2021" / "Running.tcx").exists()

    def test_unsupported_file_is_skipped(self, runner, temp_dir):
        notes = temp_dir / "notes.txt"
        notes.write_text("x")
        result = runner.invoke(fitrename, [str(notes), "-p", "%activity", "-s"])

        assert result.exit_code == 1
        assert "Files skipped:   1" in result.output
        assert notes.exists()

    def test_unexpected_error_is_skipped(self, runner, tcx_file):
        with patch("fitutils.cli.values_for", side_effect=RuntimeError("boom")):
            result = runner.invoke(fitrename, [str(tcx_file), "-p", "%activity", "-s"])

        assert result.exit_code == 1
        assert "Files skipped:   1" in result.output
        assert tcx_file.exists()


class TestFitShow:
    """Test the fitshow command."""

    def test_show_detail(self, runner, gpx_file, tcx_file):
        result = runner.invoke(fitshow, [str(gpx_file), str(tcx_file), "-l", "-s"])

        assert result.exit_code == 0, result.output
        assert "Morning Run" in result.output
        assert "Trackpoints:" in result.output
        assert "Files shown: 2, failed: 0" in result.output

    def test_show_unsupported(self, runner, temp_dir):
        result = runner.invoke(fitshow, [str(temp_dir / "notes.txt")])
        assert result.exit_code == 1

    def test_unexpected_error_does_not_stop_batch(self, runner, gpx_file, tcx_file):
        with patch.object(TCXFile, "from_file", side_effect=RuntimeError("boom")):
            result = runner.invoke(fitshow, [str(tcx_file), str(gpx_file), "-s"])

        assert result.exit_code == 1
        assert "Morning Run" in result.output
        assert "Files shown: 1, failed: 1" in result.output
