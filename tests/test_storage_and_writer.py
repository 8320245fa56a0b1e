"""
Tests for the SQLite rain store and the CSV writer.
"""

import os
from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from sqlalchemy import text

from src.weather_reports.core.errors import OutputError, ParseError, StorageError
from src.weather_reports.models import RainMeasurement
from src.weather_reports.storage import RainStore, parse_timestamp
from src.weather_reports.writer import CsvReportWriter


@pytest.mark.integration
class TestRainStore:
    """Test cases for RainStore."""

    @pytest.fixture
    def store(self, tmp_path):
        with RainStore(str(tmp_path / "rain.sqlite3")) as store:
            store.ensure_schema()
            yield store

    def _execute(self, store, statement):
        with store.engine.begin() as conn:
            conn.execute(text(statement))

    def test_round_trip_ordered(self, store):
        store.insert_measurements([
            RainMeasurement(datetime(2020, 1, 6, 12, 0, tzinfo=timezone.utc), 0.4),
            RainMeasurement(datetime(2020, 1, 5, 12, 0, tzinfo=timezone.utc), None),
        ])

        measurements = store.fetch_measurements()

        assert [m.timestamp.day for m in measurements] == [5, 6]
        assert measurements[0].value is None
        assert measurements[1].value == 0.4
        assert measurements[1].timestamp.tzinfo is not None

    def test_naive_text_timestamps(self, store):
        self._execute(
            store, "INSERT INTO rain (timestamp, value) VALUES ('2020-01-04 23:30:00', 1.5)"
        )

        measurement = store.fetch_measurements()[0]

        assert measurement.timestamp == datetime(2020, 1, 4, 23, 30)
        assert measurement.value == 1.5

    def test_invalid_timestamp_is_parse_error(self, store):
        self._execute(store, "INSERT INTO rain (timestamp, value) VALUES ('yesterday', 1)")

        with pytest.raises(ParseError):
            store.fetch_measurements()

    def test_table_without_id_column_is_readable(self, tmp_path):
        with RainStore(str(tmp_path / "plain.sqlite3")) as store:
            self._execute(store, "CREATE TABLE rain (timestamp TEXT NOT NULL, value REAL)")
            self._execute(
                store, "INSERT INTO rain (timestamp, value) VALUES ('2020-01-04T10:00:00Z', 0.2)"
            )

            measurements = store.fetch_measurements()

        assert len(measurements) == 1
        assert measurements[0].value == 0.2

    def test_missing_table_is_storage_error(self, tmp_path):
        path = tmp_path / "empty.sqlite3"
        path.touch()

        with RainStore(str(path)) as store:
            with pytest.raises(StorageError) as exc_info:
                store.fetch_measurements()

        assert exc_info.value.context["table"] == "rain"

    def test_missing_file_is_not_created_on_read(self, tmp_path):
        path = tmp_path / "nested" / "missing.sqlite3"

        with RainStore(str(path)) as store:
            with pytest.raises(StorageError) as exc_info:
                store.fetch_measurements()

        assert exc_info.value.context["path"] == str(path)
        assert not path.exists()
        assert not path.parent.exists()


class TestParseTimestamp:
    """Test stored timestamp parsing."""

    def test_zulu_suffix(self):
        assert parse_timestamp("2020-01-04T23:30:00Z") == datetime(
            2020, 1, 4, 23, 30, tzinfo=timezone.utc
        )

    def test_offset(self):
        assert parse_timestamp("2020-01-04T23:30:00+01:00").utcoffset().total_seconds() == 3600


class TestCsvReportWriter:
    """Test cases for CsvReportWriter."""

    @pytest.fixture
    def writer(self):
        return CsvReportWriter()

    def test_creates_directory_and_writes(self, writer, tmp_path):
        path = tmp_path / "reports" / "out.csv"

        writer.write_rows(str(path), [["a", "b"], ["1", "2"]])

        assert path.read_text(encoding="utf-8").splitlines() == ["a,b", "1,2"]
        assert os.listdir(path.parent) == ["out.csv"]

    def test_failed_write_leaves_no_file(self, writer, tmp_path):
        path = tmp_path / "out.csv"

        def rows():
            yield ["a"]
            raise RuntimeError("row source failed")

        with pytest.raises(RuntimeError):
            writer.write_rows(str(path), rows())

        assert os.listdir(tmp_path) == []

    def test_os_error_becomes_output_error(self, writer, tmp_path):
        path = tmp_path / "out.csv"

        with patch("os.replace", side_effect=PermissionError("read-only")):
            with pytest.raises(OutputError) as exc_info:
                writer.write_rows(str(path), [["a"]])

        assert exc_info.value.context["path"] == str(path)
        assert os.listdir(tmp_path) == []

    def test_existing_report_kept_on_failure(self, writer, tmp_path):
        path = tmp_path / "out.csv"
        path.write_text("old\n", encoding="utf-8")

        with patch("os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OutputError):
                writer.write_rows(str(path), [["new"]])

        assert path.read_text(encoding="utf-8") == "old\n"
