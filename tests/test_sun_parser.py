"""
Tests for the sunrise/sunset page parser.
"""

import pytest

from src.weather_reports.core.errors import ParseError
from src.weather_reports.parsing import SunPageParser, parse_int


def page(*rows):
    """Wrap table rows into a minimal page."""
    return "<html><body><table>" + "".join(rows) + "</table></body></html>"


def data_row(date="06 01 2020", sunrise_end="08:44", sunset_end="16:54",
             duration="41", sunrise_start="08:03", sunset_start="17:35"):
    cells = [date, sunrise_end, sunset_end, duration, sunrise_start, sunset_start]
    return "<tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>"


class TestSunPageParser:
    """Test cases for SunPageParser."""

    @pytest.fixture
    def parser(self):
        return SunPageParser(timezone="Europe/Brussels")

    def test_parse_fixture_page(self, parser, sun_page_html):
        rows = parser.parse(sun_page_html)

        assert len(rows) == 3
        first = rows[0]
        assert first.date.isoformat() == "2020-01-01T00:00:00+01:00"
        assert first.sunrise_start.isoformat() == "2020-01-01T08:03:00+01:00"
        assert first.sunrise_end.isoformat() == "2020-01-01T08:45:00+01:00"
        assert first.sunset_start.isoformat() == "2020-01-01T17:29:00+01:00"
        assert first.sunset_end.isoformat() == "2020-01-01T16:47:00+01:00"
        assert first.duration_minutes == 42

    def test_summer_rows_use_summer_offset(self, parser, sun_page_html):
        july = parser.parse(sun_page_html)[2]

        assert july.sunrise_end.isoformat() == "2020-07-01T05:32:00+02:00"
        assert july.duration_minutes == 48

    def test_seven_column_row_is_skipped(self, parser):
        seven = "<tr>" + "<td>x</td>" * 7 + "</tr>"

        rows = parser.parse(page(seven, data_row()))

        assert len(rows) == 1
        assert rows[0].date.day == 6

    def test_page_without_data_rows(self, parser):
        assert parser.parse(page("<tr><th>Datum</th></tr>")) == []

    @pytest.mark.parametrize("duration", ["0", "121"])
    def test_duration_out_of_range_is_fatal(self, parser, duration):
        with pytest.raises(ParseError) as exc_info:
            parser.parse(page(data_row(duration=duration)))

        assert "outside allowed range" in str(exc_info.value)
        assert exc_info.value.context["value"] == duration

    @pytest.mark.parametrize("duration,expected", [("1", 1), ("120", 120), ("45 min", 45)])
    def test_duration_in_range(self, parser, duration, expected):
        rows = parser.parse(page(data_row(duration=duration)))

        assert rows[0].duration_minutes == expected

    def test_unparseable_date_carries_html(self, parser):
        with pytest.raises(ParseError) as exc_info:
            parser.parse(page(data_row(date="2020-01-06")))

        assert exc_info.value.context["value"] == "2020-01-06"
        assert "<tr>" in exc_info.value.context["selection"]

    def test_unparseable_time(self, parser):
        with pytest.raises(ParseError, match="sunset start"):
            parser.parse(page(data_row(sunset_start="25:99")))

    def test_empty_duration(self, parser):
        with pytest.raises(ParseError, match="duration"):
            parser.parse(page(data_row(duration="--")))

    def test_custom_duration_range(self):
        parser = SunPageParser(timezone="Europe/Brussels", min_duration=30, max_duration=60)

        with pytest.raises(ParseError):
            parser.parse(page(data_row(duration="20")))


class TestParseInt:
    """Test lenient integer parsing."""

    def test_drops_non_digits(self):
        assert parse_int(" 4 2 min") == 42

    def test_no_digits(self):
        with pytest.raises(ValueError):
            parse_int("n/a")
