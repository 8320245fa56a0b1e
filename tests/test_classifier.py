"""
Tests for daily rain classification.

Covers the strict threshold, the daytime window and local day boundaries.
"""

from datetime import datetime

import pytest
import pytz

from src.weather_reports.models import RainMeasurement
from src.weather_reports.processing import DailyRainClassifier

BRUSSELS = pytz.timezone("Europe/Brussels")


def local(*args):
    """Build an aware Brussels datetime."""
    return BRUSSELS.localize(datetime(*args))


class TestDailyRainClassifier:
    """Test cases for DailyRainClassifier."""

    @pytest.fixture
    def classifier(self):
        return DailyRainClassifier(timezone="Europe/Brussels")

    def test_sum_exactly_at_threshold_is_not_rain(self, classifier):
        days = classifier.classify(
            [RainMeasurement(local(2020, 1, 6, 12, 0), 0.1)],
            daytime_only=False,
            threshold_mm=0.1
        )

        assert len(days) == 1
        assert days[0].total == 0.1
        assert days[0].rained is False

    def test_sum_above_threshold_is_rain(self, classifier):
        days = classifier.classify(
            [
                RainMeasurement(local(2020, 1, 6, 10, 0), 0.1),
                RainMeasurement(local(2020, 1, 6, 11, 0), 0.2),
            ],
            daytime_only=False,
            threshold_mm=0.1
        )

        assert days[0].rained is True
        assert days[0].total == pytest.approx(0.3)

    @pytest.mark.parametrize("hour,minute,counted", [
        (6, 59, False),
        (7, 0, True),
        (22, 59, True),
        (23, 0, False),
    ])
    def test_daytime_window_boundaries(self, classifier, hour, minute, counted):
        days = classifier.classify(
            [RainMeasurement(local(2020, 1, 6, hour, minute), 5.0)],
            daytime_only=True,
            threshold_mm=0.1
        )

        assert len(days) == 1, "a night measurement still creates its day"
        assert days[0].total == (5.0 if counted else 0.0)
        assert days[0].rained is counted

    def test_whole_day_counts_night_measurements(self, classifier):
        days = classifier.classify(
            [RainMeasurement(local(2020, 1, 6, 2, 0), 5.0)],
            daytime_only=False,
            threshold_mm=0.1
        )

        assert days[0].rained is True

    def test_groups_by_local_date_not_utc(self, classifier):
        # 23:30 UTC on Jan 4th is 00:30 on Jan 5th in Brussels
        days = classifier.classify(
            [(datetime(2020, 1, 4, 23, 30), 1.0)],
            daytime_only=False,
            threshold_mm=0.1
        )

        assert [d.day.isoformat() for d in days] == ["2020-01-05"]

    def test_summer_time_offset(self, classifier):
        # 05:30 UTC in July is 07:30 local (CEST), inside the daytime window
        days = classifier.classify(
            [(pytz.UTC.localize(datetime(2020, 7, 1, 5, 30)), 1.0)],
            daytime_only=True,
            threshold_mm=0.1
        )

        assert days[0].total == 1.0

    def test_none_values_count_as_zero(self, classifier):
        days = classifier.classify(
            [
                RainMeasurement(local(2020, 1, 6, 12, 0), None),
                RainMeasurement(local(2020, 1, 6, 13, 0), 0.05),
            ],
            daytime_only=False,
            threshold_mm=0.1
        )

        assert days[0].total == 0.05
        assert days[0].rained is False

    def test_one_record_per_date_sorted(self, classifier):
        measurements = [
            RainMeasurement(local(2020, 1, 7, 12, 0), 1.0),
            RainMeasurement(local(2020, 1, 5, 12, 0), 0.0),
            RainMeasurement(local(2020, 1, 7, 13, 0), 1.0),
        ]

        days = classifier.classify(measurements, daytime_only=False, threshold_mm=0.1)

        assert [d.day.isoformat() for d in days] == ["2020-01-05", "2020-01-07"]
        assert days[1].total == 2.0

    def test_custom_daytime_window(self):
        classifier = DailyRainClassifier(
            timezone="Europe/Brussels", daytime_start_hour=9, daytime_end_hour=17
        )

        days = classifier.classify(
            [RainMeasurement(local(2020, 1, 6, 8, 0), 1.0)],
            daytime_only=True,
            threshold_mm=0.1
        )

        assert days[0].rained is False

    def test_empty_input(self, classifier):
        assert classifier.classify([], daytime_only=False, threshold_mm=0.1) == []
