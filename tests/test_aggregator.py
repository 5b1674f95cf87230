"""Tests for TemperatureAggregator."""

import itertools
import math

import pytest

from conftest import FakeChip, FakeFeature, FakeSensorBackend, FakeSubFeature, temp_chip
from tempsync.models import Reading
from tempsync.sensors import NO_DATA, FeatureKind, Quantity, TemperatureAggregator


@pytest.mark.unit
class TestSample:
    """Test reduction of all readings to one value."""

    def test_hottest_of_three_chips(self, three_chip_backend):
        """Scenario: readings {45.2, 61.0, 38.9} aggregate to 61.0."""
        assert TemperatureAggregator(three_chip_backend).sample() == 61.0

    def test_empty_backend_returns_no_data(self):
        assert TemperatureAggregator(FakeSensorBackend()).sample() == NO_DATA == 0.0

    def test_order_independent(self):
        values = [45.2, 61.0, 38.9, 72.4]
        for perm in itertools.permutations(values):
            backend = FakeSensorBackend([temp_chip(f"chip{i}", v) for i, v in enumerate(perm)])
            assert TemperatureAggregator(backend).sample() == 72.4

    def test_multiple_features_per_chip(self):
        backend = FakeSensorBackend([temp_chip("coretemp", 40.0, 52.0, 47.5)])
        assert TemperatureAggregator(backend).sample() == 52.0

    def test_negative_readings_are_kept(self):
        backend = FakeSensorBackend([temp_chip("outdoor", -12.0, -3.5)])
        assert TemperatureAggregator(backend).sample() == -3.5

    def test_ignores_non_temperature_features(self):
        fan = FakeFeature("fan1", kind=FeatureKind.FAN, subs=[
            FakeSubFeature("fan1_input", quantity=Quantity.TEMPERATURE_INPUT, value=1500.0),
        ])
        backend = FakeSensorBackend([FakeChip("nct6775", [fan]), temp_chip("k10temp", 50.0)])
        assert TemperatureAggregator(backend).sample() == 50.0

    def test_ignores_temperature_thresholds(self):
        feature = FakeFeature("temp1", subs=[
            FakeSubFeature("temp1_input", value=48.0),
            FakeSubFeature("temp1_max", quantity=Quantity.TEMPERATURE_MAX, value=95.0),
            FakeSubFeature("temp1_crit", quantity=Quantity.TEMPERATURE_CRIT, value=105.0),
        ])
        backend = FakeSensorBackend([FakeChip("k10temp", [feature])])
        assert TemperatureAggregator(backend).sample() == 48.0

    def test_discards_nan_and_infinite(self):
        feature = FakeFeature("temp1", subs=[
            FakeSubFeature("a", value=math.nan),
            FakeSubFeature("b", value=math.inf),
            FakeSubFeature("c", value=-math.inf),
            FakeSubFeature("d", value=44.0),
        ])
        backend = FakeSensorBackend([FakeChip("acpi", [feature])])
        assert TemperatureAggregator(backend).sample() == 44.0

    def test_only_nan_returns_no_data(self):
        backend = FakeSensorBackend([temp_chip("acpi", math.nan)])
        assert TemperatureAggregator(backend).sample() == NO_DATA


@pytest.mark.unit
class TestSoftFailures:
    """A broken sensor never aborts the scan."""

    def test_unreadable_sub_feature_is_skipped(self):
        feature = FakeFeature("temp1", subs=[
            FakeSubFeature("temp1_input", error=OSError("EIO")),
        ])
        backend = FakeSensorBackend([FakeChip("broken", [feature]), temp_chip("ok", 39.0)])
        assert TemperatureAggregator(backend).sample() == 39.0

    def test_failing_feature_enumeration_is_skipped(self):
        broken = FakeFeature("temp1", error=RuntimeError("gone"))
        backend = FakeSensorBackend([FakeChip("broken", [broken]), temp_chip("ok", 41.0)])
        assert TemperatureAggregator(backend).sample() == 41.0

    def test_failing_chip_is_skipped(self):
        backend = FakeSensorBackend([
            FakeChip("broken", error=PermissionError("denied")),
            temp_chip("ok", 43.0),
        ])
        assert TemperatureAggregator(backend).sample() == 43.0

    def test_failing_chip_enumeration_returns_no_data(self):
        backend = FakeSensorBackend(error=OSError("hwmon vanished"))
        assert TemperatureAggregator(backend).sample() == NO_DATA


@pytest.mark.unit
class TestDocumentation:

    def test_class_docstring_closes_on_own_line(self):
        assert TemperatureAggregator.__doc__.splitlines()[-1].strip() == ""


@pytest.mark.unit
class TestReadings:
    """Test provenance of individual readings."""

    def test_readings_carry_provenance(self, three_chip_backend):
        readings = list(TemperatureAggregator(three_chip_backend).readings())
        assert readings == [
            Reading(chip="chip0", feature="temp1", value=45.2),
            Reading(chip="chip1", feature="temp1", value=61.0),
            Reading(chip="chip2", feature="temp1", value=38.9),
        ]
        assert readings[1].source == "chip1/temp1"
