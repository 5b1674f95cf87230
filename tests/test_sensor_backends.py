"""Tests for the hwmon and psutil sensor backends."""

from collections import namedtuple
from unittest.mock import patch

import pytest

from tempsync.exceptions import ErrorKind, SensorBackendError
from tempsync.models import SensorBackendType, SensorConfig
from tempsync.sensors import FeatureKind, HwmonBackend, Quantity, TemperatureAggregator, open_backend
from tempsync.sensors.psutil_backend import PsutilBackend

shwtemp = namedtuple("shwtemp", ["label", "current", "high", "critical"])


@pytest.mark.integration
class TestHwmonBackend:
    """Test the sysfs hwmon backend against a fake tree."""

    def test_open_missing_root_raises(self, tmp_path):
        with pytest.raises(SensorBackendError) as exc_info:
            HwmonBackend(tmp_path / "missing").open()
        assert exc_info.value.kind is ErrorKind.UNREACHABLE_BACKEND
        assert "hwmon" in exc_info.value.user_message

    def test_chip_names(self, hwmon_tree):
        names = [chip.name for chip in HwmonBackend(hwmon_tree).open().chips()]
        assert names == ["hwmon0:k10temp", "hwmon1:nvme", "hwmon2:nct6775"]

    def test_features_grouped_with_labels(self, hwmon_tree):
        chip = next(iter(HwmonBackend(hwmon_tree).chips()))
        features = chip.features()

        assert len(features) == 1
        assert features[0].name == "temp1 (Tctl)"
        assert features[0].kind is FeatureKind.TEMPERATURE
        assert sorted(s.name for s in features[0].sub_features()) == ["temp1_input", "temp1_max"]

    def test_temperature_in_degrees(self, hwmon_tree):
        chip = next(iter(HwmonBackend(hwmon_tree).chips()))
        readings = {s.name: s.read() for s in chip.features()[0].sub_features()}

        assert readings["temp1_input"].quantity is Quantity.TEMPERATURE_INPUT
        assert readings["temp1_input"].value == 55.5
        assert readings["temp1_max"].quantity is Quantity.TEMPERATURE_MAX
        assert readings["temp1_max"].value == 70.0

    def test_other_feature_kinds(self, hwmon_tree):
        chip = list(HwmonBackend(hwmon_tree).chips())[2]
        kinds = {f.name: f.kind for f in chip.features()}
        assert kinds == {"fan1": FeatureKind.FAN, "in0": FeatureKind.VOLTAGE}

    def test_unreadable_value_raises(self, hwmon_tree):
        chip = list(HwmonBackend(hwmon_tree).chips())[1]
        temp2 = [f for f in chip.features() if f.name == "temp2"][0]
        with pytest.raises(ValueError):
            temp2.sub_features()[0].read()

    def test_aggregate_over_tree(self, hwmon_tree):
        aggregator = TemperatureAggregator(HwmonBackend(hwmon_tree).open())
        assert aggregator.sample() == 55.5
        assert [r.source for r in aggregator.readings()] == [
            "hwmon0:k10temp/temp1 (Tctl)",
            "hwmon1:nvme/temp1 (Composite)",
        ]

    def test_attributes_under_device_directory(self, tmp_path):
        device = tmp_path / "hwmon0" / "device"
        device.mkdir(parents=True)
        (device / "name").write_text("w83627ehf\n")
        (device / "temp1_input").write_text("47000\n")
        (device / "temp1_label").write_text("SYSTIN\n")

        chip = next(iter(HwmonBackend(tmp_path).open().chips()))

        assert chip.name == "hwmon0:w83627ehf"
        assert [f.name for f in chip.features()] == ["temp1 (SYSTIN)"]
        assert TemperatureAggregator(HwmonBackend(tmp_path)).sample() == 47.0

    def test_top_level_attributes_win_over_device(self, hwmon_tree):
        device = hwmon_tree / "hwmon0" / "device"
        device.mkdir()
        (device / "temp9_input").write_text("99000\n")

        chip = next(iter(HwmonBackend(hwmon_tree).chips()))

        assert [f.name for f in chip.features()] == ["temp1 (Tctl)"]

    def test_chip_without_name_file(self, tmp_path):
        chip_dir = tmp_path / "hwmon3"
        chip_dir.mkdir()
        (chip_dir / "temp1_input").write_text("30000")
        chip = next(iter(HwmonBackend(tmp_path).chips()))
        assert chip.name == "hwmon3:hwmon3"


@pytest.mark.unit
class TestPsutilBackend:
    """Test the psutil backend with a patched sensors_temperatures."""

    SENSORS = {
        "coretemp": [
            shwtemp("Package id 0", 58.0, 80.0, 100.0),
            shwtemp("Core 0", 54.0, 80.0, 100.0),
        ],
        "acpitz": [shwtemp("", 27.8, None, None)],
    }

    def test_features_and_sub_features(self):
        with patch("psutil.sensors_temperatures", return_value=self.SENSORS, create=True):
            chips = list(PsutilBackend().open().chips())

        assert [c.name for c in chips] == ["coretemp", "acpitz"]
        features = chips[0].features()
        assert [f.name for f in features] == ["Package id 0", "Core 0"]
        assert chips[1].features()[0].name == "temp1"

        subs = features[0].sub_features()
        assert [s.name for s in subs] == ["Package id 0_input", "Package id 0_max", "Package id 0_crit"]
        assert subs[0].read().quantity is Quantity.TEMPERATURE_INPUT

    def test_missing_threshold_raises(self):
        with patch("psutil.sensors_temperatures", return_value=self.SENSORS, create=True):
            acpi = list(PsutilBackend().chips())[1]
        max_sub = acpi.features()[0].sub_features()[1]
        with pytest.raises(ValueError):
            max_sub.read()

    def test_aggregate(self):
        with patch("psutil.sensors_temperatures", return_value=self.SENSORS, create=True):
            assert TemperatureAggregator(PsutilBackend()).sample() == 58.0

    def test_unsupported_platform(self):
        with patch("tempsync.sensors.psutil_backend.psutil") as fake_psutil:
            del fake_psutil.sensors_temperatures
            with pytest.raises(SensorBackendError):
                PsutilBackend().open()


@pytest.mark.unit
class TestOpenBackend:
    """Test backend selection from config."""

    def test_hwmon_from_config(self, hwmon_tree):
        backend = open_backend(SensorConfig(hwmon_path=hwmon_tree))
        assert isinstance(backend, HwmonBackend)
        assert backend.root == hwmon_tree

    def test_psutil_from_config(self):
        backend = open_backend(SensorConfig(backend=SensorBackendType.PSUTIL))
        assert isinstance(backend, PsutilBackend)
