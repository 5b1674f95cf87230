"""Pytest fixtures and in-memory backends for tests."""

from dataclasses import dataclass, field
from typing import Optional

import pytest

from tempsync.models import Color, ColorMapConfig
from tempsync.sensors import FeatureKind, Quantity, TypedReading


@dataclass
class FakeSubFeature:
    name: str
    quantity: Quantity = Quantity.TEMPERATURE_INPUT
    value: float = 0.0
    error: Optional[Exception] = None

    def read(self) -> TypedReading:
        if self.error is not None:
            raise self.error
        return TypedReading(self.quantity, self.value)


@dataclass
class FakeFeature:
    name: str
    kind: FeatureKind = FeatureKind.TEMPERATURE
    subs: list = field(default_factory=list)
    error: Optional[Exception] = None

    def sub_features(self):
        if self.error is not None:
            raise self.error
        return self.subs


@dataclass
class FakeChip:
    name: str
    feature_list: list = field(default_factory=list)
    error: Optional[Exception] = None

    def features(self):
        if self.error is not None:
            raise self.error
        return self.feature_list


class FakeSensorBackend:
    name = "fake"

    def __init__(self, chip_list=None, error: Optional[Exception] = None):
        self.chip_list = chip_list or []
        self.error = error

    def chips(self):
        if self.error is not None:
            raise self.error
        return self.chip_list


def temp_chip(name: str, *values: float) -> FakeChip:
    """Chip with one temperature feature per value."""
    return FakeChip(name, [
        FakeFeature(f"temp{i + 1}", subs=[FakeSubFeature(f"temp{i + 1}_input", value=v)])
        for i, v in enumerate(values)
    ])


class FakeLightingSession:
    """Lighting session recording writes.

    ``leds`` maps controller index to an LED count, or to an exception the
    LED count query raises.
    """

    def __init__(self, leds=None, count_error=None, write_error=None, protocol_version=4):
        self.leds = leds if leds is not None else {}
        self.count_error = count_error
        self.write_error = write_error
        self._protocol_version = protocol_version
        self.writes: list[tuple[int, list[Color]]] = []
        self.closed = False

    @property
    def protocol_version(self) -> int:
        return self._protocol_version

    def controller_count(self) -> int:
        if self.count_error is not None:
            raise self.count_error
        return len(self.leds)

    def controller_name(self, index: int) -> str:
        return f"Controller {index}"

    def controller_leds(self, index: int) -> int:
        value = self.leds[index]
        if isinstance(value, Exception):
            raise value
        return value

    def write_leds(self, index: int, colors) -> None:
        if self.write_error is not None:
            raise self.write_error
        self.writes.append((index, list(colors)))

    def close(self) -> None:
        self.closed = True


class FakeLightingBackend:
    def __init__(self, session=None, error: Optional[Exception] = None):
        self.session = session or FakeLightingSession()
        self.error = error
        self.client_name: Optional[str] = None

    def connect(self, client_name: str):
        if self.error is not None:
            raise self.error
        self.client_name = client_name
        return self.session


@pytest.fixture
def scale_config():
    """Config used by the end-to-end scenarios."""
    return ColorMapConfig(lower_temp=32, upper_temp=80, base_value=20, max_value=30)


@pytest.fixture
def three_chip_backend():
    return FakeSensorBackend([
        temp_chip("chip0", 45.2),
        temp_chip("chip1", 61.0),
        temp_chip("chip2", 38.9),
    ])


@pytest.fixture
def hwmon_tree(tmp_path):
    """Build a fake /sys/class/hwmon tree.

    hwmon0 (k10temp): temp1 Tctl 55.5C, temp1_max 70C
    hwmon1 (nvme):    temp1 Composite 41C, temp2 unreadable
    hwmon2 (nct6775): fan1 1200rpm, in0 0.9V
    """
    root = tmp_path / "hwmon"

    chip0 = root / "hwmon0"
    chip0.mkdir(parents=True)
    (chip0 / "name").write_text("k10temp\n")
    (chip0 / "temp1_input").write_text("55500\n")
    (chip0 / "temp1_max").write_text("70000\n")
    (chip0 / "temp1_label").write_text("Tctl\n")

    chip1 = root / "hwmon1"
    chip1.mkdir()
    (chip1 / "name").write_text("nvme\n")
    (chip1 / "temp1_input").write_text("41000\n")
    (chip1 / "temp1_label").write_text("Composite\n")
    (chip1 / "temp2_input").write_text("garbage\n")

    chip2 = root / "hwmon2"
    chip2.mkdir()
    (chip2 / "name").write_text("nct6775\n")
    (chip2 / "fan1_input").write_text("1200\n")
    (chip2 / "in0_input").write_text("900\n")

    return root
