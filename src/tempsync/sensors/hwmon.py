"""Linux hwmon sensor backend.

Each `/sys/class/hwmon/hwmonN` directory is a chip. Attribute files are
named `<type><index>_<item>` (e.g. `temp1_input`, `fan2_input`, `in0_max`);
`<type><index>` is the feature and each `_<item>` file except `_label` is a
sub-feature. Temperatures are reported in millidegrees Celsius.
"""

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from tempsync.exceptions import SensorBackendError

from .protocols import FeatureKind, Quantity, TypedReading

logger = logging.getLogger(__name__)

_ATTRIBUTE_RE = re.compile(r"^(?P<type>[a-z]+)(?P<index>\d+)_(?P<item>[a-z_]+)$")

_FEATURE_KINDS = {
    "temp": FeatureKind.TEMPERATURE,
    "fan": FeatureKind.FAN,
    "in": FeatureKind.VOLTAGE,
    "curr": FeatureKind.CURRENT,
    "power": FeatureKind.POWER,
}

_TEMPERATURE_ITEMS = {
    "input": Quantity.TEMPERATURE_INPUT,
    "max": Quantity.TEMPERATURE_MAX,
    "min": Quantity.TEMPERATURE_MIN,
    "crit": Quantity.TEMPERATURE_CRIT,
}

# hwmon temperature unit
_MILLI = 1000.0


def _read_name(chip_dir: Path) -> str:
    for name_file in (chip_dir / "name", chip_dir / "device" / "name"):
        try:
            return name_file.read_text(encoding="utf-8").strip()
        except OSError:
            continue
    return chip_dir.name


@dataclass
class HwmonSubFeature:
    """A single `<feature>_<item>` attribute file."""

    name: str
    path: Path
    kind: FeatureKind
    item: str

    def read(self) -> TypedReading:
        raw = self.path.read_text(encoding="ascii").strip()
        value = float(int(raw))

        if self.kind is FeatureKind.TEMPERATURE:
            quantity = _TEMPERATURE_ITEMS.get(self.item, Quantity.TEMPERATURE_OTHER)
            return TypedReading(quantity, value / _MILLI)
        if self.kind is FeatureKind.FAN:
            return TypedReading(Quantity.FAN, value)
        if self.kind is FeatureKind.VOLTAGE:
            return TypedReading(Quantity.VOLTAGE, value / _MILLI)
        return TypedReading(Quantity.OTHER, value)


@dataclass
class HwmonFeature:
    """A `<type><index>` group of attribute files, e.g. `temp1`."""

    name: str
    kind: FeatureKind
    label: str = ""
    attributes: list[HwmonSubFeature] = field(default_factory=list)

    def sub_features(self) -> list[HwmonSubFeature]:
        return list(self.attributes)


@dataclass
class HwmonChip:
    """One `hwmonN` directory.

    Older drivers keep their attribute files in `hwmonN/device/` instead of
    `hwmonN/`; that directory is used when the top level has none.
    """

    name: str
    path: Path

    def _attributes(self) -> list[tuple[Path, re.Match]]:
        for directory in (self.path, self.path / "device"):
            if not directory.is_dir():
                continue
            found = []
            for entry in sorted(directory.iterdir()):
                match = _ATTRIBUTE_RE.match(entry.name)
                if match and entry.is_file():
                    found.append((entry, match))
            if found:
                return found
        return []

    def features(self) -> list[HwmonFeature]:
        features: dict[str, HwmonFeature] = {}

        for attribute, match in self._attributes():
            feature_name = f"{match['type']}{match['index']}"
            feature = features.get(feature_name)
            if feature is None:
                kind = _FEATURE_KINDS.get(match["type"], FeatureKind.OTHER)
                feature = features[feature_name] = HwmonFeature(feature_name, kind)

            if match["item"] == "label":
                try:
                    feature.label = attribute.read_text(encoding="utf-8").strip()
                except OSError:
                    pass
                continue

            feature.attributes.append(
                HwmonSubFeature(attribute.name, attribute, feature.kind, match["item"])
            )

        for feature in features.values():
            if feature.label:
                feature.name = f"{feature.name} ({feature.label})"
        return list(features.values())


class HwmonBackend:
    """Sensor backend over the hwmon sysfs tree."""

    name = "hwmon"

    def __init__(self, root: Path = Path("/sys/class/hwmon")):
        self.root = Path(root)

    def open(self) -> "HwmonBackend":
        """
        Check the hwmon tree is present.

        Raises:
            SensorBackendError: If the root directory is missing
        """
        if not self.root.is_dir():
            raise SensorBackendError(self.name, f"{self.root} is not a directory")
        logger.info(f"Using hwmon sensors at {self.root}")
        return self

    def chips(self) -> Iterator[HwmonChip]:
        for entry in sorted(self.root.iterdir()):
            if not entry.is_dir():
                continue
            chip_name = _read_name(entry)
            yield HwmonChip(f"{entry.name}:{chip_name}", entry)
